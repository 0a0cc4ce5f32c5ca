import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import chardet
import mammoth
import pdfplumber
import PyPDF2
from docx import Document
from pdfminer.high_level import extract_text as pdfminer_extract_text
from pdfminer.layout import LAParams

from config.settings import settings
from .exceptions import CorruptDocument, UnsupportedFormat

logger = logging.getLogger(__name__)

PDF_MIME = 'application/pdf'
DOCX_MIME = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'
DOC_MIME = 'application/msword'
TEXT_MIME = 'text/plain'

EXTENSION_MIME_TYPES = {
    '.pdf': PDF_MIME,
    '.docx': DOCX_MIME,
    '.doc': DOC_MIME,
    '.txt': TEXT_MIME,
}


@dataclass(frozen=True)
class ExtractedText:
    text: str
    mime: str
    page_count: Optional[int] = None


def sniff_mime(data: bytes) -> Optional[str]:
    """Detect the document type from its byte signature, or None when inconclusive"""
    header = data[:8]
    if header.startswith(b'%PDF-'):
        return PDF_MIME
    if header.startswith(b'PK\x03\x04'):
        return DOCX_MIME
    if header.startswith(b'\xD0\xCF\x11\xE0'):
        return DOC_MIME
    if data and b'\x00' not in data[:4096]:
        result = chardet.detect(data[:10000])
        if result['encoding'] and result['confidence'] >= 0.5:
            return TEXT_MIME
    return None


def guess_mime(data: bytes, filename: Optional[str] = None) -> str:
    """Signature first, then the filename extension, then PDF as the common case"""
    mime = sniff_mime(data)
    if mime:
        return mime
    if filename:
        mime = EXTENSION_MIME_TYPES.get(Path(filename).suffix.lower())
        if mime:
            return mime
    return PDF_MIME


class DocumentReader:
    """Turns a resume byte buffer into raw text"""

    def __init__(self,
                 pdf_methods: Optional[List[str]] = None,
                 docx_methods: Optional[List[str]] = None,
                 max_document_size: int = None,
                 max_chars: int = None,
                 min_pdf_chars: int = None):
        self.pdf_methods = pdf_methods or settings.PDF_EXTRACTION_METHODS
        self.docx_methods = docx_methods or settings.DOCX_EXTRACTION_METHODS
        self.max_document_size = max_document_size or settings.MAX_DOCUMENT_SIZE
        self.max_chars = max_chars or settings.MAX_TEXT_CHARS
        self.min_pdf_chars = min_pdf_chars if min_pdf_chars is not None else settings.MIN_PDF_TEXT_CHARS

        self._pdf_extractors: Dict[str, Callable[[bytes], Tuple[str, Optional[int]]]] = {
            'pdfplumber': self._extract_with_pdfplumber,
            'pdfminer': self._extract_with_pdfminer,
            'pypdf2': self._extract_with_pypdf2,
        }
        self._docx_extractors: Dict[str, Callable[[bytes], str]] = {
            'mammoth': self._extract_with_mammoth,
            'python-docx': self._extract_with_python_docx,
        }

    def detect_encoding(self, data: bytes) -> str:
        """Detect text encoding, reading a larger sample when confidence is low"""
        result = chardet.detect(data[:10000])
        if result['confidence'] < 0.8:
            result = chardet.detect(data[:50000])
        return result['encoding'] or 'utf-8'

    def _extract_with_pdfplumber(self, data: bytes) -> Tuple[str, Optional[int]]:
        text = ""
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text += page_text + "\n"
            return text, len(pdf.pages)

    def _extract_with_pdfminer(self, data: bytes) -> Tuple[str, Optional[int]]:
        laparams = LAParams(
            line_margin=0.5,
            word_margin=0.1,
            char_margin=2.0,
            boxes_flow=0.5,
            detect_vertical=True
        )
        return pdfminer_extract_text(io.BytesIO(data), laparams=laparams), None

    def _extract_with_pypdf2(self, data: bytes) -> Tuple[str, Optional[int]]:
        text = ""
        reader = PyPDF2.PdfReader(io.BytesIO(data))
        for page in reader.pages:
            text += (page.extract_text() or "") + "\n"
        return text, len(reader.pages)

    def _extract_with_mammoth(self, data: bytes) -> str:
        result = mammoth.extract_raw_text(io.BytesIO(data))
        return result.value or ""

    def _extract_with_python_docx(self, data: bytes) -> str:
        doc = Document(io.BytesIO(data))
        text_parts = []
        for paragraph in doc.paragraphs:
            if paragraph.text.strip():
                text_parts.append(paragraph.text)

        for table in doc.tables:
            for row in table.rows:
                row_text = ' | '.join(cell.text for cell in row.cells)
                if row_text.strip():
                    text_parts.append(row_text)
        return '\n'.join(text_parts)

    def read_pdf(self, data: bytes) -> ExtractedText:
        """Try each configured PDF method until one yields enough text"""
        best_text = None
        page_count = None
        errors = {}
        for name in self.pdf_methods:
            method = self._pdf_extractors[name]
            try:
                text, pages = method(data)
            except Exception as e:
                logger.warning(f"PDF method {name} failed: {e}")
                errors[name] = str(e)
                continue
            if page_count is None:
                page_count = pages
            if best_text is None or len(text.strip()) > len(best_text.strip()):
                best_text = text
            if len(text.strip()) >= self.min_pdf_chars:
                logger.info(f"Extracted PDF text using {name}")
                break

        if best_text is None:
            raise CorruptDocument("No PDF extraction method could read the document", details=errors)
        return ExtractedText(text=best_text, mime=PDF_MIME, page_count=page_count)

    def read_docx(self, data: bytes) -> ExtractedText:
        """Read DOCX, preferring mammoth and falling back to python-docx"""
        errors = {}
        text = None
        for name in self.docx_methods:
            try:
                text = self._docx_extractors[name](data)
            except Exception as e:
                logger.warning(f"DOCX method {name} failed: {e}")
                errors[name] = str(e)
                continue
            if text.strip():
                break

        if text is None:
            raise CorruptDocument("No DOCX extraction method could read the document", details=errors)
        return ExtractedText(text=text, mime=DOCX_MIME)

    def read_text(self, data: bytes) -> ExtractedText:
        encoding = self.detect_encoding(data)
        try:
            text = data.decode(encoding, errors='replace')
        except LookupError:
            text = data.decode('utf-8', errors='replace')
        return ExtractedText(text=text, mime=TEXT_MIME)

    def extract(self, data: bytes, mime: str) -> ExtractedText:
        """Extract raw text for a declared or sniffed MIME type"""
        if len(data) > self.max_document_size:
            raise UnsupportedFormat(
                f"Document exceeds {self.max_document_size} bytes",
                details={'size': len(data)},
            )

        if 'pdf' in mime:
            result = self.read_pdf(data)
        elif 'wordprocessingml' in mime:
            result = self.read_docx(data)
        elif mime.startswith('text'):
            result = self.read_text(data)
        else:
            logger.warning(f"Unrecognized type {mime}, retrying as PDF")
            try:
                result = self.read_pdf(data)
            except CorruptDocument as e:
                raise UnsupportedFormat(f"Unsupported document type: {mime}", details=e.details) from e

        if len(result.text) > self.max_chars:
            result = ExtractedText(text=result.text[:self.max_chars], mime=result.mime, page_count=result.page_count)
        return result

    def read_document(self, file_path: str) -> Tuple[bytes, ExtractedText]:
        """Read a document from disk and extract its text"""
        data = Path(file_path).read_bytes()
        return data, self.extract(data, guess_mime(data, file_path))
