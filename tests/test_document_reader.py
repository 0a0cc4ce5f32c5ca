import pytest

from resume_onboarding.core.document_reader import (
    DOC_MIME,
    DOCX_MIME,
    PDF_MIME,
    TEXT_MIME,
    DocumentReader,
    guess_mime,
    sniff_mime,
)
from resume_onboarding.core.exceptions import CorruptDocument, UnsupportedFormat


def _raise(message):
    def method(data):
        raise ValueError(message)
    return method


def test_read_text_bytes(document_reader):
    """Test reading plain text bytes"""
    result = document_reader.extract(b"Jane Doe\nSoftware Engineer", TEXT_MIME)
    assert result.text == "Jane Doe\nSoftware Engineer"
    assert result.mime == TEXT_MIME
    assert result.page_count is None


def test_detect_encoding(document_reader, tmp_path):
    """Test encoding detection on a UTF-8 file"""
    test_content = "R\u00e9sum\u00e9: Jos\u00e9 Mu\u00f1oz, Z\u00fcrich, S\u00e3o Paulo"
    path = tmp_path / "test_utf8.txt"
    path.write_text(test_content, encoding="utf-8")

    data, result = document_reader.read_document(str(path))
    assert data == test_content.encode("utf-8")
    assert result.text == test_content


def test_read_nonexistent_file(document_reader, tmp_path):
    with pytest.raises(FileNotFoundError):
        document_reader.read_document(str(tmp_path / "missing.pdf"))


def test_sniff_mime_signatures():
    assert sniff_mime(b"%PDF-1.7\n...") == PDF_MIME
    assert sniff_mime(b"PK\x03\x04rest-of-zip") == DOCX_MIME
    assert sniff_mime(b"\xD0\xCF\x11\xE0\xA1\xB1\x1A\xE1") == DOC_MIME
    assert sniff_mime(b"plain text resume") == TEXT_MIME
    assert sniff_mime(b"\x00\x01\x02\x03") is None
    assert sniff_mime(b"") is None


def test_guess_mime_uses_extension_hint():
    assert guess_mime(b"\x00\x00", "cv.docx") == DOCX_MIME
    assert guess_mime(b"\x00\x00", "cv.TXT") == TEXT_MIME
    assert guess_mime(b"\x00\x00", None) == PDF_MIME
    assert guess_mime(b"%PDF-1.4", "cv.docx") == PDF_MIME


def test_pdf_chain_falls_back(document_reader):
    reader = DocumentReader(pdf_methods=["pdfplumber", "pdfminer"], min_pdf_chars=10)
    reader._pdf_extractors["pdfplumber"] = lambda data: ("hi", 2)
    reader._pdf_extractors["pdfminer"] = lambda data: ("Jane Doe Software Engineer", None)

    result = reader.extract(b"%PDF-1.4", PDF_MIME)
    assert result.text == "Jane Doe Software Engineer"
    assert result.page_count == 2
    assert result.mime == PDF_MIME


def test_pdf_chain_stops_at_first_sufficient_method():
    reader = DocumentReader(pdf_methods=["pdfplumber", "pdfminer"], min_pdf_chars=5)
    reader._pdf_extractors["pdfplumber"] = lambda data: ("Jane Doe Engineer", 1)
    reader._pdf_extractors["pdfminer"] = _raise("should not run")

    assert reader.extract(b"%PDF-1.4", PDF_MIME).text == "Jane Doe Engineer"


def test_pdf_all_methods_fail():
    reader = DocumentReader(pdf_methods=["pdfplumber", "pypdf2"])
    reader._pdf_extractors["pdfplumber"] = _raise("bad xref")
    reader._pdf_extractors["pypdf2"] = _raise("EOF marker not found")

    with pytest.raises(CorruptDocument) as exc_info:
        reader.extract(b"%PDF-1.4 broken", PDF_MIME)
    assert exc_info.value.code == "corrupt_document"
    assert set(exc_info.value.details) == {"pdfplumber", "pypdf2"}


def test_docx_chain_falls_back():
    reader = DocumentReader(docx_methods=["mammoth", "python-docx"])
    reader._docx_extractors["mammoth"] = _raise("not a zip")
    reader._docx_extractors["python-docx"] = lambda data: "Jane Doe"

    result = reader.extract(b"PK\x03\x04", DOCX_MIME)
    assert result.text == "Jane Doe"
    assert result.mime == DOCX_MIME


def test_unknown_type_retries_as_pdf():
    reader = DocumentReader(pdf_methods=["pdfplumber"])
    reader._pdf_extractors["pdfplumber"] = lambda data: ("Recovered resume text body", 1)

    result = reader.extract(b"\x00\x01", "application/octet-stream")
    assert result.mime == PDF_MIME
    assert result.text == "Recovered resume text body"


def test_unknown_type_with_failed_fallback_is_unsupported():
    reader = DocumentReader(pdf_methods=["pdfplumber"])
    reader._pdf_extractors["pdfplumber"] = _raise("not a pdf")

    with pytest.raises(UnsupportedFormat):
        reader.extract(b"\x00\x01", "application/octet-stream")


def test_oversized_document_rejected():
    reader = DocumentReader(max_document_size=10)
    with pytest.raises(UnsupportedFormat) as exc_info:
        reader.extract(b"x" * 20, TEXT_MIME)
    assert exc_info.value.details == {"size": 20}


def test_text_is_truncated():
    reader = DocumentReader(max_chars=5)
    assert reader.extract(b"abcdefghij", TEXT_MIME).text == "abcde"
