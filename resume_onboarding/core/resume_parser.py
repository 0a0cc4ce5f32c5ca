import logging
from pathlib import Path
from typing import List, Optional, Sequence

from config.settings import settings
from .block_segmenter import split_into_blocks
from .data_models import ResumeMeta, ResumeParseResult, SectionSpan
from .document_reader import TEXT_MIME, DocumentReader, ExtractedText, guess_mime
from .exceptions import EmptyDocument, ResumeParseError
from .extractors import (
    SkillsExtractor,
    extract_contact,
    extract_education,
    extract_experience,
    extract_projects,
)
from .scored_value import ScoredValue
from .section_detector import SectionDetector
from .text import normalize_whitespace, sha256, to_lines

logger = logging.getLogger(__name__)

SUMMARY_CONFIDENCE = 0.5
# Applied to experience items read without an experience heading
FALLBACK_CONFIDENCE_SCALE = 0.5


class ResumeParser:
    """Runs one document through extraction, sectioning and field extraction.

    A parser holds only immutable collaborators, so one instance can be reused for many
    documents and separate instances can run in parallel.
    """

    def __init__(self,
                 document_reader: DocumentReader = None,
                 section_detector: SectionDetector = None,
                 skills_extractor: SkillsExtractor = None,
                 phone_region: Optional[str] = None):
        self.doc_reader = document_reader or DocumentReader()
        self.section_detector = section_detector or SectionDetector()
        self.skills_extractor = skills_extractor or SkillsExtractor()
        self.phone_region = phone_region or settings.DEFAULT_PHONE_REGION

    def parse_bytes(self, data: bytes, filename: Optional[str] = None) -> ResumeParseResult:
        """Parse a document buffer. Fatal conditions are reported in ``errors``, never raised."""
        digest = sha256(data)
        mime = guess_mime(data, filename)
        try:
            extracted = self.doc_reader.extract(data, mime)
            return self._parse_extracted(extracted, digest)
        except ResumeParseError as e:
            logger.error(f"Failed to parse {filename or 'document'}: {e}")
            return ResumeParseResult(
                meta=ResumeMeta(file_type=mime, sha256=digest),
                errors=[str(e)],
            )

    def parse_file(self, file_path: str) -> ResumeParseResult:
        """Parse a resume file from disk"""
        path = Path(file_path)
        return self.parse_bytes(path.read_bytes(), filename=path.name)

    def parse_text(self, text: str) -> ResumeParseResult:
        """Parse already-extracted plain text"""
        return self.parse_bytes((text or "").encode("utf-8"), filename="resume.txt")

    def _parse_extracted(self, extracted: ExtractedText, digest: str) -> ResumeParseResult:
        text = normalize_whitespace(extracted.text)
        if not text:
            raise EmptyDocument(details={"mime": extracted.mime})

        lines = to_lines(text)
        logger.debug(f"Normalized text into {len(lines)} lines")
        meta = ResumeMeta(file_type=extracted.mime, page_count=extracted.page_count, sha256=digest)
        return self.parse_lines(lines, meta)

    def parse_lines(self, lines: Sequence[str], meta: Optional[ResumeMeta] = None) -> ResumeParseResult:
        """Run sectioning and field extraction over normalized lines"""
        lines = list(lines)
        text = "\n".join(lines)
        if meta is None:
            meta = ResumeMeta(file_type=TEXT_MIME, sha256=sha256(text.encode("utf-8")))

        sections = self.section_detector.detect(lines)
        logger.debug(f"Detected sections: {[(s.name, s.start_line, s.end_line) for s in sections]}")

        contact = extract_contact(text, self.phone_region)

        experience_span = self._span(sections, "experience")
        if experience_span is not None:
            experience = extract_experience(split_into_blocks(self._region(lines, experience_span)))
        else:
            logger.debug("No experience heading, scanning the whole document")
            experience = extract_experience(split_into_blocks(lines), confidence_scale=FALLBACK_CONFIDENCE_SCALE)

        education = extract_education(self._region(lines, self._span(sections, "education")))
        projects = extract_projects(split_into_blocks(self._region(lines, self._span(sections, "projects"))))

        skills_span = self._span(sections, "skills")
        skills_text = "\n".join(self._region(lines, skills_span)) if skills_span else text
        skills = self.skills_extractor.extract(skills_text)

        summary_text = " ".join(l for l in self._region(lines, self._span(sections, "summary")) if l).strip()
        summary = ScoredValue.of(summary_text or None, SUMMARY_CONFIDENCE)

        logger.debug(
            f"Extracted {len(experience)} experience, {len(education)} education, "
            f"{len(projects)} project items and {len(skills.raw.value or [])} skills"
        )

        result = ResumeParseResult(
            meta=meta,
            contact=contact,
            sections=sections,
            experience=experience,
            education=education,
            projects=projects,
            skills=skills,
            summary=summary,
        )
        warnings = self._warnings(result)
        if warnings:
            logger.info(f"Parse completed with {len(warnings)} warnings")
        return result.model_copy(update={"warnings": warnings})

    @staticmethod
    def _span(sections: Sequence[SectionSpan], name: str) -> Optional[SectionSpan]:
        # Highest-scoring heading wins; ties keep document order
        matches = [s for s in sections if s.name == name]
        if not matches:
            return None
        return max(matches, key=lambda s: s.match_score)

    @staticmethod
    def _region(lines: Sequence[str], span: Optional[SectionSpan]) -> List[str]:
        if span is None:
            return []
        return list(lines[span.start_line + 1:span.end_line])

    @staticmethod
    def _warnings(result: ResumeParseResult) -> List[str]:
        warnings = []
        if not result.contact.email:
            warnings.append("Email not detected.")
        if not result.contact.phone:
            warnings.append("Phone not detected.")
        if not result.experience:
            warnings.append("Experience section not detected.")
        if not result.education:
            warnings.append("Education section not detected.")
        if not result.projects:
            warnings.append("Projects section not detected.")
        if not result.skills.raw.value:
            warnings.append("Skills section not detected.")
        if not result.summary:
            warnings.append("Summary section not detected.")
        return warnings


def parse_resume(data: bytes, filename: Optional[str] = None) -> ResumeParseResult:
    """Parse a document buffer with default settings"""
    return ResumeParser().parse_bytes(data, filename)
