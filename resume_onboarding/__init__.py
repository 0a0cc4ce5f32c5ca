"""Resume onboarding: turn an unstructured resume document into a confidence-scored profile."""

from .core.resume_parser import ResumeParser, parse_resume

__all__ = [
    'ResumeParser',
    'parse_resume',
]
