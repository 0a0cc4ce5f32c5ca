"""Core parsing pipeline for resume documents."""

from .data_models import ResumeParseResult
from .exceptions import CorruptDocument, EmptyDocument, ResumeParseError, UnsupportedFormat
from .scored_value import ScoredValue

__all__ = [
    'ResumeParseResult',
    'ScoredValue',
    'ResumeParseError',
    'UnsupportedFormat',
    'CorruptDocument',
    'EmptyDocument',
]
