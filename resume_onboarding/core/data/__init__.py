"""Data package for resume parser."""

from .sections import SECTION_ALIASES
from .taxonomy import DEFAULT_SKILL_TAXONOMY

__all__ = [
    'SECTION_ALIASES',
    'DEFAULT_SKILL_TAXONOMY',
]
