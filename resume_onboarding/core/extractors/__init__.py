"""Field extractors. Each returns scored values and never raises on malformed content."""

from .contact import (
    extract_contact,
    extract_email,
    extract_links,
    extract_location,
    extract_name,
    extract_phone,
    refine_name,
)
from .education import extract_education
from .experience import extract_experience
from .projects import extract_projects
from .skills import SkillsExtractor, extract_skills

__all__ = [
    'extract_contact',
    'extract_email',
    'extract_links',
    'extract_location',
    'extract_name',
    'extract_phone',
    'refine_name',
    'extract_education',
    'extract_experience',
    'extract_projects',
    'SkillsExtractor',
    'extract_skills',
]
