import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_onboarding.core.resume_parser import ResumeParser
from resume_onboarding.core.document_reader import DocumentReader


@pytest.fixture
def scenario_a_lines():
    """Fixture to provide the minimal two-section resume"""
    return [
        "Jane Doe",
        "EXPERIENCE",
        "ACME Corp Jan 2020 - Dec 2021",
        "Software Engineer San Francisco, CA",
        "- Built X",
        "- Led Y",
        "EDUCATION",
        "MIT Sep 2016 - May 2020",
        "BSc Computer Science",
    ]


@pytest.fixture
def sample_resume_text():
    """Fixture to provide a complete sample resume"""
    return "\n".join([
        "Jane Doe",
        "San Francisco, CA",
        "jane.doe@example.com | (650) 253-0000 | github.com/janedoe",
        "SUMMARY",
        "Backend engineer focused on data platforms.",
        "EXPERIENCE",
        "ACME Corp Jan 2020 - Present",
        "Senior Software Engineer San Francisco, CA",
        "- Built ingestion service in Python",
        "- Led migration to Kubernetes",
        "",
        "Globex Jun 2017 - Dec 2019",
        "Software Engineer | Austin, TX",
        "- Maintained billing APIs for customers",
        "EDUCATION",
        "MIT Sep 2013 - May 2017",
        "BSc Computer Science (GPA: 3.8)",
        "PROJECTS",
        "Resume Parser (Jan 2023 - Mar 2023)",
        "- Parsed resumes with Python",
        "- https://github.com/janedoe/resume-parser",
        "SKILLS",
        "Python, Go, Docker, PostgreSQL, Git",
    ])


@pytest.fixture
def resume_parser():
    """Fixture to provide ResumeParser instance"""
    return ResumeParser(phone_region="US")


@pytest.fixture
def document_reader():
    """Fixture to provide DocumentReader instance"""
    return DocumentReader(max_document_size=1024 * 1024, max_chars=50000)
