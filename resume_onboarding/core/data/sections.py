"""Heading aliases for the canonical resume sections."""

SECTION_ALIASES = {
    "experience": (
        "experience",
        "work experience",
        "professional experience",
        "employment",
        "employment history",
        "work history",
        "career history",
    ),
    "education": (
        "education",
        "academic",
        "academics",
        "education & training",
        "educational background",
    ),
    "projects": (
        "projects",
        "personal projects",
        "academic projects",
        "key projects",
        "side projects",
        "project experience",
    ),
    "skills": (
        "skills",
        "technical skills",
        "technologies",
        "tech stack",
        "core competencies",
        "skills & tools",
    ),
    "summary": (
        "summary",
        "profile",
        "objective",
        "about me",
        "professional summary",
        "career objective",
    ),
}
