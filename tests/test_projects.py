from resume_onboarding.core.data_models import Block
from resume_onboarding.core.extractors.projects import extract_projects


def test_project_with_dates_and_repo_link():
    block = Block(lines=[
        "Resume Parser (Jan 2023 - Mar 2023)",
        "- Parsed resumes with Python",
        "https://github.com/jane/resume-parser",
    ])
    [item] = extract_projects([block])
    assert item.title.value == "Resume Parser"
    assert item.title.confidence == 0.9
    assert item.description_raw is None
    assert item.dates.start == "2023-01-01"
    assert item.dates.end == "2023-03-01"
    assert item.links.value == ["https://github.com/jane/resume-parser"]
    assert item.links.confidence == 0.9
    assert item.bullets.value[0] == "Parsed resumes with Python"
    assert item.bullets.confidence == 0.85


def test_project_with_description():
    block = Block(lines=[
        "Portfolio Site \u2013 personal website built with React",
        "- Deployed at janedoe.dev",
    ])
    [item] = extract_projects([block])
    assert item.title_raw == "Portfolio Site"
    assert item.description_raw == "personal website built with React"
    assert item.links.value == ["janedoe.dev"]
    assert item.dates.confidence == 0.0


def test_hyphenated_project_name():
    [item] = extract_projects([Block(lines=["Auto-Grader - grades homework"])])
    assert item.title.value == "Auto-Grader"
    assert item.description_raw == "grades homework"


def test_header_without_pattern_is_the_title():
    [item] = extract_projects([Block(lines=["Chess Engine"])])
    assert item.title.value == "Chess Engine"
    assert item.bullets.value == []
    assert item.bullets.confidence == 0.0
    assert item.links.value == []
    assert item.links.confidence == 0.0
