import pytest

from resume_onboarding.core.extractors.skills import SkillsExtractor, extract_skills


def test_default_taxonomy_alphabetical():
    """Test matches are deduplicated and sorted"""
    result = extract_skills("Proficient in Python, Go, and Docker.")
    assert result.raw.value == ["Docker", "Go", "Python"]
    assert result.raw.confidence == 0.9
    assert result.categorized.value == {"languages": ["Go", "Python"], "devops": ["Docker"]}
    assert result.categorized.confidence == 0.9


def test_whole_token_matching():
    assert extract_skills("JavaScript only").raw.value == ["JavaScript"]
    assert extract_skills("Experienced with C++ and Java").raw.value == ["C++", "Java"]


def test_custom_taxonomy():
    extractor = SkillsExtractor({"ml": ["PyTorch", "scikit-learn"]})
    result = extractor.extract("Used scikit-learn and pytorch daily")
    assert result.raw.value == ["PyTorch", "scikit-learn"]
    assert result.categorized.value == {"ml": ["PyTorch", "scikit-learn"]}


def test_no_skills():
    result = extract_skills("Nothing relevant here")
    assert result.raw.value == []
    assert result.raw.confidence == 0.0
    assert result.categorized.value == {}
    assert result.categorized.confidence == 0.0


def test_taxonomy_is_immutable():
    extractor = SkillsExtractor()
    with pytest.raises(TypeError):
        extractor.taxonomy["new"] = ("Rust",)
