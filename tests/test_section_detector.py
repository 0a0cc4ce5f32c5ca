import pytest

from resume_onboarding.core.section_detector import (
    LevenshteinScorer,
    SectionDetector,
    TokenOverlapScorer,
    detect_sections,
)


@pytest.fixture
def detector():
    return SectionDetector(threshold=0.45, max_heading_chars=40, max_heading_words=3)


def test_exact_heading(detector):
    spans = detector.detect(["EXPERIENCE", "ACME Corp 2020 - 2021"])
    assert len(spans) == 1
    assert spans[0].name == "experience"
    assert (spans[0].start_line, spans[0].end_line) == (0, 2)
    assert spans[0].match_score == 1.0


def test_misspelled_heading(detector):
    spans = detector.detect(["EXPERIENSE", "stuff"])
    assert [s.name for s in spans] == ["experience"]
    assert 0.45 <= spans[0].match_score < 1.0


def test_alias_with_punctuation(detector):
    spans = detector.detect(["Work History:", "stuff"])
    assert [s.name for s in spans] == ["experience"]


def test_prose_is_not_a_heading(detector):
    line = "I enjoy building reliable systems and mentoring engineers across teams."
    assert detector.detect([line]) == []


def test_spans_are_ordered_and_cover_the_tail(detector, scenario_a_lines):
    spans = detector.detect(scenario_a_lines)
    starts = [s.start_line for s in spans]
    assert starts == sorted(starts)
    for current, following in zip(spans, spans[1:]):
        assert current.end_line == following.start_line
    assert spans[-1].end_line == len(scenario_a_lines)


def test_scenario_a_experience_span(detector, scenario_a_lines):
    experience = [s for s in detector.detect(scenario_a_lines) if s.name == "experience"]
    assert len(experience) == 1
    assert (experience[0].start_line, experience[0].end_line) == (1, 6)


def test_threshold_override():
    strict = SectionDetector(threshold=1.0)
    assert strict.detect(["EXPERIENSE", "stuff"]) == []
    assert [s.name for s in strict.detect(["EXPERIENCE", "stuff"])] == ["experience"]


def test_custom_aliases():
    detector = SectionDetector(aliases={"skills": ["toolbox"]})
    spans = detector.detect(["TOOLBOX", "Python"])
    assert [s.name for s in spans] == ["skills"]


def test_token_overlap_scorer_is_swappable():
    detector = SectionDetector(scorer=TokenOverlapScorer())
    spans = detector.detect(["Technical Skills", "Python"])
    assert [s.name for s in spans] == ["skills"]
    assert spans[0].match_score == 1.0


def test_scorers_normalize_to_unit_interval():
    for scorer in (LevenshteinScorer(), TokenOverlapScorer()):
        choice, score = scorer.best_match("work experience", ["work experience", "skills"])
        assert choice == "work experience"
        assert score == 1.0
        assert scorer.best_match("", ["skills"]) is None


def test_detect_sections_function(scenario_a_lines):
    names = [s.name for s in detect_sections(scenario_a_lines)]
    assert names[:2] == ["experience", "education"]
