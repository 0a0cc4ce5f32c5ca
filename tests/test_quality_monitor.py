import json

import pytest

from resume_onboarding.utils.quality_monitor import QualityMonitor


@pytest.fixture
def parsed_results(resume_parser, sample_resume_text):
    return {
        "jane.txt": resume_parser.parse_text(sample_resume_text).to_dict(),
        "prose.txt": resume_parser.parse_text("Looking for new opportunities in backend work.").to_dict(),
        "blank.txt": resume_parser.parse_text("  ").to_dict(),
    }


def test_log_extraction_counts(parsed_results):
    monitor = QualityMonitor()
    for path, result in parsed_results.items():
        monitor.log_extraction(path, result)

    assert monitor.metrics["total_processed"] == 3
    assert monitor.metrics["successful_extractions"] == 2
    assert monitor.metrics["failed_extractions"] == 1
    assert monitor.success_rate == pytest.approx(200 / 3)
    assert monitor.get_error_files() == {"blank.txt"}
    assert monitor.error_counts["empty_document"] == 1


def test_field_quality(parsed_results):
    monitor = QualityMonitor()
    for path, result in parsed_results.items():
        monitor.log_extraction(path, result)

    email = monitor.get_field_quality("contact.email")
    assert email["mean_confidence"] == pytest.approx(0.99)
    assert email["empty_count"] == 1
    assert monitor.get_field_quality("unknown") == {
        "mean_confidence": 0.0,
        "min_confidence": 0.0,
        "max_confidence": 0.0,
        "empty_count": 0,
    }


def test_generate_report_writes_json(parsed_results, tmp_path):
    monitor = QualityMonitor(log_dir=str(tmp_path))
    for path, result in parsed_results.items():
        monitor.log_extraction(path, result)

    report = monitor.generate_report()
    assert report["summary"]["total_processed"] == 3
    assert report["warnings"]["Email not detected."] == 1
    assert report["item_counts"]["experience"]["max"] == 2
    assert report["skills_analysis"]["top_skills"]["Python"] == 1

    [report_file] = tmp_path.glob("quality_report_*.json")
    assert json.loads(report_file.read_text(encoding="utf-8"))["summary"] == report["summary"]


def test_reset():
    monitor = QualityMonitor()
    monitor.log_extraction("a.txt", {"errors": ["corrupt_document: bad"]})
    monitor.reset()
    assert monitor.metrics["total_processed"] == 0
    assert monitor.get_error_files() == set()
