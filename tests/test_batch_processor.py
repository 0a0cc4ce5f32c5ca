import json

from resume_onboarding.processors import batch_processor
from resume_onboarding.processors.batch_processor import BatchProcessor


def test_process_single(sample_resume_text, tmp_path):
    path = tmp_path / "jane.txt"
    path.write_text(sample_resume_text, encoding="utf-8")

    batch_processor._init_worker()
    file_path, result = batch_processor._process_single(str(path))
    assert file_path == str(path)
    assert result["contact"]["email"]["value"] == "jane.doe@example.com"


def test_process_single_missing_file(tmp_path):
    missing = str(tmp_path / "missing.pdf")
    assert batch_processor._process_single(missing) == (missing, None)


def test_process_to_file_metrics(monkeypatch, tmp_path):
    outcomes = [
        ("ok.txt", {"errors": [], "warnings": []}),
        ("broken.pdf", {"errors": ["corrupt_document: bad xref"], "warnings": []}),
        ("gone.pdf", None),
    ]
    processor = BatchProcessor(batch_size=10, num_workers=1, max_memory_percent=100)
    monkeypatch.setattr(processor, "process_paths", lambda paths: iter(outcomes))

    metrics = processor.process_to_file([p for p, _ in outcomes], tmp_path / "out" / "results")

    assert metrics["total_files"] == 3
    assert metrics["processed"] == 1
    assert metrics["failed"] == 2
    assert metrics["output_file"].endswith("results.json")

    written = json.loads((tmp_path / "out" / "results.json").read_text(encoding="utf-8"))
    assert [entry["path"] for entry in written] == ["ok.txt", "broken.pdf"]


def test_process_to_file_reports_each_result(monkeypatch, tmp_path):
    outcomes = [
        ("ok.txt", {"errors": [], "warnings": []}),
        ("gone.pdf", None),
        ("broken.pdf", {"errors": ["corrupt_document: bad xref"], "warnings": []}),
    ]
    processor = BatchProcessor(batch_size=10, num_workers=1, max_memory_percent=100)
    monkeypatch.setattr(processor, "process_paths", lambda paths: iter(outcomes))

    seen = []
    processor.process_to_file(
        [p for p, _ in outcomes],
        tmp_path / "results.json",
        on_result=lambda path, result: seen.append((path, result)),
    )
    assert seen == [outcomes[0], outcomes[2]]


def test_check_memory_reduces_workers(monkeypatch):
    class Memory:
        percent = 95

    monkeypatch.setattr(batch_processor.psutil, "virtual_memory", lambda: Memory())
    processor = BatchProcessor(batch_size=10, num_workers=3, max_memory_percent=80)
    processor.check_memory()
    assert processor.num_workers == 2
