import numpy as np
import logging
from collections import Counter
from datetime import datetime
from typing import Dict, Any, Optional
import json
from pathlib import Path

logger = logging.getLogger(__name__)

CONTACT_FIELDS = ("name", "email", "phone", "links", "location")
COLLECTION_FIELDS = ("experience", "education", "projects")


class QualityMonitor:
    """Aggregates field coverage and confidence statistics over many parse results"""

    def __init__(self, log_dir: Optional[str] = None):
        self.log_dir = Path(log_dir) if log_dir else None
        self.reset()

    def reset(self):
        """Reset all metrics"""
        self.metrics = {
            "total_processed": 0,
            "successful_extractions": 0,
            "failed_extractions": 0,
            "empty_fields": Counter(),
            "field_confidence": {},
            "item_counts": {field: [] for field in COLLECTION_FIELDS},
        }
        self.warning_counts = Counter()
        self.error_counts = Counter()
        self.error_files = set()
        self.skill_counts = Counter()

    def _record_confidence(self, field: str, scored: Optional[Dict[str, Any]]):
        scored = scored or {}
        if scored.get("value") in (None, "", [], {}):
            self.metrics["empty_fields"][field] += 1
            return
        self.metrics["field_confidence"].setdefault(field, []).append(scored.get("confidence", 0.0))

    def log_extraction(self, resume_path: str, result: Dict[str, Any]):
        """Log a serialized parse result for a resume"""
        self.metrics["total_processed"] += 1

        errors = result.get("errors") or []
        if errors:
            self.metrics["failed_extractions"] += 1
            self.log_error(resume_path, "; ".join(errors))
            for error in errors:
                self.error_counts[error.split(":", 1)[0]] += 1
            return

        self.metrics["successful_extractions"] += 1
        self.warning_counts.update(result.get("warnings") or [])

        contact = result.get("contact") or {}
        for field in CONTACT_FIELDS:
            self._record_confidence(f"contact.{field}", contact.get(field))

        skills = result.get("skills") or {}
        self._record_confidence("skills.raw", skills.get("raw"))
        self.skill_counts.update((skills.get("raw") or {}).get("value") or [])
        self._record_confidence("summary", result.get("summary"))

        for field in COLLECTION_FIELDS:
            items = result.get(field) or []
            self.metrics["item_counts"][field].append(len(items))
            if not items:
                self.metrics["empty_fields"][field] += 1

    def log_error(self, resume_path: str, error: str):
        """Log error for a resume"""
        self.error_files.add(resume_path)
        logger.error(f"Error processing {resume_path}: {error}")

    def get_error_files(self) -> set:
        """Get set of files that had errors"""
        return self.error_files

    @property
    def success_rate(self) -> float:
        total = self.metrics["total_processed"]
        return self.metrics["successful_extractions"] / total * 100 if total > 0 else 0.0

    def get_field_quality(self, field: str) -> Dict[str, float]:
        """Get quality metrics for a specific field"""
        empty_count = self.metrics["empty_fields"].get(field, 0)
        if field not in self.metrics["field_confidence"]:
            return {
                "mean_confidence": 0.0,
                "min_confidence": 0.0,
                "max_confidence": 0.0,
                "empty_count": empty_count
            }

        scores = np.asarray(self.metrics["field_confidence"][field], dtype=float)
        return {
            "mean_confidence": float(np.mean(scores)),
            "min_confidence": float(np.min(scores)),
            "max_confidence": float(np.max(scores)),
            "empty_count": empty_count
        }

    def generate_report(self) -> Dict[str, Any]:
        """Build the quality report and write it to ``log_dir`` when one is configured"""
        item_stats = {}
        for field, counts in self.metrics["item_counts"].items():
            values = np.asarray(counts, dtype=float)
            item_stats[field] = {
                "mean": float(np.mean(values)) if values.size else 0.0,
                "max": int(np.max(values)) if values.size else 0,
            }

        fields = sorted(set(self.metrics["field_confidence"]) | set(self.metrics["empty_fields"]))
        report_dict = {
            "timestamp": datetime.now().isoformat(),
            "summary": {
                "total_processed": self.metrics["total_processed"],
                "successful_extractions": self.metrics["successful_extractions"],
                "failed_extractions": self.metrics["failed_extractions"],
                "success_rate": self.success_rate,
            },
            "field_analysis": {field: self.get_field_quality(field) for field in fields},
            "item_counts": item_stats,
            "warnings": dict(self.warning_counts.most_common()),
            "errors": dict(self.error_counts.most_common()),
            "skills_analysis": {
                "unique_skills": len(self.skill_counts),
                "top_skills": dict(self.skill_counts.most_common(20)),
            },
            "error_files": sorted(self.error_files),
        }

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            report_file = self.log_dir / f"quality_report_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
            with open(report_file, 'w', encoding='utf-8') as f:
                json.dump(report_dict, f, indent=2)
            logger.info(f"Quality Report Generated: {report_file}")

        logger.info(f"Total Processed: {self.metrics['total_processed']}")
        logger.info(f"Success Rate: {self.success_rate:.2f}%")
        return report_dict
