#!/usr/bin/env python3
"""
Main script to process all resumes
Usage: python scripts/process_resumes.py --input-dir data/input --output-dir data/output
"""

import click
from pathlib import Path
import json
from datetime import datetime
import logging
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_onboarding.processors.batch_processor import BatchProcessor
from resume_onboarding.utils.quality_monitor import QualityMonitor
from config.logging_config import setup_logging
from config.settings import settings

logger = logging.getLogger(__name__)

RESUME_EXTENSIONS = ['.pdf', '.docx', '.doc', '.txt']


def find_resume_files(input_path: Path):
    """Collect resume files under a directory, sorted for stable output"""
    resume_files = []
    for ext in RESUME_EXTENSIONS:
        resume_files.extend(input_path.glob(f'**/*{ext}'))
    return sorted(str(f) for f in resume_files)


@click.command()
@click.option('--input-dir', default=str(settings.INPUT_DIR), help='Input directory with resumes')
@click.option('--output-dir', default=str(settings.OUTPUT_DIR), help='Output directory for JSON')
@click.option('--batch-size', default=settings.BATCH_SIZE, help='Batch size for processing')
@click.option('--num-workers', default=settings.NUM_WORKERS, help='Number of parallel workers')
@click.option('--report/--no-report', default=True, help="Write a quality report to the log directory")
@click.option('--log-level', default=settings.LOG_LEVEL, help='Logging level')
def main(input_dir: str,
         output_dir: str,
         batch_size: int,
         num_workers: int,
         report: bool,
         log_level: str):
    """Process all resumes in the input directory"""
    setup_logging(log_level)

    start_time = datetime.now()
    logger.info(f"Starting resume processing at {start_time}")

    input_path = Path(input_dir)
    output_path = Path(output_dir)
    output_path.mkdir(exist_ok=True, parents=True)

    resume_files = find_resume_files(input_path)
    logger.info(f"Found {len(resume_files)} resume files")

    if not resume_files:
        logger.error("No resume files found!")
        raise SystemExit(1)

    processor = BatchProcessor(
        batch_size=batch_size,
        num_workers=num_workers
    )

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    output_file = output_path / f"resumes_{timestamp}.json"
    monitor = QualityMonitor(log_dir=str(settings.LOG_DIR)) if report else None
    metrics = processor.process_to_file(
        resume_files,
        output_file,
        on_result=monitor.log_extraction if monitor else None
    )

    summary = dict(metrics, timestamp=timestamp)
    summary_file = output_path / f"processing_summary_{timestamp}.json"
    with open(summary_file, 'w', encoding='utf-8') as f:
        json.dump(summary, f, indent=2)

    if monitor is not None:
        monitor.generate_report()

    click.echo(
        f"Processed {metrics['processed']}/{metrics['total_files']} resumes "
        f"({metrics['failed']} failed) -> {output_file}"
    )
    logger.info("Processing complete!")


if __name__ == "__main__":
    main()
