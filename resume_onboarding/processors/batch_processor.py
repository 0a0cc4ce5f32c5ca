from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, Dict, Generator, List, Optional, Tuple
import psutil
import gc
from pathlib import Path
import json
from tqdm import tqdm
import logging
from datetime import datetime

from resume_onboarding.core.resume_parser import ResumeParser
from config.settings import settings

logger = logging.getLogger(__name__)

parser: Optional[ResumeParser] = None


def _init_worker():
    """Initialize parser in worker process"""
    global parser
    parser = ResumeParser()


def _process_single(file_path: str) -> Tuple[str, Optional[Dict]]:
    """Process single resume in worker"""
    if parser is None:
        _init_worker()
    try:
        return file_path, parser.parse_file(file_path).to_dict()
    except OSError as e:
        logger.error(f"Error reading {file_path}: {e}")
        return file_path, None


class BatchProcessor:
    """Memory-efficient batch processing with monitoring"""

    def __init__(self,
                 batch_size: int = None,
                 num_workers: int = None,
                 max_memory_percent: int = None):
        self.batch_size = batch_size or settings.BATCH_SIZE
        self.num_workers = num_workers or settings.NUM_WORKERS
        self.max_memory_percent = max_memory_percent or settings.MAX_MEMORY_PERCENT

    def check_memory(self):
        """Monitor and manage memory usage"""
        memory_percent = psutil.virtual_memory().percent

        if memory_percent > self.max_memory_percent:
            logger.warning(f"High memory usage: {memory_percent}%")
            gc.collect()

            # Applies to the next batch's pool
            if memory_percent > 90:
                self.num_workers = max(1, self.num_workers - 1)
                logger.warning(f"Reduced workers to {self.num_workers}")

    def process_paths(self,
                      file_paths: List[str]) -> Generator[Tuple[str, Optional[Dict]], None, None]:
        """Parse files in parallel, yielding (path, result dict) as each one completes"""
        for i in range(0, len(file_paths), self.batch_size):
            batch = file_paths[i:i + self.batch_size]

            with ProcessPoolExecutor(
                max_workers=self.num_workers,
                initializer=_init_worker
            ) as executor:
                futures = {
                    executor.submit(_process_single, fp): fp
                    for fp in batch
                }

                for future in tqdm(
                    as_completed(futures),
                    total=len(futures),
                    desc=f"Batch {i // self.batch_size + 1}"
                ):
                    path = futures[future]
                    try:
                        _, result = future.result()
                    except Exception as e:
                        logger.error(f"Worker failed on {path}: {e}")
                        result = None
                    yield path, result

                    self.check_memory()

            # Release parser state between batches
            gc.collect()

    def process_to_file(self,
                        file_paths: List[str],
                        output_file: Path,
                        on_result: Optional[Callable[[str, Dict], None]] = None) -> Dict:
        """Process files and stream results to a JSON array on disk.

        ``on_result`` is called with each path and result dict as it is written.
        """
        start_time = datetime.now()
        total_files = len(file_paths)
        processed = 0
        failed = 0

        output_file = Path(output_file)
        if not output_file.suffix:
            output_file = output_file.with_suffix('.json')
        output_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(output_file, 'w', encoding='utf-8') as f:
                f.write('[\n')
                first = True

                for path, result in self.process_paths(file_paths):
                    if result is None:
                        failed += 1
                    else:
                        if not first:
                            f.write(',\n')
                        json.dump({"path": str(path), "result": result}, f, indent=2)
                        first = False
                        if on_result is not None:
                            on_result(str(path), result)
                        if result.get("errors"):
                            failed += 1
                        else:
                            processed += 1

                    if (processed + failed) % 100 == 0:
                        logger.info(
                            f"Progress: {processed + failed}/{total_files} "
                            f"({(processed + failed) / total_files * 100:.1f}%)"
                        )

                f.write('\n]')
        except OSError as e:
            logger.error(f"Error writing to output file {output_file}: {e}")
            raise

        duration = (datetime.now() - start_time).total_seconds()
        metrics = {
            "total_files": total_files,
            "processed": processed,
            "failed": failed,
            "success_rate": processed / total_files * 100 if total_files > 0 else 0,
            "processing_time": duration,
            "files_per_second": total_files / duration if duration > 0 else 0,
            "output_file": str(output_file)
        }

        logger.info(f"Processing complete: {metrics}")
        return metrics
