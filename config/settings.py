from pydantic_settings import BaseSettings
from typing import Optional
import multiprocessing
from pathlib import Path


class Settings(BaseSettings):
    # Processing
    BATCH_SIZE: int = 500
    NUM_WORKERS: int = max(1, min(4, multiprocessing.cpu_count() - 1))
    MAX_MEMORY_PERCENT: int = 80

    # Paths
    BASE_DIR: Path = Path(__file__).parent.parent
    INPUT_DIR: Path = BASE_DIR / "data" / "input"
    OUTPUT_DIR: Path = BASE_DIR / "data" / "output"
    LOG_DIR: Path = BASE_DIR / "data" / "logs"
    LOG_LEVEL: str = "INFO"

    # Document Processing
    MAX_DOCUMENT_SIZE: int = 10 * 1024 * 1024  # 10MB
    MAX_TEXT_CHARS: int = 50000
    PDF_EXTRACTION_METHODS: list = ["pdfplumber", "pdfminer", "pypdf2"]
    DOCX_EXTRACTION_METHODS: list = ["mammoth", "python-docx"]
    MIN_PDF_TEXT_CHARS: int = 20

    # Section detection
    SECTION_MATCH_THRESHOLD: float = 0.45
    HEADING_MAX_CHARS: int = 40
    HEADING_MAX_WORDS: int = 3

    # Contact extraction
    NAME_SCAN_LINES: int = 8
    NAME_MAX_CHARS: int = 60
    LOCATION_SCAN_LINES: int = 25
    DEFAULT_PHONE_REGION: Optional[str] = "US"

    class Config:
        env_file = ".env"
        env_prefix = "RESUME_"


settings = Settings()
