"""
Fatal error taxonomy for a pipeline run
"""
from typing import Optional, Dict, Any


class ResumeParseError(Exception):
    """Base exception for conditions that make a parse result unusable"""

    code = "parse_error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class UnsupportedFormat(ResumeParseError):
    """Type not recognized and the PDF fallback also failed"""

    code = "unsupported_format"

    def __init__(self, message: str = "Unsupported document format", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


class CorruptDocument(ResumeParseError):
    """Byte stream could not be decoded by the chosen extractor"""

    code = "corrupt_document"

    def __init__(self, message: str = "Document could not be read", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


class EmptyDocument(ResumeParseError):
    """Extracted text is blank after normalization"""

    code = "empty_document"

    def __init__(self, message: str = "Document contains no extractable text", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)
