"""Analysis-related exceptions: file access and parsing."""

from pathlib import Path
from typing import Union

from .base import SourceOverlapError


class AnalysisError(SourceOverlapError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Union[Path, str], reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when a grammar cannot be loaded or produces no syntax tree."""

    def __init__(self, filepath: Union[Path, str], language: str, reason: str):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": str(filepath), "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason
