"""Exception hierarchy for Source Overlap."""

from .analysis import AnalysisError, FileAccessError, ParsingError
from .base import SourceOverlapError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError

__all__ = [
    "SourceOverlapError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
