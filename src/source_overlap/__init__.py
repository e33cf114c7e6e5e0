"""
Source Overlap - Structural Import/Export Analysis and Cross-Project Duplication

Extracts what each source file imports and publicly exports using tree-sitter
grammars, answers "who imports this file", and compares two project trees
for files and symbols that look duplicated between them.
"""

__version__ = "0.1.0"

from .analyzers import analyze_file, analyze_source
from .cache import AnalysisCache
from .config import DEFAULT_CONFIG, DetectorConfig, StoplistConfig, load_config
from .graph import find_importers, find_importers_among, find_importers_cached
from .math.identifier import normalize_identifier
from .models import SharedCandidate, SharedKind, SharedReport
from .scanning.syntax import FileAnalysis, ImportInfo
from .shared import SharedCodeDetector, find_shared_candidates

__all__ = [
    # Per-file analysis
    "analyze_file",
    "analyze_source",
    "FileAnalysis",
    "ImportInfo",
    "AnalysisCache",
    # Reverse imports
    "find_importers",
    "find_importers_cached",
    "find_importers_among",
    # Cross-project comparison
    "SharedCodeDetector",
    "find_shared_candidates",
    "SharedCandidate",
    "SharedKind",
    "SharedReport",
    "normalize_identifier",
    # Configuration
    "DetectorConfig",
    "StoplistConfig",
    "DEFAULT_CONFIG",
    "load_config",
]
