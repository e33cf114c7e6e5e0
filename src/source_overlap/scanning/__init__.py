"""Ecosystem detection, syntax facts and tree-sitter parsing."""

from .languages import (
    CONFIG_EXTENSIONS,
    ECOSYSTEMS,
    SCAN_EXTENSIONS,
    SKIP_DIRS,
    SOURCE_EXTENSIONS,
    UNKNOWN_LANGUAGE,
    EcosystemConfig,
    detect_language,
    extension_of,
    get_ecosystem,
    grammar_for_path,
    import_separator,
)
from .syntax import FileAnalysis, ImportInfo
from .treesitter_parser import TreeSitterParser

__all__ = [
    # Ecosystems
    "EcosystemConfig",
    "ECOSYSTEMS",
    "UNKNOWN_LANGUAGE",
    "SOURCE_EXTENSIONS",
    "CONFIG_EXTENSIONS",
    "SCAN_EXTENSIONS",
    "SKIP_DIRS",
    "detect_language",
    "extension_of",
    "get_ecosystem",
    "grammar_for_path",
    "import_separator",
    # Syntax facts
    "ImportInfo",
    "FileAnalysis",
    # Parsing
    "TreeSitterParser",
]
