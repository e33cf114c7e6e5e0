"""Language analyzers.

One SourceAnalyzer per ecosystem, selected once per file by its extension.
"""

from pathlib import Path
from typing import Optional, Union

from ..file_ops import read_source
from ..scanning.languages import UNKNOWN_LANGUAGE, detect_language, grammar_for_path
from ..scanning.syntax import FileAnalysis
from ..scanning.treesitter_parser import TreeSitterParser
from .base import SourceAnalyzer
from .python_analyzer import PythonAnalyzer
from .rust_analyzer import RustAnalyzer
from .typescript_analyzer import TypeScriptAnalyzer

ANALYZER_CLASSES: dict[str, type[SourceAnalyzer]] = {
    "rust": RustAnalyzer,
    "python": PythonAnalyzer,
    "typescript": TypeScriptAnalyzer,
}


def get_analyzer(
    language: str, parser: Optional[TreeSitterParser] = None
) -> Optional[SourceAnalyzer]:
    """Return an analyzer for an ecosystem tag, or None if unsupported."""
    cls = ANALYZER_CLASSES.get(language)
    if cls is None:
        return None
    return cls(parser)


def analyze_source(
    source: str,
    language: str,
    grammar: Optional[str] = None,
    parser: Optional[TreeSitterParser] = None,
    filepath: Optional[str] = None,
) -> FileAnalysis:
    """
    Extract imports and exports from source text.

    Args:
        source: Source code
        language: Ecosystem tag ("rust", "python", "typescript")
        grammar: Grammar override, e.g. "tsx"
        parser: Shared parser, so grammars load once
        filepath: Path used in error reports

    Returns:
        FileAnalysis; an unsupported tag gives an empty "unknown" analysis

    Raises:
        ParsingError: If the grammar fails to produce a tree
    """
    analyzer = get_analyzer(language, parser)
    if analyzer is None:
        return FileAnalysis.empty(UNKNOWN_LANGUAGE)
    return analyzer.analyze(source, grammar=grammar, filepath=filepath)


def analyze_file(
    filepath: Union[Path, str], parser: Optional[TreeSitterParser] = None
) -> FileAnalysis:
    """
    Read and analyze one file, choosing the ecosystem from its extension.

    Unsupported extensions return an empty "unknown" analysis without
    touching the file.

    Raises:
        FileAccessError: If the file cannot be read
        ParsingError: If the grammar fails to produce a tree
    """
    language = detect_language(filepath)
    if language == UNKNOWN_LANGUAGE:
        return FileAnalysis.empty(UNKNOWN_LANGUAGE)

    source = read_source(filepath)
    return analyze_source(
        source,
        language,
        grammar=grammar_for_path(filepath),
        parser=parser,
        filepath=str(filepath),
    )


__all__ = [
    "SourceAnalyzer",
    "RustAnalyzer",
    "PythonAnalyzer",
    "TypeScriptAnalyzer",
    "ANALYZER_CLASSES",
    "get_analyzer",
    "analyze_source",
    "analyze_file",
]
