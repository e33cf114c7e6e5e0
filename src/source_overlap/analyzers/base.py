"""Base analyzer class for grammar-driven import/export extraction"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

from ..scanning.syntax import FileAnalysis, ImportInfo
from ..scanning.treesitter_parser import TreeSitterParser, node_text


class SourceAnalyzer(ABC):
    """Abstract base class for per-ecosystem analyzers.

    Subclasses walk the top-level nodes of one grammar's parse tree and turn
    them into ImportInfo records and exported names. Only top-level
    declarations are inspected.
    """

    #: Ecosystem tag stamped on every FileAnalysis this analyzer produces
    language: str = ""

    #: Grammar used when the caller does not pick one
    default_grammar: str = ""

    def __init__(self, parser: Optional[TreeSitterParser] = None):
        self._parser = parser or TreeSitterParser()

    def analyze(
        self, source: str, grammar: Optional[str] = None, filepath: Optional[str] = None
    ) -> FileAnalysis:
        """Extract imports and exports from ``source``.

        Raises:
            ParsingError: If the grammar cannot be loaded or yields no tree
        """
        code = source.encode("utf-8", errors="replace")
        tree = self._parser.parse(code, grammar or self.default_grammar, filepath)

        imports: list[ImportInfo] = []
        exports: list[str] = []
        for node in tree.root_node.children:
            imports.extend(self._extract_imports(node))
            name = self._extract_export(node)
            if name:
                exports.append(name)

        return FileAnalysis(imports=imports, exports=exports, language=self.language)

    @abstractmethod
    def _extract_imports(self, node: Any) -> Iterable[ImportInfo]:
        """Return the imports declared by a top-level node (usually none)"""
        pass

    @abstractmethod
    def _extract_export(self, node: Any) -> Optional[str]:
        """Return the exported name declared by a top-level node, if any"""
        pass

    # ── Node helpers ───────────────────────────────────────────────

    @staticmethod
    def _find_child_by_type(node: Any, types: tuple[str, ...]) -> Any | None:
        for child in node.children:
            if child.type in types:
                return child
        return None

    @classmethod
    def _find_child_text(cls, node: Any, types: tuple[str, ...]) -> str | None:
        child = cls._find_child_by_type(node, types)
        if child is None:
            return None
        return node_text(child)

    @staticmethod
    def _has_child(node: Any, node_type: str) -> bool:
        return any(child.type == node_type for child in node.children)
