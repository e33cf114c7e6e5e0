"""
Caching system for Source Overlap.

Memoizes per-file analyses for the lifetime of one traversal. Nothing is
written to disk and an instance is never shared between concurrent callers.
"""

from pathlib import Path
from typing import Optional, Union

from .analyzers import analyze_file
from .logging_config import get_logger
from .scanning.syntax import FileAnalysis
from .scanning.treesitter_parser import TreeSitterParser

logger = get_logger(__name__)


class AnalysisCache:
    """
    In-memory cache of FileAnalysis results keyed by canonical path.

    Features:
    - Keys are resolved absolute paths, so ``a/../b.rs`` and ``b.rs`` share an entry
    - A hit never re-reads or re-parses the file
    - Entries are never evicted; drop the instance to release them
    - One TreeSitterParser is reused for every miss
    """

    def __init__(self, parser: Optional[TreeSitterParser] = None):
        self._entries: dict[Path, FileAnalysis] = {}
        self._parser = parser or TreeSitterParser()
        self.hits = 0
        self.misses = 0

    @staticmethod
    def _key(filepath: Union[Path, str]) -> Path:
        return Path(filepath).resolve()

    def get_or_analyze(self, filepath: Union[Path, str]) -> FileAnalysis:
        """
        Return the cached analysis of ``filepath``, analyzing it on a miss.

        Failures are not cached; a later call retries the file.

        Raises:
            FileAccessError: If the file cannot be read
            ParsingError: If the grammar fails to produce a tree
        """
        key = self._key(filepath)
        cached = self._entries.get(key)
        if cached is not None:
            self.hits += 1
            logger.debug(f"Cache hit: {key}")
            return cached

        self.misses += 1
        logger.debug(f"Cache miss: {key}")
        analysis = analyze_file(key, parser=self._parser)
        self._entries[key] = analysis
        return analysis

    def get(self, filepath: Union[Path, str]) -> Optional[FileAnalysis]:
        """Return a stored analysis without analyzing, or None."""
        return self._entries.get(self._key(filepath))

    def put(self, filepath: Union[Path, str], analysis: FileAnalysis) -> None:
        """Pre-seed an analysis, e.g. one computed from unsaved source text."""
        self._entries[self._key(filepath)] = analysis

    def clear(self) -> None:
        """Drop all entries and reset statistics."""
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def stats(self) -> dict:
        """
        Get cache statistics.

        Returns:
            Dictionary with hits, misses and size
        """
        return {"hits": self.hits, "misses": self.misses, "size": len(self._entries)}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, filepath: object) -> bool:
        if not isinstance(filepath, (str, Path)):
            return False
        return self._key(filepath) in self._entries
