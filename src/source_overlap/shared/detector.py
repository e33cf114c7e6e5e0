"""Cross-project shared-code detector: orchestrates the three pairing scans."""

from collections.abc import Iterable
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from ..cache import AnalysisCache
from ..config import DEFAULT_CONFIG, DetectorConfig
from ..exceptions import InvalidPathError
from ..file_ops import relative_posix, walk_source_files
from ..logging_config import get_logger
from ..models import SharedCandidate, SharedKind, SharedReport
from ..scanning.languages import extension_of
from ..scanning.treesitter_parser import TreeSitterParser
from ..similarity.content import content_similarity
from ..similarity.symbols import (
    collect_exports,
    collect_normalized_identifiers,
    cross_convention_candidates,
    same_export_candidates,
)

logger = get_logger(__name__)


def dedup_candidates(candidates: Iterable[SharedCandidate]) -> List[SharedCandidate]:
    """
    Sort by descending similarity and keep one candidate per ``(path_a, path_b)``.

    The sort is stable, so among equal similarities the earliest candidate
    survives; after sorting, the first occurrence of a pair is its maximum.
    """
    ordered = sorted(candidates, key=lambda c: c.similarity, reverse=True)
    seen: set[Tuple[str, str]] = set()
    kept: List[SharedCandidate] = []
    for candidate in ordered:
        if candidate.pair in seen:
            continue
        seen.add(candidate.pair)
        kept.append(candidate)
    return kept


class SharedCodeDetector:
    """Finds files and symbols that two project trees appear to share.

    Pipeline (the three scans are independent of each other):
        1. same-name files, scored by line overlap
        2. exported names present in both projects
        3. identifiers shared across naming conventions

    The merged candidates are sorted and de-duplicated by file pair. The
    detector keeps no state between ``compare`` calls; each call owns a fresh
    AnalysisCache and, unless one was injected, a fresh TreeSitterParser.
    An injected parser is reused by every call, so the caller must not run
    those calls concurrently.
    """

    def __init__(
        self,
        config: DetectorConfig = DEFAULT_CONFIG,
        parser: Optional[TreeSitterParser] = None,
    ):
        self.config = config
        self._parser = parser

    def compare(self, root_a: Union[Path, str], root_b: Union[Path, str]) -> SharedReport:
        """
        Compare two project trees.

        Raises:
            InvalidPathError: If either root is missing or not a directory
        """
        path_a = self._validate_root(root_a)
        path_b = self._validate_root(root_b)

        files_a = self._walk(path_a)
        files_b = self._walk(path_b)
        cache = AnalysisCache(self._parser or TreeSitterParser())

        candidates: List[SharedCandidate] = []
        candidates.extend(self.same_name_candidates(path_a, path_b, files_a, files_b))
        candidates.extend(
            same_export_candidates(
                collect_exports(path_a, files_a, cache),
                collect_exports(path_b, files_b, cache),
                self.config,
            )
        )
        candidates.extend(
            cross_convention_candidates(
                collect_normalized_identifiers(path_a, files_a, self.config),
                collect_normalized_identifiers(path_b, files_b, self.config),
                self.config,
            )
        )

        ranked = dedup_candidates(candidates)
        logger.info(
            f"Compared {root_a} ({len(files_a)} files) with {root_b} ({len(files_b)} files): "
            f"{len(candidates)} candidates, {len(ranked)} after dedup"
        )
        logger.debug(f"Analysis cache: {cache.stats()}")

        return SharedReport(
            project_a=str(root_a),
            project_b=str(root_b),
            candidates=ranked,
            files_scanned_a=len(files_a),
            files_scanned_b=len(files_b),
        )

    def same_name_candidates(
        self,
        root_a: Path,
        root_b: Path,
        files_a: List[Path],
        files_b: List[Path],
    ) -> List[SharedCandidate]:
        """Pair files whose stems match within the same extension class."""
        by_key_b: Dict[Tuple[str, bool], List[Path]] = {}
        for fb in files_b:
            by_key_b.setdefault(self._pairing_key(fb), []).append(fb)

        candidates: List[SharedCandidate] = []
        for fa in files_a:
            for fb in by_key_b.get(self._pairing_key(fa), []):
                similarity = content_similarity(fa, fb, self.config.comment_markers)
                candidates.append(
                    SharedCandidate(
                        kind=SharedKind.SAME_FILE_NAME,
                        path_a=relative_posix(fa, root_a),
                        path_b=relative_posix(fb, root_b),
                        description=self.describe_same_name(fa.name, fb.name, similarity),
                        similarity=similarity,
                    )
                )
        return candidates

    def describe_same_name(self, name_a: str, name_b: str, similarity: float) -> str:
        """Human-readable rationale for a same-name pair."""
        label = f"'{name_a}'" if name_a == name_b else f"'{name_a}' / '{name_b}'"
        if similarity > self.config.near_identical_threshold:
            return f"Same-name file {label} is near-identical"
        if similarity > self.config.diverged_threshold:
            return f"Same-name file {label} has diverged (possible forked copy)"
        return f"Same-name file {label} (content largely different)"

    def _pairing_key(self, path: Path) -> Tuple[str, bool]:
        return (path.stem, self.config.is_config_file(extension_of(path)))

    def _walk(self, root: Path) -> List[Path]:
        return list(
            walk_source_files(
                root, extensions=self.config.scan_extensions, skip_dirs=self.config.skip_dirs
            )
        )

    @staticmethod
    def _validate_root(root: Union[Path, str]) -> Path:
        path = Path(root)
        if not path.exists():
            raise InvalidPathError(root, "does not exist")
        if not path.is_dir():
            raise InvalidPathError(root, "not a directory")
        return path


def find_shared_candidates(
    root_a: Union[Path, str],
    root_b: Union[Path, str],
    config: DetectorConfig = DEFAULT_CONFIG,
) -> SharedReport:
    """Compare two project trees with a one-off detector."""
    return SharedCodeDetector(config).compare(root_a, root_b)
