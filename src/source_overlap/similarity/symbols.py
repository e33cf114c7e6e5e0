"""Symbol-level similarity between two projects.

Two signals, both with fixed scores:
    - same export: a non-generic name exported by both projects
    - cross convention: the same identifier spelled in different naming
      conventions (``TRUCK_SPECS`` in one project, ``truckSpecs`` in the other)
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..cache import AnalysisCache
from ..config import DEFAULT_CONFIG, DetectorConfig
from ..exceptions import FileAccessError, ParsingError
from ..file_ops import read_source, relative_posix
from ..logging_config import get_logger
from ..math.identifier import extract_identifiers
from ..models import SharedCandidate, SharedKind
from ..scanning.languages import extension_of

logger = get_logger(__name__)

# symbol -> relative paths exporting it
ExportIndex = Dict[str, List[str]]

# normalized identifier -> [(original spelling, relative path)]
IdentifierIndex = Dict[str, List[Tuple[str, str]]]


def collect_exports(
    root: Path, files: Iterable[Path], cache: Optional[AnalysisCache] = None
) -> ExportIndex:
    """
    Index exported names by the files that export them.

    Files are visited in the given order; unreadable or unparsable files are
    skipped.
    """
    cache = cache if cache is not None else AnalysisCache()
    exports: ExportIndex = {}
    for path in files:
        try:
            analysis = cache.get_or_analyze(path)
        except (FileAccessError, ParsingError) as e:
            logger.debug(f"Skipping exports of {path}: {e}")
            continue
        rel = relative_posix(path, root)
        for name in analysis.exports:
            exports.setdefault(name, []).append(rel)
    return exports


def same_export_candidates(
    exports_a: ExportIndex, exports_b: ExportIndex, config: DetectorConfig = DEFAULT_CONFIG
) -> List[SharedCandidate]:
    """One candidate per (path in A, path in B) for every shared, non-generic export."""
    candidates: List[SharedCandidate] = []
    for symbol, paths_a in exports_a.items():
        paths_b = exports_b.get(symbol)
        if not paths_b or config.stoplists.is_common_symbol(symbol):
            continue
        for path_a in paths_a:
            for path_b in paths_b:
                candidates.append(
                    SharedCandidate(
                        kind=SharedKind.SAME_EXPORT,
                        path_a=path_a,
                        path_b=path_b,
                        description=f"Symbol '{symbol}' is exported by both projects",
                        similarity=config.same_export_similarity,
                    )
                )
    return candidates


def collect_normalized_identifiers(
    root: Path, files: Iterable[Path], config: DetectorConfig = DEFAULT_CONFIG
) -> IdentifierIndex:
    """
    Group identifier spellings by normalized form.

    Structured-config files are skipped. Within each group the spellings are
    sorted and de-duplicated, keeping the first file seen for each spelling.
    """
    index: IdentifierIndex = {}
    for path in files:
        if config.is_config_file(extension_of(path)):
            continue
        try:
            content = read_source(path)
        except FileAccessError as e:
            logger.debug(f"Skipping identifiers of {path}: {e}")
            continue
        rel = relative_posix(path, root)
        for norm, original in extract_identifiers(content, config.min_identifier_length):
            index.setdefault(norm, []).append((original, rel))

    for norm, locations in index.items():
        # sorted() is stable, so the earliest file wins among equal spellings
        unique: List[Tuple[str, str]] = []
        for original, rel in sorted(locations, key=lambda loc: loc[0]):
            if not unique or unique[-1][0] != original:
                unique.append((original, rel))
        index[norm] = unique
    return index


def cross_convention_candidates(
    ids_a: IdentifierIndex, ids_b: IdentifierIndex, config: DetectorConfig = DEFAULT_CONFIG
) -> List[SharedCandidate]:
    """
    One candidate per normalized identifier shared by both projects.

    Only the first spelling of each project is paired. Short or generic
    normalized forms are ignored, as are pairs spelled identically (those
    surface as same-export matches instead).
    """
    candidates: List[SharedCandidate] = []
    for norm, locations_a in ids_a.items():
        locations_b = ids_b.get(norm)
        if not locations_b or not locations_a:
            continue
        if len(norm) < config.min_normalized_length:
            continue
        if config.stoplists.is_common_normalized(norm):
            continue

        original_a, path_a = locations_a[0]
        original_b, path_b = locations_b[0]
        if original_a == original_b:
            continue

        candidates.append(
            SharedCandidate(
                kind=SharedKind.SAME_CONSTANT,
                path_a=path_a,
                path_b=path_b,
                description=(
                    f"Cross-convention match: '{original_a}' (A) <-> '{original_b}' (B) "
                    f"[normalized: {norm}]"
                ),
                similarity=config.cross_convention_similarity,
            )
        )
    return candidates
