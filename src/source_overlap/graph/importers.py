"""Reverse-import lookup: which files import a given file.

A file imports the target when one of its imports names the target's file
stem, either as a segment of the module path (split on the ecosystem's
separator) or as an imported item. Matching is purely syntactic:

    target  src/config.rs
    match   use crate::config::Settings;   (segment "config")
    match   from . import config           (item "config")
    match   import { x } from './config'   (segment "config")

Two entry points cover the two lookup scopes:
    - find_importers / find_importers_cached walk every eligible file under a root
    - find_importers_among inspects only an explicit candidate set
"""

from collections.abc import Collection, Iterable
from pathlib import Path
from typing import List, Optional, Union

from ..cache import AnalysisCache
from ..exceptions import FileAccessError, ParsingError
from ..file_ops import is_source_file, walk_source_files
from ..logging_config import get_logger
from ..scanning.languages import SKIP_DIRS, SOURCE_EXTENSIONS, import_separator
from ..scanning.syntax import FileAnalysis

logger = get_logger(__name__)

PathLike = Union[Path, str]


def imports_target(analysis: FileAnalysis, target_stem: str) -> bool:
    """True when any import of ``analysis`` refers to ``target_stem``."""
    if not target_stem or not analysis.is_supported:
        return False
    separator = import_separator(analysis.language)
    for imp in analysis.imports:
        if target_stem in imp.segments(separator) or target_stem in imp.items:
            return True
    return False


def _target_stem(target: PathLike) -> str:
    return Path(target).stem


def _scan(
    target: Path,
    stem: str,
    candidates: Iterable[Path],
    cache: AnalysisCache,
) -> List[Path]:
    target_key = target.resolve()
    importers: List[Path] = []
    for path in candidates:
        if path.resolve() == target_key:
            continue
        try:
            analysis = cache.get_or_analyze(path)
        except (FileAccessError, ParsingError) as e:
            logger.debug(f"Skipping {path}: {e}")
            continue
        if imports_target(analysis, stem):
            importers.append(path)
    return importers


def find_importers_cached(
    target: PathLike,
    root_dir: PathLike,
    cache: AnalysisCache,
    extensions: Collection[str] = SOURCE_EXTENSIONS,
    skip_dirs: Collection[str] = SKIP_DIRS,
) -> List[Path]:
    """
    Find files under ``root_dir`` that import ``target``, reusing ``cache``.

    The caller owns ``cache`` and may pass it to several lookups made from
    the same traversal. Files that cannot be read or parsed are skipped.

    Args:
        target: File whose importers are wanted
        root_dir: Directory tree to search
        cache: Caller-owned analysis cache
        extensions: Source extensions considered (no leading dot)
        skip_dirs: Directory names never descended into

    Returns:
        Importer paths, never including ``target`` itself. A target with an
        empty stem or a missing root yields an empty list.
    """
    target = Path(target)
    stem = _target_stem(target)
    if not stem:
        return []
    files = walk_source_files(root_dir, extensions=extensions, skip_dirs=skip_dirs)
    return _scan(target, stem, files, cache)


def find_importers(
    target: PathLike,
    root_dir: PathLike,
    extensions: Collection[str] = SOURCE_EXTENSIONS,
    skip_dirs: Collection[str] = SKIP_DIRS,
) -> List[Path]:
    """
    Find every file under ``root_dir`` that imports ``target``.

    A fresh AnalysisCache is created for the call and discarded afterwards.
    """
    importers = find_importers_cached(
        target, root_dir, AnalysisCache(), extensions=extensions, skip_dirs=skip_dirs
    )
    logger.debug(f"{len(importers)} importer(s) of {target} under {root_dir}")
    return importers


def find_importers_among(
    target: PathLike,
    candidates: Iterable[PathLike],
    cache: Optional[AnalysisCache] = None,
    extensions: Collection[str] = SOURCE_EXTENSIONS,
) -> List[Path]:
    """
    Find which of ``candidates`` import ``target``.

    Only the given files are inspected, e.g. the files touched by a change
    set. An empty candidate set gives an empty result; this never falls back
    to scanning a directory. Candidates without an allowed extension are
    ignored.
    """
    target = Path(target)
    stem = _target_stem(target)
    if not stem:
        return []
    files = [
        Path(c) for c in candidates if is_source_file(c, extensions) and Path(c).is_file()
    ]
    if not files:
        return []
    return _scan(target, stem, files, cache if cache is not None else AnalysisCache())
