"""Line-based content similarity.

Each file is reduced to the set of its trimmed, non-empty, non-comment lines
and two files are compared with the Jaccard index of those sets:

    J(A, B) = |A ∩ B| / |A ∪ B|

Two files with no significant lines are identical (1.0); a file with none
against a file with some is unrelated (0.0).
"""

from collections.abc import Iterable
from pathlib import Path
from typing import AbstractSet, Union

from ..config import DEFAULT_CONFIG
from ..exceptions import FileAccessError
from ..file_ops import read_source
from ..logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_COMMENT_MARKERS = DEFAULT_CONFIG.comment_markers


def significant_lines(
    content: str, comment_markers: Iterable[str] = DEFAULT_COMMENT_MARKERS
) -> frozenset[str]:
    """Trimmed lines that are neither empty nor comment-only."""
    markers = tuple(comment_markers)
    lines = set()
    for line in content.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith(markers):
            lines.add(stripped)
    return frozenset(lines)


def jaccard(a: AbstractSet[str], b: AbstractSet[str]) -> float:
    """Jaccard index with the empty-set conventions described above."""
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


def text_similarity(
    content_a: str, content_b: str, comment_markers: Iterable[str] = DEFAULT_COMMENT_MARKERS
) -> float:
    """Similarity of two source texts in [0, 1]."""
    markers = tuple(comment_markers)
    return jaccard(significant_lines(content_a, markers), significant_lines(content_b, markers))


def content_similarity(
    path_a: Union[Path, str],
    path_b: Union[Path, str],
    comment_markers: Iterable[str] = DEFAULT_COMMENT_MARKERS,
) -> float:
    """
    Similarity of two files in [0, 1].

    A file that cannot be read scores 0.0 against anything.
    """
    try:
        content_a = read_source(path_a)
        content_b = read_source(path_b)
    except FileAccessError as e:
        logger.debug(f"Content similarity defaults to 0.0: {e}")
        return 0.0
    return text_similarity(content_a, content_b, comment_markers)
