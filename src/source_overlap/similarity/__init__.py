"""Content and symbol similarity scoring."""

from .content import content_similarity, jaccard, significant_lines, text_similarity
from .symbols import (
    collect_exports,
    collect_normalized_identifiers,
    cross_convention_candidates,
    same_export_candidates,
)

__all__ = [
    "content_similarity",
    "text_similarity",
    "significant_lines",
    "jaccard",
    "collect_exports",
    "collect_normalized_identifiers",
    "same_export_candidates",
    "cross_convention_candidates",
]
