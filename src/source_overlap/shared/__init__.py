"""Cross-project shared-code detection."""

from .detector import SharedCodeDetector, dedup_candidates, find_shared_candidates

__all__ = ["SharedCodeDetector", "find_shared_candidates", "dedup_candidates"]
