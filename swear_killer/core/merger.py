"""Coalesce overlapping or nearly adjacent mute intervals.

WHY: Consecutive subtitle cues often sit a fraction of a second apart.
Muting each separately produces audible blips of dialogue between them
and a needlessly long filter expression.

HOW: Sort by start time, then sweep once keeping a running "current"
interval. A next interval starting within MERGE_THRESHOLD_S of the
current end is absorbed; otherwise current is closed out.

RULES:
- next.start <= current.end + threshold → merge, end = max(both ends)
- The running end never shrinks
- Output is strictly ordered by start; consecutive gaps exceed threshold
- Empty input → empty output
- The input sequence is not modified
"""

from __future__ import annotations

from typing import Iterable, List

from swear_killer.config import MERGE_THRESHOLD_S
from swear_killer.core.ir import Interval


def merge_intervals(
    intervals: Iterable[Interval],
    threshold: float = MERGE_THRESHOLD_S,
) -> List[Interval]:
    """Merge intervals that overlap or lie within ``threshold`` seconds."""
    ordered = sorted(intervals, key=lambda item: item.start)
    if not ordered:
        return []

    merged: List[Interval] = []
    current = ordered[0]
    for candidate in ordered[1:]:
        if candidate.start <= current.end + threshold:
            if candidate.end > current.end:
                current = Interval(current.start, candidate.end)
        else:
            merged.append(current)
            current = candidate
    merged.append(current)
    return merged
