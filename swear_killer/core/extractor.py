"""Turn an SRT document into raw mute intervals.

WHY: This is where the scanner, matcher and timestamp converter meet.
Each block that contains a flagged term becomes one candidate interval,
shifted by the caller's offset to compensate for out-of-sync subtitles.

HOW: One forward pass over scan_blocks(). Per block: match first (cheap,
and unmatched blocks never need their timestamps converted), then convert
both boundaries, add the offset, and keep the interval only if both
shifted boundaries are non-negative.

RULES:
- One interval per matched block, however many terms it contains
- offset is added to start and end alike; it may be negative
- A shifted boundary < 0 drops the whole candidate (never clamped) and
  logs a WARNING naming the offset and the original boundaries
- MalformedTimestampError propagates — the pass is aborted
- Unreadable files raise SubtitleReadError
- No sorting or deduplication here; the merger owns ordering
- end < start is passed through unchanged (logged at DEBUG)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Sequence

from swear_killer.core.errors import SubtitleReadError
from swear_killer.core.ir import Interval
from swear_killer.core.matcher import find_flagged_term
from swear_killer.core.scanner import scan_blocks
from swear_killer.core.timestamps import parse_srt_timestamp

logger = logging.getLogger(__name__)


def extract_intervals(
    lines: Iterable[str],
    vocabulary: Sequence[str],
    offset: float = 0.0,
) -> List[Interval]:
    """Collect offset-adjusted intervals for every block with a flagged term.

    Args:
        lines: SRT document lines (any iterable, e.g. an open file).
        vocabulary: Flagged terms, matched case-insensitively.
        offset: Seconds added to both boundaries of each matched block.

    Returns:
        Intervals in document order, one per matched block.

    Raises:
        MalformedTimestampError: If a matched block's timestamp is invalid.
    """
    intervals: List[Interval] = []

    for block in scan_blocks(lines):
        term = find_flagged_term(block.text, vocabulary)
        if term is None:
            continue

        start = parse_srt_timestamp(block.start_raw)
        end = parse_srt_timestamp(block.end_raw)
        if end < start:
            logger.debug("Block %s --> %s ends before it starts", block.start_raw, block.end_raw)

        adjusted_start = start + offset
        adjusted_end = end + offset
        if adjusted_start < 0 or adjusted_end < 0:
            logger.warning(
                "Offset %f makes segment (%f, %f) negative, skipping",
                offset, start, end,
            )
            continue

        logger.debug("Matched %r in block at %s", term, block.start_raw)
        intervals.append(Interval(adjusted_start, adjusted_end))

    return intervals


def find_mute_intervals(
    subtitle_path: str | Path,
    vocabulary: Sequence[str],
    offset: float = 0.0,
) -> List[Interval]:
    """Read an SRT file and return its raw mute intervals.

    The file is decoded as UTF-8; a leading byte-order mark is tolerated.

    Raises:
        SubtitleReadError: If the file cannot be opened or decoded.
        MalformedTimestampError: If a matched block's timestamp is invalid.
    """
    path = Path(subtitle_path)
    try:
        with path.open("r", encoding="utf-8-sig") as handle:
            return extract_intervals(handle, vocabulary, offset)
    except (OSError, UnicodeDecodeError) as exc:
        raise SubtitleReadError(str(path), str(exc)) from exc
