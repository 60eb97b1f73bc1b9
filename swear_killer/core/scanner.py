"""Two-state scanner that splits an SRT document into timed blocks.

WHY: Real-world SRT files are messy — missing index numbers, trailing
position metadata on the timing line, no blank line after the last cue.
A line-driven state machine tolerates all of that without ever needing
the whole file in memory.

HOW: Each line is stripped, then classified against the current state:

  NOT_IN_BLOCK + timing line   → IN_BLOCK (capture both raw timestamps)
  NOT_IN_BLOCK + anything else → ignored (index numbers, preamble)
  IN_BLOCK     + blank line    → emit block, back to NOT_IN_BLOCK
  IN_BLOCK     + other line    → append to block text
  end of input while IN_BLOCK  → emit block

RULES:
- A timing line is found by *searching* for ``<ts> --> <ts>``; text after
  the second timestamp is ignored
- A timing-shaped line inside a block is ordinary text, not a new block
- Text lines are joined with one space; case is preserved
- The scanner never converts timestamps and never raises on content
- Output is a lazy, single-pass iterator
"""

from __future__ import annotations

import enum
import re
from typing import Iterable, Iterator, List

from swear_killer.core.ir import SubtitleBlock
from swear_killer.core.timestamps import TIMESTAMP_PATTERN

_RANGE_RE = re.compile(
    r"({ts})\s*-->\s*({ts})".format(ts=TIMESTAMP_PATTERN)
)


class _State(enum.Enum):
    NOT_IN_BLOCK = "not_in_block"
    IN_BLOCK = "in_block"


def scan_blocks(lines: Iterable[str]) -> Iterator[SubtitleBlock]:
    """Yield one SubtitleBlock per timed entry in ``lines``.

    Args:
        lines: The SRT document as an iterable of lines (a file object
               works; trailing newlines are stripped).

    Yields:
        SubtitleBlock objects in document order.
    """
    state = _State.NOT_IN_BLOCK
    start_raw = ""
    end_raw = ""
    text_parts: List[str] = []

    for raw_line in lines:
        line = raw_line.strip()

        if state is _State.NOT_IN_BLOCK:
            match = _RANGE_RE.search(line)
            if match is None:
                continue
            start_raw, end_raw = match.group(1), match.group(2)
            text_parts = []
            state = _State.IN_BLOCK
            continue

        if not line:
            yield SubtitleBlock(start_raw, end_raw, " ".join(text_parts))
            state = _State.NOT_IN_BLOCK
            continue

        text_parts.append(line)

    if state is _State.IN_BLOCK:
        yield SubtitleBlock(start_raw, end_raw, " ".join(text_parts))
