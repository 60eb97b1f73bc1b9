"""SRT timestamp parsing.

WHY: SRT cue boundaries are written as clock strings (``00:01:23,456``)
but every later stage works in float seconds.

HOW: A single anchored regex validates the lexical form and captures the
four numeric fields; the seconds value is computed arithmetically, so
hours are not limited to a 24-hour clock.

RULES:
- Accepted form: two or more hour digits, then ``:MM:SS,mmm``
- Minutes and seconds must be 00-59; hours are unbounded
- The millisecond separator must be a comma; ``HH:MM:SS.mmm`` is rejected
- Result = H*3600 + M*60 + S + mmm/1000
- Any other input raises MalformedTimestampError
"""

from __future__ import annotations

import re

from swear_killer.core.errors import MalformedTimestampError

# Unanchored building block, shared with the scanner's range pattern.
TIMESTAMP_PATTERN = r"\d{2,}:\d{2}:\d{2},\d{3}"

_TIMESTAMP_RE = re.compile(r"(\d{2,}):(\d{2}):(\d{2}),(\d{3})")


def parse_srt_timestamp(timestamp: str) -> float:
    """Convert an ``HH:MM:SS,mmm`` timestamp to seconds.

    Args:
        timestamp: The timestamp text, without surrounding whitespace.

    Returns:
        The timestamp as float seconds.

    Raises:
        MalformedTimestampError: If the text does not match the fixed form,
            or minutes or seconds are out of range.
    """
    match = _TIMESTAMP_RE.fullmatch(timestamp)
    if match is None:
        raise MalformedTimestampError(timestamp)
    hours, minutes, seconds, millis = (int(part) for part in match.groups())
    if minutes > 59 or seconds > 59:
        raise MalformedTimestampError(timestamp)
    # Single division keeps the result the closest float to the exact value.
    total_ms = (hours * 3600 + minutes * 60 + seconds) * 1000 + millis
    return total_ms / 1000.0
