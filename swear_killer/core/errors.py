"""Exception types raised by the mute pipeline.

WHY: Callers need to tell a bad subtitle file apart from a bug. A small
hierarchy rooted at SwearKillerError lets the CLI catch everything the
pipeline raises on purpose with a single except clause.

RULES:
- Fatal-input errors abort the whole extraction; no partial result
- MalformedTimestampError is also a ValueError (it is a parse failure)
"""

from __future__ import annotations


class SwearKillerError(Exception):
    """Base class for all errors raised deliberately by swear_killer."""


class MalformedTimestampError(SwearKillerError, ValueError):
    """Raised when a string is not an ``HH:MM:SS,mmm`` timestamp.

    RULES:
    - timestamp holds the offending input verbatim
    """

    def __init__(self, timestamp: str) -> None:
        self.timestamp = timestamp
        super().__init__("Malformed SRT timestamp: {!r}".format(timestamp))


class SubtitleReadError(SwearKillerError):
    """Raised when the subtitle file cannot be opened or decoded.

    RULES:
    - path is the file that failed
    - the original OSError/UnicodeDecodeError is chained as __cause__
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__("Failed to read SRT file {}: {}".format(path, reason))
