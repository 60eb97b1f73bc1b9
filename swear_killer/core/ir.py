"""Value types passed between the stages of the mute pipeline.

WHY: The scanner, extractor, merger and directive generator each hand
data to the next stage. Keeping those shapes in one module makes the
contract between stages explicit and lets every stage be tested alone.

HOW: Frozen dataclasses, one per concept:
  SubtitleBlock — one timed SRT entry as the scanner saw it (raw timestamps)
  Interval      — a (start, end) range in seconds whose audio is silenced
  MuteRequest   — everything the pipeline needs, supplied by the caller
  MuteDirective — the rendered ffmpeg command plus its filter expression
  MuteResult    — the request together with every intermediate product

RULES:
- All types are immutable; stages build new instances instead of mutating
- All times are float seconds
- Interval.end is not validated against Interval.start (malformed sources
  pass through unchanged)
- MuteDirective.filter_expression is "" for the copy-only form
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SubtitleBlock:
    """A single timed text entry read from an SRT document.

    WHY: The scanner only recognises block structure; converting the
    timestamps is the extractor's job so that conversion errors surface
    exactly once, at the point where the block is actually needed.

    RULES:
    - start_raw / end_raw: timestamps exactly as captured (``HH:MM:SS,mmm``)
    - text: content lines joined with a single space, case preserved
    """

    start_raw: str
    end_raw: str
    text: str = ""


@dataclass(frozen=True)
class Interval:
    """A time range, in seconds, whose audio must be muted."""

    start: float
    end: float

    @property
    def duration(self) -> float:
        """Return the interval length in seconds."""
        return self.end - self.start


@dataclass(frozen=True)
class MuteRequest:
    """Inputs for a single subtitle-to-directive run.

    WHY: The pipeline must not read paths, offsets or vocabulary from
    ambient state. Callers (CLI, tests, other front ends) build one of
    these and pass it in explicitly.

    RULES:
    - vocabulary is stored as a tuple so the request stays hashable/immutable
    - offset is added to both boundaries of every matched block
    """

    subtitle_path: str
    input_path: str
    output_path: str
    vocabulary: Tuple[str, ...] = ()
    offset: float = 0.0


@dataclass(frozen=True)
class MuteDirective:
    """The rendered ffmpeg invocation for a merged interval set.

    WHY: The full command string is what users copy and run, but the
    runner needs the bare ``between(...)`` expression to build its own
    argument vector. Returning both avoids re-parsing the command.

    RULES:
    - command: byte-exact display/contract form (see ffmpeg.directive)
    - filter_expression: ``between(t,s,e)+...`` or "" when nothing is muted
    - intervals: the merged intervals the expression was built from
    """

    command: str
    filter_expression: str
    input_path: str
    output_path: str
    intervals: Tuple[Interval, ...] = ()

    @property
    def is_copy_only(self) -> bool:
        """True when there is nothing to mute and the streams are copied."""
        return not self.filter_expression

    @property
    def audio_filter(self) -> str:
        """The ``-af`` argument value, or "" for the copy-only form."""
        if self.is_copy_only:
            return ""
        return "volume=enable='{}':volume=0".format(self.filter_expression)


@dataclass(frozen=True)
class MuteResult:
    """Everything one pipeline run produced."""

    request: MuteRequest
    raw_intervals: Tuple[Interval, ...]
    merged_intervals: Tuple[Interval, ...]
    directive: MuteDirective
