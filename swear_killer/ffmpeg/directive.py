"""Render merged mute intervals as a single ffmpeg command.

WHY: The command string is the product users see, copy, and run; it has
to be byte-identical for identical interval sets. The runner, on the
other hand, needs an argument vector rather than a shell string. Both are
derived here from one MuteDirective so they can never disagree.

HOW: Each interval becomes ``between(t,<start>,<end>)`` with millisecond
precision; the predicates are OR-ed with ``+`` into one ``enable``
expression gating a single ``volume=0`` filter. Video is stream-copied,
audio re-encoded. With no intervals the command is a plain stream copy.

RULES:
- Copy-only form:  ffmpeg -i "<in>" -c copy "<out>"
- Filtered form:   ffmpeg -i "<in>" -af "volume=enable='<expr>':volume=0"
                   -c:v copy -c:a aac "<out>"   (one line)
- Boundaries are formatted with exactly 3 fractional digits
- Paths are inserted verbatim between double quotes
- filter_expression is returned structurally; it is exactly the command
  substring from the first "between(" to the last ")"
- build_ffmpeg_args adds -y (overwrite) and optionally -progress pipe:1
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List

from swear_killer.config import AUDIO_CODEC, FFMPEG_BINARY
from swear_killer.core.ir import Interval, MuteDirective

_PREDICATE = "between(t,{start:.3f},{end:.3f})"


def build_filter_expression(intervals: Iterable[Interval]) -> str:
    """Join one ``between()`` predicate per interval with ``+``."""
    return "+".join(
        _PREDICATE.format(start=interval.start, end=interval.end)
        for interval in intervals
    )


def build_mute_directive(
    intervals: Iterable[Interval],
    input_path: str,
    output_path: str,
) -> MuteDirective:
    """Build the ffmpeg directive that mutes ``intervals``.

    Args:
        intervals: Merged, time-ordered intervals (see merge_intervals).
        input_path: Source media path, inserted verbatim.
        output_path: Destination media path, inserted verbatim.

    Returns:
        A MuteDirective carrying the command string and filter expression.
    """
    interval_tuple = tuple(intervals)

    if not interval_tuple:
        command = 'ffmpeg -i "{}" -c copy "{}"'.format(input_path, output_path)
        return MuteDirective(
            command=command,
            filter_expression="",
            input_path=input_path,
            output_path=output_path,
        )

    expression = build_filter_expression(interval_tuple)
    directive = MuteDirective(
        command="",
        filter_expression=expression,
        input_path=input_path,
        output_path=output_path,
        intervals=interval_tuple,
    )
    command = 'ffmpeg -i "{}" -af "{}" -c:v copy -c:a {} "{}"'.format(
        input_path, directive.audio_filter, AUDIO_CODEC, output_path,
    )
    return replace(directive, command=command)


def build_ffmpeg_args(directive: MuteDirective, progress: bool = False) -> List[str]:
    """Build the argument vector that executes ``directive``.

    WHY: Running through a shell would require re-quoting the paths and
    the filter; an argv list passes them to ffmpeg untouched.

    RULES:
    - argv[0] is the configured FFMPEG_BINARY
    - -y is always added so an existing output is overwritten
    - progress=True inserts ``-progress pipe:1`` before the output path
    """
    args: List[str] = [FFMPEG_BINARY, "-i", directive.input_path]
    if directive.is_copy_only:
        args.extend(["-c", "copy"])
    else:
        args.extend([
            "-af", directive.audio_filter,
            "-c:v", "copy",
            "-c:a", AUDIO_CODEC,
        ])
    args.append("-y")
    if progress:
        args.extend(["-progress", "pipe:1"])
    args.append(directive.output_path)
    return args
