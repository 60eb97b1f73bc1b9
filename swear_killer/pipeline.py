"""End-to-end mute pipeline: MuteRequest in, MuteResult out.

WHY: Front ends (the CLI today, anything else tomorrow) should not wire
extractor, merger and generator together themselves, and the pipeline
must never read paths or vocabulary from shared mutable state.

HOW: run_pipeline() reads the subtitle file once, merges the raw
intervals, renders the directive and returns every intermediate product
in an immutable MuteResult.

RULES:
- Pure apart from reading the subtitle file and logging
- Fatal-input errors (SubtitleReadError, MalformedTimestampError) propagate
- Zero matches is not an error: the result carries the copy-only directive
- Safe to call concurrently for independent requests
"""

from __future__ import annotations

import logging

from swear_killer.core.extractor import find_mute_intervals
from swear_killer.core.ir import MuteRequest, MuteResult
from swear_killer.core.merger import merge_intervals
from swear_killer.ffmpeg.directive import build_mute_directive

logger = logging.getLogger(__name__)


def run_pipeline(request: MuteRequest) -> MuteResult:
    """Produce the mute directive for ``request``."""
    raw = find_mute_intervals(request.subtitle_path, request.vocabulary, request.offset)
    merged = merge_intervals(raw)
    logger.info("Found %d swear segments, merged to %d", len(raw), len(merged))

    directive = build_mute_directive(merged, request.input_path, request.output_path)
    return MuteResult(
        request=request,
        raw_intervals=tuple(raw),
        merged_intervals=tuple(merged),
        directive=directive,
    )
