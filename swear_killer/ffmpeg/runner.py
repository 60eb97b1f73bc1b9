"""Async ffmpeg execution, duration probing, and progress parsing.

WHY: Generating the directive is instant; running it can take many
minutes. Users want a progress percentage and the ability to cancel.
This module keeps all process handling out of the core pipeline.

HOW: probe_duration() asks ffprobe for the container duration. The
directive is executed with asyncio.create_subprocess_exec and
``-progress pipe:1``; stdout is read line by line and every
``out_time_us=`` value is turned into a completed fraction when the
total duration is known. Cancelling the awaiting task terminates ffmpeg.

RULES:
- Probe failure is non-fatal: probe_duration returns None and logs a warning
- Only ``out_time_us=`` is trusted (ffmpeg's ``out_time_ms`` is really µs)
- Progress fraction is clamped to [0.0, 1.0]; remaining time to >= 0
- Missing binary → FFmpegNotFoundError; non-zero exit → FFmpegError
- on_status / on_progress callbacks are optional
- Any exception while ffmpeg runs (including cancellation) terminates it
  and is re-raised
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections import deque
from collections.abc import Callable
from typing import Deque, Optional

from swear_killer.config import FFPROBE_BINARY
from swear_killer.core.errors import SwearKillerError
from swear_killer.core.ir import MuteDirective
from swear_killer.ffmpeg.directive import build_ffmpeg_args

logger = logging.getLogger(__name__)

_OUT_TIME_US_RE = re.compile(r"out_time_us=(\d+)")

# Lines of ffmpeg stderr kept for error reports.
_STDERR_TAIL_LINES = 20


class FFmpegNotFoundError(SwearKillerError):
    """Raised when the ffmpeg binary cannot be launched."""


class FFmpegError(SwearKillerError):
    """Raised when ffmpeg exits with a non-zero status.

    RULES:
    - returncode is ffmpeg's exit status
    - stderr_tail holds the last lines ffmpeg wrote to stderr
    """

    def __init__(self, returncode: int, stderr_tail: str = "") -> None:
        self.returncode = returncode
        self.stderr_tail = stderr_tail
        message = "ffmpeg exited with status {}".format(returncode)
        if stderr_tail:
            message += ": " + stderr_tail.splitlines()[-1]
        super().__init__(message)


def parse_progress_line(line: str) -> Optional[float]:
    """Return the processed media time in seconds, or None.

    Only ``out_time_us=<microseconds>`` lines from ``-progress`` output
    are recognised.
    """
    match = _OUT_TIME_US_RE.search(line)
    if match is None:
        return None
    return int(match.group(1)) / 1_000_000.0


def progress_fraction(current_s: float, duration_s: float) -> float:
    """Completed fraction in [0.0, 1.0] for ``current_s`` of ``duration_s``."""
    if duration_s <= 0:
        return 0.0
    return max(0.0, min(current_s / duration_s, 1.0))


async def probe_duration(media_path: str) -> Optional[float]:
    """Return the media duration in seconds via ffprobe, or None on failure."""
    try:
        process = await asyncio.create_subprocess_exec(
            FFPROBE_BINARY,
            "-v", "quiet",
            "-show_entries", "format=duration",
            "-of", "csv=p=0",
            media_path,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.DEVNULL,
        )
    except OSError as exc:
        logger.warning("Could not run %s: %s", FFPROBE_BINARY, exc)
        return None

    stdout, _ = await process.communicate()
    if process.returncode != 0:
        logger.warning("ffprobe exited with status %s for %s", process.returncode, media_path)
        return None

    text = stdout.decode("utf-8", errors="replace").strip()
    try:
        duration = float(text)
    except ValueError:
        logger.warning("Could not get video duration: unexpected ffprobe output %r", text)
        return None
    return duration if duration > 0 else None


async def _drain_stderr(stream: asyncio.StreamReader, tail: Deque[str]) -> None:
    async for raw in stream:
        tail.append(raw.decode("utf-8", errors="replace").rstrip())


async def run_directive(
    directive: MuteDirective,
    duration: Optional[float] = None,
    on_status: Callable[[str], None] | None = None,
    on_progress: Callable[[float, float], None] | None = None,
) -> int:
    """Execute ``directive`` with ffmpeg, streaming progress.

    Args:
        directive: The directive to run (see build_mute_directive).
        duration: Total media seconds, if known; enables on_progress.
        on_status: Called with human-readable status lines.
        on_progress: Called with (fraction_complete, remaining_seconds).

    Returns:
        ffmpeg's exit status (always 0; failures raise).

    Raises:
        FFmpegNotFoundError: If ffmpeg cannot be launched.
        FFmpegError: If ffmpeg exits with a non-zero status.
        asyncio.CancelledError: If the task is cancelled; ffmpeg is terminated.
            Any other exception raised while reading progress (for example
            from on_progress) also terminates ffmpeg before propagating.
    """
    args = build_ffmpeg_args(directive, progress=True)
    logger.info("Running: %s", " ".join(args))
    if on_status:
        on_status("Starting ffmpeg...")

    try:
        process = await asyncio.create_subprocess_exec(
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        raise FFmpegNotFoundError("Could not start {}: {}".format(args[0], exc)) from exc

    stderr_tail: Deque[str] = deque(maxlen=_STDERR_TAIL_LINES)
    stderr_task = asyncio.ensure_future(_drain_stderr(process.stderr, stderr_tail))

    try:
        async for raw in process.stdout:
            current = parse_progress_line(raw.decode("utf-8", errors="replace"))
            if current is None or not duration:
                continue
            fraction = progress_fraction(current, duration)
            remaining = max(duration - current, 0.0)
            if on_progress:
                on_progress(fraction, remaining)
        await stderr_task
        returncode = await process.wait()
    except BaseException:
        # Cancellation or a failing callback must not leave ffmpeg running.
        if process.returncode is None:
            logger.info("Terminating ffmpeg (pid %s)", process.pid)
            process.terminate()
            await process.wait()
        stderr_task.cancel()
        raise

    if returncode != 0:
        raise FFmpegError(returncode, "\n".join(stderr_tail))

    if on_progress and duration:
        on_progress(1.0, 0.0)
    if on_status:
        on_status("Processing complete: {}".format(directive.output_path))
    return returncode
