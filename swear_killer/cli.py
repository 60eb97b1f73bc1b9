"""Command-line interface for Swear Killer.

WHY: The common workflow is "point at a video and its SRT, get a clean
copy". The CLI wires vocabulary resolution, the mute pipeline, and
(optionally) ffmpeg execution behind a single command.

HOW: argparse collects paths, offset and vocabulary options into an
immutable MuteRequest, run_pipeline() produces the directive, and the
command is printed to stdout. With --execute the directive is run via
the async ffmpeg runner, with a progress line on stderr when ffprobe can
report the duration.

RULES:
- --srt is required; --video defaults to input.mp4, --output to output.mp4
- --auto-output derives <stem>-CLEAN.mp4 next to the video
- Explicit --output paths without a known video extension get ".mp4"
- Vocabulary: --swears file > saved settings > built-in defaults
- Only the command goes to stdout; status and logs go to stderr
- Exit status: 0 ok, 1 input/SRT/ffmpeg error, 130 interrupted
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from swear_killer.config import LOG_LEVEL
from swear_killer.core.errors import SwearKillerError
from swear_killer.core.ir import MuteDirective, MuteRequest
from swear_killer.ffmpeg.runner import probe_duration, run_directive
from swear_killer.paths import auto_output_path, normalize_output_path
from swear_killer.pipeline import run_pipeline
from swear_killer.vocabulary import SettingsStore, resolve_vocabulary


def _status(msg: str) -> None:
    """Print a status message to stderr.

    RULES:
    - All status messages go to stderr so stdout carries only the command
    - Always flush after writing
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print(msg, file=sys.stderr)
    sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def _resolve_output(args: argparse.Namespace) -> str:
    if args.auto_output:
        return str(auto_output_path(args.video))
    return str(normalize_output_path(args.output))


def _print_progress(fraction: float, remaining_s: float) -> None:
    sys.stderr.write(
        "\rProcessing: {:.1f}% complete ({:.1f}s remaining)".format(fraction * 100, remaining_s)
    )
    sys.stderr.flush()


async def _execute(directive: MuteDirective) -> None:
    """Probe the duration, then run ffmpeg with progress reporting."""
    duration = await probe_duration(directive.input_path)
    if duration:
        _status("Video duration: {:.1f} minutes".format(duration / 60))
    else:
        _status("Processing video... this may take several minutes.")

    await run_directive(
        directive,
        duration=duration,
        on_status=_status,
        on_progress=_print_progress if duration else None,
    )
    if duration:
        _status("")


def _check_execution_paths(directive: MuteDirective) -> None:
    if not Path(directive.input_path).is_file():
        _fail("Error: input video file does not exist: {}".format(directive.input_path))
    output_dir = Path(directive.output_path).resolve().parent
    if not output_dir.is_dir():
        _fail("Error: output directory does not exist: {}".format(output_dir))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() lets tests inspect
    defaults without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="swear-killer",
        description="Find flagged words in an SRT file and build an ffmpeg "
                    "command that mutes the audio while they are spoken.",
    )
    parser.add_argument(
        "--srt",
        required=True,
        help="Path to the SRT subtitle file.",
    )
    parser.add_argument(
        "--video",
        default="input.mp4",
        help="Path to the input video file (default: %(default)s).",
    )

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--output",
        default="output.mp4",
        help="Path to the output video file (default: %(default)s).",
    )
    output_group.add_argument(
        "--auto-output",
        action="store_true",
        help="Write <video stem>-CLEAN.mp4 next to the input video.",
    )

    parser.add_argument(
        "--swears",
        default=None,
        help="Path to a file of swear words (one per line). "
             "Defaults to saved settings, then the built-in list.",
    )
    parser.add_argument(
        "--offset",
        type=float,
        default=0.0,
        help="Seconds added to every subtitle timestamp "
             "(negative = earlier, positive = later; default: %(default)s).",
    )
    parser.add_argument(
        "--settings",
        default=None,
        help="Path to the settings file (default: ~/.swear-killer-settings.json).",
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Save the resolved swear word list to the settings file.",
    )
    parser.add_argument(
        "--execute",
        action="store_true",
        help="Run the generated ffmpeg command after printing it.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``swear-killer`` and ``python -m swear_killer``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if not args.video or (not args.auto_output and not args.output):
        parser.error("input and output video paths must not be empty")

    store = SettingsStore(args.settings)
    try:
        vocabulary = resolve_vocabulary(args.swears, store)
    except (OSError, UnicodeDecodeError) as e:
        _fail("Error reading swear file: {}".format(e))

    if args.save_settings:
        try:
            saved_to = store.save(vocabulary)
        except OSError as e:
            _fail("Error saving settings: {}".format(e))
        _status("Saved {} swear words to {}".format(len(vocabulary), saved_to))

    request = MuteRequest(
        subtitle_path=args.srt,
        input_path=args.video,
        output_path=_resolve_output(args),
        vocabulary=tuple(vocabulary),
        offset=args.offset,
    )

    _status("Using offset: {:.1f} seconds".format(request.offset))
    _status("Processing SRT: {}".format(request.subtitle_path))
    _status("Input video: {}".format(request.input_path))
    _status("Output video: {}".format(request.output_path))

    try:
        result = run_pipeline(request)
    except SwearKillerError as e:
        _fail("Error processing SRT file: {}".format(e))

    _status("Found {} swear segments".format(len(result.raw_intervals)))
    _status("Merged to {} segments".format(len(result.merged_intervals)))
    if result.directive.is_copy_only:
        _status("No segments to mute. Copying input to output.")

    _status("Generated FFmpeg command:")
    print(result.directive.command, flush=True)

    if not args.execute:
        return

    _check_execution_paths(result.directive)
    try:
        asyncio.run(_execute(result.directive))
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)
    except SwearKillerError as e:
        _fail("Error executing FFmpeg: {}".format(e))
    _status("Clean video saved to: {}".format(result.directive.output_path))


if __name__ == "__main__":
    main()
