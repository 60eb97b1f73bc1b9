"""Output path helpers.

WHY: Most users want the cleaned file next to the original with an
obvious name, and ffmpeg picks the container from the extension, so an
output path without a known video extension would fail late.

RULES:
- auto_output_path: <dir>/<stem>-CLEAN.mp4 (single extension stripped)
- normalize_output_path: keep known video extensions (case-insensitive),
  otherwise append ".mp4"
"""

from __future__ import annotations

from pathlib import Path

from swear_killer.config import (
    AUTO_OUTPUT_EXTENSION,
    CLEAN_SUFFIX,
    VALID_OUTPUT_EXTENSIONS,
)


def auto_output_path(video_path: str | Path) -> Path:
    """Derive ``<stem>-CLEAN.mp4`` next to ``video_path``."""
    video = Path(video_path)
    return video.parent / "{}{}{}".format(video.stem, CLEAN_SUFFIX, AUTO_OUTPUT_EXTENSION)


def normalize_output_path(output_path: str | Path) -> Path:
    """Append ".mp4" unless ``output_path`` already has a video extension."""
    text = str(output_path)
    if text.lower().endswith(VALID_OUTPUT_EXTENSIONS):
        return Path(text)
    return Path(text + AUTO_OUTPUT_EXTENSION)
