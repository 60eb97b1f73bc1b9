"""Configuration constants and .env loading.

WHY: Thresholds, codec choices, binary locations and the settings file
path are plain data. Keeping them in one place makes them easy to find
and override without touching pipeline logic.

HOW: python-dotenv loads a .env file on import. Values that are useful
to override per machine (binary paths, settings location, log level)
read from the environment with sensible defaults; values that are part
of the output contract are plain constants.

RULES:
- MERGE_THRESHOLD_S and AUDIO_CODEC shape the generated command; changing
  them changes the directive contract
- FFMPEG_BINARY / FFPROBE_BINARY only affect execution, never the
  displayed command string (which always starts with "ffmpeg")
- SETTINGS_PATH defaults to ~/.swear-killer-settings.json
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Directive contract
# ---------------------------------------------------------------------------

MERGE_THRESHOLD_S = 1.0
"""Maximum gap (seconds) at which two mute intervals are coalesced."""

AUDIO_CODEC = "aac"
"""Codec the muted audio stream is re-encoded with."""

# ---------------------------------------------------------------------------
# External tools
# ---------------------------------------------------------------------------

FFMPEG_BINARY = os.getenv("SWEAR_KILLER_FFMPEG", "ffmpeg")
FFPROBE_BINARY = os.getenv("SWEAR_KILLER_FFPROBE", "ffprobe")

# ---------------------------------------------------------------------------
# Output naming
# ---------------------------------------------------------------------------

CLEAN_SUFFIX = "-CLEAN"
AUTO_OUTPUT_EXTENSION = ".mp4"

VALID_OUTPUT_EXTENSIONS: tuple[str, ...] = (
    ".mp4", ".mkv", ".avi", ".mov", ".webm",
    ".flv", ".wmv", ".m4v", ".3gp",
)
"""Output extensions accepted as-is; anything else gets ".mp4" appended."""

# ---------------------------------------------------------------------------
# Settings and logging
# ---------------------------------------------------------------------------

SETTINGS_PATH = Path(
    os.getenv(
        "SWEAR_KILLER_SETTINGS",
        str(Path.home() / ".swear-killer-settings.json"),
    )
).expanduser()

LOG_LEVEL = os.getenv("SWEAR_KILLER_LOG_LEVEL", "WARNING").upper()
