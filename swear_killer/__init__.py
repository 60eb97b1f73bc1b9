"""Swear Killer — mute flagged words in a video using its subtitles.

WHY: Subtitles already say *when* every line is spoken. Scanning them for
flagged words gives the exact time ranges to silence, which a single
ffmpeg volume filter can then mute without touching the video stream.

HOW: Five-stage pipeline — scan SRT blocks, match vocabulary, convert and
offset timestamps, merge nearby intervals, render one ffmpeg directive.
Each stage is independently testable; pipeline.run_pipeline() chains them.

RULES:
- The generated command string is a stable, byte-exact contract
- The core never runs ffmpeg; ffmpeg.runner does, on request
- No stage reads ambient state: inputs arrive as a MuteRequest
"""

__version__ = "0.1.0"
