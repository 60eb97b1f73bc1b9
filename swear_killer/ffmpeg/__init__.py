"""ffmpeg command generation and execution.

WHY: The mute directive is a command for an external tool. Rendering it
(directive.py) is pure and deterministic; running it (runner.py) is
asynchronous process handling. Keeping both in one package isolates
everything that knows ffmpeg's command-line syntax.

RULES:
- directive.py never touches processes or the filesystem
- runner.py executes argv lists, never shell strings
"""

from swear_killer.ffmpeg.directive import (
    build_ffmpeg_args,
    build_filter_expression,
    build_mute_directive,
)

__all__ = [
    "build_ffmpeg_args",
    "build_filter_expression",
    "build_mute_directive",
]
