"""Shared test fixtures for the swear_killer test suite.

WHY: Several test modules need the same small SRT documents — a
multi-block file and one whose last block has no trailing blank line.
Centralizing them keeps expected timings consistent across scanner,
extractor and pipeline tests.

HOW: Plain string constants plus fixtures that write them to tmp_path.

RULES:
- Timestamps in SAMPLE_SRT are chosen so merge behaviour is predictable:
  blocks 2 and 3 are 0.5 s apart (merge), block 5 is far away (separate)
- Files are written as UTF-8
"""

from pathlib import Path

import pytest

SAMPLE_SRT = """\
1
00:00:01,000 --> 00:00:02,000
Good morning, everyone.

2
00:00:05,000 --> 00:00:06,000
What the fuck was that?

3
00:00:06,500 --> 00:00:07,250
Holy SHIT.

4
00:00:09,000 --> 00:00:10,000
Nothing to see here.

5
00:01:23,456 --> 00:01:25,000
You absolute
dickhead!

"""

NO_TRAILING_BLANK_SRT = (
    "1\n"
    "00:00:01,000 --> 00:00:02,000\n"
    "Hello there.\n"
    "\n"
    "2\n"
    "00:00:03,000 --> 00:00:04,500\n"
    "Oh shit, the end."
)

SAMPLE_VOCABULARY = ["fuck", "shit", "dickhead"]


@pytest.fixture
def sample_srt():
    """Five-block document; blocks 2, 3 and 5 contain flagged words."""
    return SAMPLE_SRT


@pytest.fixture
def no_trailing_blank_srt():
    return NO_TRAILING_BLANK_SRT


@pytest.fixture
def write_srt(tmp_path):
    """Factory that writes SRT text under tmp_path and returns its path."""
    def _write_srt(content: str, name: str = "movie.srt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write_srt


@pytest.fixture
def sample_srt_path(write_srt):
    """SAMPLE_SRT written to a temporary file."""
    return write_srt(SAMPLE_SRT)


@pytest.fixture
def sample_vocabulary():
    return list(SAMPLE_VOCABULARY)
