"""Flagged-word vocabulary sources: defaults, word files, and saved settings.

WHY: The vocabulary can come from three places — a word file given on the
command line, the user's saved settings, or the built-in list. Resolving
it here keeps the pipeline itself free of file and settings handling.

HOW: load_vocabulary_file() reads a plain one-term-per-line file.
SettingsStore persists the list as JSON under a single "swear_words" key,
validated with a pydantic model. resolve_vocabulary() applies precedence.

RULES:
- Word files: one term per line, whitespace stripped, blank lines and
  lines starting with '#' skipped, file order kept
- Settings file: {"swear_words": [...]} written with 2-space indent
- A missing, unreadable, invalid, or empty settings file means
  "no saved vocabulary" (load() returns None) — never an error
- Precedence: explicit word file > non-empty saved settings > defaults
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field, ValidationError

from swear_killer.config import SETTINGS_PATH

logger = logging.getLogger(__name__)

DEFAULT_SWEAR_WORDS: tuple[str, ...] = (
    "asshole", "cunt", "shit", "fuck", "fucker", "mother fucker",
    "bullshit", "fucking", "shithead", "cock", "jesus", "christ",
    "jesus christ", "goddammit", "goddamn", "god damn", "bitch", "dickhead",
)
"""Built-in vocabulary used when neither a word file nor settings exist."""


def load_vocabulary_file(path: str | Path) -> List[str]:
    """Load flagged terms from a text file, one per line.

    Args:
        path: Path to a UTF-8 text file.

    Returns:
        Terms in file order.

    Raises:
        OSError: If the file cannot be read.
    """
    lines = Path(path).read_text(encoding="utf-8-sig").splitlines()
    terms: List[str] = []
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        terms.append(stripped)
    return terms


class Settings(BaseModel):
    """On-disk shape of the settings file.

    RULES:
    - swear_words is the only persisted field
    """

    swear_words: List[str] = Field(
        default_factory=list,
        description="Flagged terms, matched case-insensitively as substrings.",
    )


class SettingsStore:
    """Read and write the saved vocabulary.

    WHY: Users tune the vocabulary once and expect it on the next run.

    HOW: A small JSON file (default ~/.swear-killer-settings.json, or the
    SWEAR_KILLER_SETTINGS environment variable) parsed through Settings.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else SETTINGS_PATH

    def load(self) -> Optional[List[str]]:
        """Return the saved vocabulary, or None when nothing usable is saved."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read settings file %s: %s", self.path, exc)
            return None

        try:
            settings = Settings.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("Ignoring invalid settings file %s: %s", self.path, exc)
            return None

        return settings.swear_words or None

    def save(self, words: Sequence[str]) -> Path:
        """Persist ``words`` and return the settings path.

        Raises:
            OSError: If the file cannot be written.
        """
        settings = Settings(swear_words=list(words))
        self.path.write_text(
            json.dumps(settings.model_dump(), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        logger.info("Saved %d swear words to %s", len(settings.swear_words), self.path)
        return self.path


def resolve_vocabulary(
    swears_file: str | Path | None = None,
    store: SettingsStore | None = None,
) -> List[str]:
    """Pick the vocabulary for a run.

    Args:
        swears_file: Optional explicit word file; wins when given.
        store: Settings store consulted when no word file is given.

    Returns:
        The vocabulary as a new list.

    Raises:
        OSError: If an explicit word file cannot be read.
    """
    if swears_file is not None:
        return load_vocabulary_file(swears_file)
    if store is not None:
        saved = store.load()
        if saved:
            return saved
    return list(DEFAULT_SWEAR_WORDS)
