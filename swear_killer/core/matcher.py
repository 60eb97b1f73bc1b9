"""Case-insensitive flagged-term matching for subtitle text.

WHY: A block is muted if *any* flagged term appears anywhere in its text,
including inside a longer word ("fuck" matches "Fucking awesome").

HOW: Lower-case the block text once, then test each lower-cased term for
plain substring containment, stopping at the first hit.

RULES:
- Substring containment only — no tokenisation, no word boundaries
- Empty terms never match
- Term order affects only which term is reported, never the yes/no outcome
"""

from __future__ import annotations

from typing import Iterable, Optional


def find_flagged_term(text: str, vocabulary: Iterable[str]) -> Optional[str]:
    """Return the first vocabulary term contained in ``text``, or None."""
    haystack = text.lower()
    for term in vocabulary:
        needle = term.lower()
        if needle and needle in haystack:
            return term
    return None


def contains_flagged_term(text: str, vocabulary: Iterable[str]) -> bool:
    """True if any vocabulary term occurs in ``text`` (case-insensitive)."""
    return find_flagged_term(text, vocabulary) is not None
