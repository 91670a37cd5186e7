"""Split raw résumé / job-description text into comparable terms."""
from __future__ import annotations

import re
from typing import Any

# Only these characters are stripped; accents, digits, '+', '@' etc. survive.
_PUNCTUATION_RE = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")
_MULTI_SPACE_RE = re.compile(r"\s{2,}")
_SPLIT_RE = re.compile(r"\s+")

MIN_TERM_LENGTH = 2


def tokenize(text: Any) -> list[str]:
    """Lowercase, strip punctuation and split *text* into terms.

    Terms shorter than two characters are dropped. Duplicates are kept.
    Anything that is not a non-empty string yields an empty list.
    """
    if not text or not isinstance(text, str):
        return []
    cleaned = _PUNCTUATION_RE.sub("", text.lower())
    cleaned = _MULTI_SPACE_RE.sub(" ", cleaned)
    return [t for t in _SPLIT_RE.split(cleaned) if len(t) >= MIN_TERM_LENGTH]


def term_set(text: Any) -> frozenset[str]:
    return frozenset(tokenize(text))
