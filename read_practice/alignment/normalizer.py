"""Token normalization shared by live alignment and the backend scorer."""
from __future__ import annotations

import re
from typing import Any, List

# Anything that is neither a word character nor whitespace is dropped.
# Must stay identical to the scorer's rule or live marks drift from scores.
_STRIP_PATTERN = re.compile(r"[^\w\s]")


def normalize_words(text: Any) -> List[str]:
    """Normalize text into comparable word tokens.

    Example: "Hello, World!" -> ["hello", "world"]

    Args:
        text: Text to normalize; non-string input yields no tokens

    Returns:
        Lowercase, punctuation-free tokens, never empty strings
    """
    if not isinstance(text, str):
        return []
    clean = _STRIP_PATTERN.sub("", text.lower())
    return [token for token in clean.split() if token]


def first_token(text: Any) -> str:
    """Comparison key for a passage unit: its first normalized token, or ''."""
    tokens = normalize_words(text)
    return tokens[0] if tokens else ""
