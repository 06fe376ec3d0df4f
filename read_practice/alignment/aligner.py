"""Live alignment of a growing transcript against passage word units."""
from __future__ import annotations

from typing import List, Sequence

from read_practice.models.passage_word import PassageWordUnit
from .normalizer import first_token, normalize_words


def passage_keys(units: Sequence[PassageWordUnit]) -> List[str]:
    """Comparison key for each unit (first normalized token, '' if none)."""
    return [first_token(u.text) for u in units]


def mark_words_as_read(transcript_text: str, units: Sequence[PassageWordUnit]) -> int:
    """Greedy forward match of transcript tokens onto passage units.

    Both cursors start at zero. A match marks the unit read and advances
    both; a mismatch skips the passage unit only. Omitted passage words are
    skipped silently, while an inserted spoken word stalls the transcript
    cursor until it coincides with a later passage word.

    Marks are only ever added, so calling again with a longer transcript is
    safe and never clears an earlier mark.

    Args:
        transcript_text: Every finalized result of the attempt so far
        units: Passage word units in reading order

    Returns:
        Number of units newly marked read by this call
    """
    transcript_words = normalize_words(transcript_text)
    if not transcript_words or not units:
        return 0

    keys = passage_keys(units)
    newly_read = 0
    t_idx = 0
    p_idx = 0
    while t_idx < len(transcript_words) and p_idx < len(keys):
        if transcript_words[t_idx] == keys[p_idx]:
            if units[p_idx].mark_read():
                newly_read += 1
            t_idx += 1
        p_idx += 1
    return newly_read
