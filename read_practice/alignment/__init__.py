"""Alignment utilities for marking passage words as they are read aloud."""
from .aligner import mark_words_as_read
from .normalizer import normalize_words
from .tokenizer import PassageRenderer, tokenize_passage

__all__ = ["mark_words_as_read", "normalize_words", "PassageRenderer", "tokenize_passage"]
