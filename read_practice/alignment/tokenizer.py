"""Passage tokenization into addressable word units for highlighting."""
from __future__ import annotations

import re
from typing import List, Optional, Union

from read_practice.models.passage_word import PassageWordUnit
from read_practice.text import escape_html

_WHITESPACE_SPLIT = re.compile(r"(\s+)")

RenderPart = Union[str, PassageWordUnit]


def _split_passage(text: str) -> List[RenderPart]:
    parts: List[RenderPart] = []
    index = 0
    for piece in _WHITESPACE_SPLIT.split(text):
        if not piece:
            continue
        if piece.isspace():
            parts.append(piece)
        else:
            parts.append(PassageWordUnit(index=index, text=piece))
            index += 1
    return parts


def tokenize_passage(text: Optional[str]) -> List[PassageWordUnit]:
    """Split a passage into word units without keeping any render state.

    Example: "The cat  sat." -> units "The", "cat", "sat." at indices 0..2
    """
    if not text:
        return []
    return [p for p in _split_passage(text) if isinstance(p, PassageWordUnit)]


class PassageRenderer:
    """Owns the displayed passage and its addressable word units.

    ``parts`` interleaves whitespace separators (plain ``str``) with
    ``PassageWordUnit`` objects in display order. After ``reset`` the passage
    is plain text again and there are no units.
    """

    def __init__(self) -> None:
        self.text: str = ""
        self.parts: List[RenderPart] = []
        self.units: List[PassageWordUnit] = []

    def tokenize(self, passage_text: Optional[str]) -> List[PassageWordUnit]:
        if not passage_text:
            return self.units
        self.text = passage_text
        self.parts = _split_passage(passage_text)
        self.units = [p for p in self.parts if isinstance(p, PassageWordUnit)]
        return self.units

    def reset(self, passage_text: Optional[str]) -> None:
        if not passage_text:
            return
        self.text = passage_text
        self.parts = []
        self.units = []

    @property
    def annotated(self) -> bool:
        return bool(self.units)

    def to_html(self) -> str:
        if not self.parts:
            return escape_html(self.text)
        out = []
        for part in self.parts:
            if isinstance(part, PassageWordUnit):
                css = ' class="word-read"' if part.read else ""
                out.append(f'<span data-word-index="{part.index}"{css}>{escape_html(part.text)}</span>')
            else:
                out.append(escape_html(part))
        return "".join(out)
