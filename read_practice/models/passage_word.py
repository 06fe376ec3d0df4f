"""Data model for addressable words of a displayed passage."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PassageWordUnit:
    """One addressable word of the passage, as shown to the learner.

    Attributes:
        index: Zero-based position in the passage (stable for the attempt)
        text: The original-cased substring as it appears in the passage
        read: Whether live recognition has matched this word yet
    """
    index: int
    text: str
    read: bool = False

    def mark_read(self) -> bool:
        """Mark the unit read. Returns True only when it was unread before."""
        if self.read:
            return False
        self.read = True
        return True
