"""
Parse Context Module - Shared input for team and market rules.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class ParseContext:
    """
    Text context passed to every rule.

    Attributes:
        texts: Nearby fragment texts, closest to the click first
        odds: Normalized odds token of the closest fragment, or None
              when nothing was selected
    """
    texts: Tuple[str, ...]
    odds: Optional[str] = None

    @classmethod
    def from_texts(cls, texts: Sequence[str], odds: Optional[str] = None) -> 'ParseContext':
        return cls(texts=tuple(texts), odds=odds)

    @property
    def joined(self) -> str:
        """All fragments joined with single spaces."""
        return " ".join(self.texts)

    @property
    def lowered(self) -> str:
        """Joined context, lower-cased for keyword matching."""
        return self.joined.lower()
