"""Token data models shared by tokenizers and filters."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


# Positions are unsigned 64-bit counters that wrap instead of overflowing.
POSITION_MASK = (1 << 64) - 1


def next_position(position: int) -> int:
    return (position + 1) & POSITION_MASK


@dataclass(frozen=True, slots=True)
class Token:
    """A token emitted by an analyzer.

    ``offset_from``/``offset_to`` are a half-open range of UTF-8 byte offsets
    into the analyzed text. After elision the range may cover more bytes than
    ``text`` holds.
    """

    text: str
    position: int
    offset_from: int
    offset_to: int

    def copy_with(self, **updates: Any) -> Token:
        return replace(self, **updates)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "text": self.text,
            "position": self.position,
            "offset_from": self.offset_from,
            "offset_to": self.offset_to,
        }
