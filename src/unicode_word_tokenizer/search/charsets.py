"""Lookalike punctuation tables used by the Unicode tokenizer.

Apostrophes and dashes come in many visually similar code points. The
tokenizer never hard-codes them; it consults a :class:`CharacterTables`
instance so new lookalikes can be added without touching the algorithm.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


APOSTROPHE_LIKE: frozenset[str] = frozenset(
    {
        "'",  # APOSTROPHE
        "’",  # RIGHT SINGLE QUOTATION MARK
        "‘",  # LEFT SINGLE QUOTATION MARK
        "‛",  # SINGLE HIGH-REVERSED-9 QUOTATION MARK
        "ʼ",  # MODIFIER LETTER APOSTROPHE
        "＇",  # FULLWIDTH APOSTROPHE
        "`",  # GRAVE ACCENT
        "´",  # ACUTE ACCENT
        "ʹ",  # MODIFIER LETTER PRIME
        "′",  # PRIME
    }
)

DASH_LIKE: frozenset[str] = frozenset(
    {
        "-",  # HYPHEN-MINUS
        "‐",  # HYPHEN
        "‑",  # NON-BREAKING HYPHEN
        "‒",  # FIGURE DASH
        "–",  # EN DASH
        "—",  # EM DASH
        "―",  # HORIZONTAL BAR
        "−",  # MINUS SIGN
        "﹣",  # SMALL HYPHEN-MINUS
        "－",  # FULLWIDTH HYPHEN-MINUS
    }
)


@dataclass(frozen=True, slots=True)
class CharacterTables:
    """Apostrophe-like and dash-like code point sets."""

    apostrophes: frozenset[str] = APOSTROPHE_LIKE
    dashes: frozenset[str] = DASH_LIKE

    def is_apostrophe_like(self, ch: str) -> bool:
        return ch in self.apostrophes

    def is_dash_like(self, ch: str) -> bool:
        return ch in self.dashes

    def is_apostrophe_run(self, separator: str) -> bool:
        """True when ``separator`` is non-empty and made only of apostrophes."""
        return bool(separator) and all(ch in self.apostrophes for ch in separator)

    def is_dash_run(self, separator: str) -> bool:
        """True when ``separator`` is non-empty and made only of dashes."""
        return bool(separator) and all(ch in self.dashes for ch in separator)

    def extended(self, *, apostrophes: Iterable[str] = (), dashes: Iterable[str] = ()) -> CharacterTables:
        """Return a copy with additional code points merged in."""
        return CharacterTables(
            apostrophes=self.apostrophes | frozenset(apostrophes),
            dashes=self.dashes | frozenset(dashes),
        )


DEFAULT_TABLES = CharacterTables()
