"""Unicode word segmentation (UAX #29) with UTF-8 byte offsets.

``uniseg`` yields every segment between word boundaries, including runs of
whitespace and punctuation. Only segments holding at least one alphanumeric
character are reported as words.
"""

from __future__ import annotations

from collections.abc import Iterator

import regex
from uniseg.wordbreak import words


# Alphabetic property (letters plus vowel signs and other alphabetic marks)
# or any numeric general category.
_ALPHANUMERIC = regex.compile(r"[\p{Alphabetic}\p{N}]")


def is_alphanumeric(ch: str) -> bool:
    """Return True when ``ch`` is Alphabetic or Numeric in the Unicode sense."""
    return _ALPHANUMERIC.match(ch) is not None


def utf8_len(text: str) -> int:
    return len(text.encode("utf-8", "surrogatepass"))


def word_indices(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(byte_offset, word)`` for each word of ``text``.

    Offsets are measured in UTF-8 bytes from the start of ``text``.
    """
    offset = 0
    for segment in words(text):
        if any(is_alphanumeric(ch) for ch in segment):
            yield offset, segment
        offset += utf8_len(segment)


def char_to_byte_offsets(text: str) -> list[int]:
    """Map every character index of ``text`` (plus its end) to a byte offset."""
    offsets = [0] * (len(text) + 1)
    total = 0
    for index, ch in enumerate(text):
        offsets[index] = total
        total += utf8_len(ch)
    offsets[len(text)] = total
    return offsets
