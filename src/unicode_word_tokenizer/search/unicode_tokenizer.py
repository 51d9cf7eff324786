"""Unicode word tokenizer.

Text flows through four stages before any token is emitted:

1. UAX #29 word segmentation (:func:`word_indices`)
2. splitting each word on inner punctuation while eliding apostrophes that
   sit between two alphanumeric characters (``sam's`` -> ``sams``)
3. merging tokens separated only by an apostrophe run, for the cases where
   the word boundary fell on the apostrophe (``Sam`s``)
4. emitting one extra compound token for every maximal dash-bridged run
   (``state-of-the-art`` -> ``state of the art stateoftheart``)

All offsets are UTF-8 byte offsets into the original text.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

from unicode_word_tokenizer.search.charsets import DEFAULT_TABLES, CharacterTables
from unicode_word_tokenizer.search.models import POSITION_MASK, Token, next_position
from unicode_word_tokenizer.search.segmentation import is_alphanumeric, utf8_len, word_indices


if TYPE_CHECKING:
    from unicode_word_tokenizer.config import Settings


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PendingToken:
    """Mutable token under construction; never leaves this module."""

    text: str
    offset_from: int
    offset_to: int


def split_word_tokens(
    word_offset: int,
    word: str,
    tables: CharacterTables = DEFAULT_TABLES,
) -> list[PendingToken]:
    """Split one word on inner punctuation, eliding inner apostrophes."""
    tokens: list[PendingToken] = []
    alnum = [is_alphanumeric(ch) for ch in word]
    last_index = len(word) - 1

    buffer: list[str] = []
    start: int | None = None
    end = 0

    def flush() -> None:
        nonlocal start, end
        if start is not None and buffer:
            tokens.append(PendingToken("".join(buffer), word_offset + start, word_offset + end))
        buffer.clear()
        start = None
        end = 0

    byte_index = 0
    for index, ch in enumerate(word):
        next_byte_index = byte_index + utf8_len(ch)

        # Checked before the alphanumeric rule: U+02BC and U+02B9 are letters.
        if tables.is_apostrophe_like(ch) and 0 < index < last_index and alnum[index - 1] and alnum[index + 1]:
            end = next_byte_index
        elif alnum[index]:
            if start is None:
                start = byte_index
            buffer.append(ch)
            end = next_byte_index
        else:
            flush()

        byte_index = next_byte_index

    flush()
    return tokens


def _separator(data: bytes, offset_from: int, offset_to: int) -> str:
    return data[offset_from:offset_to].decode("utf-8", "surrogatepass")


def merge_apostrophe_runs(
    tokens: Iterable[PendingToken],
    data: bytes,
    tables: CharacterTables = DEFAULT_TABLES,
) -> list[PendingToken]:
    """Join neighbours separated only by apostrophe-like characters.

    ``data`` is the UTF-8 encoding of the text the tokens were cut from.
    The input tokens are consumed; merged entries are updated in place.
    """
    merged: list[PendingToken] = []
    for token in tokens:
        if merged:
            previous = merged[-1]
            if token.offset_from >= previous.offset_to and tables.is_apostrophe_run(
                _separator(data, previous.offset_to, token.offset_from)
            ):
                previous.text += token.text
                previous.offset_to = token.offset_to
                continue
        merged.append(token)
    return merged


def expand_dash_compounds(
    tokens: list[PendingToken],
    data: bytes,
    tables: CharacterTables = DEFAULT_TABLES,
) -> list[PendingToken]:
    """Add one compound token after every maximal dash-bridged run.

    The sub-tokens of a run are all kept; a run of N tokens yields N + 1.
    """
    expanded: list[PendingToken] = []
    index = 0
    while index < len(tokens):
        first = tokens[index]
        expanded.append(first)

        run_end = index
        parts = [first.text]
        while run_end + 1 < len(tokens):
            current, following = tokens[run_end], tokens[run_end + 1]
            if following.offset_from < current.offset_to:
                break
            if not tables.is_dash_run(_separator(data, current.offset_to, following.offset_from)):
                break
            run_end += 1
            parts.append(following.text)
            expanded.append(following)

        if run_end > index:
            expanded.append(PendingToken("".join(parts), first.offset_from, tokens[run_end].offset_to))
        index = run_end + 1

    return expanded


def tokenize_text(text: str, tables: CharacterTables = DEFAULT_TABLES) -> list[PendingToken]:
    """Run every stage over ``text`` and return the final token order."""
    data = text.encode("utf-8", "surrogatepass")
    split = (
        token
        for word_offset, word in word_indices(text)
        for token in split_word_tokens(word_offset, word, tables)
    )
    merged = merge_apostrophe_runs(split, data, tables)
    return expand_dash_compounds(merged, data, tables)


class UnicodeTokenStream:
    """Pull-based, single-pass cursor over the tokens of one text.

    ``advance()`` moves to the next token and returns False once the stream
    is exhausted; ``current()`` returns the token last advanced to.
    """

    def __init__(self, pending: Iterable[PendingToken]) -> None:
        self._pending: deque[PendingToken] = deque(pending)
        self._position = POSITION_MASK
        self._token: Token | None = None

    def advance(self) -> bool:
        if not self._pending:
            return False
        pending = self._pending.popleft()
        self._position = next_position(self._position)
        self._token = Token(
            text=pending.text,
            position=self._position,
            offset_from=pending.offset_from,
            offset_to=pending.offset_to,
        )
        return True

    def current(self) -> Token | None:
        return self._token

    def process(self, sink: Callable[[Token], None]) -> int:
        """Feed every remaining token to ``sink`` and return how many were fed."""
        count = 0
        while self.advance():
            sink(self._token)  # type: ignore[arg-type]
            count += 1
        return count

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if not self.advance():
            raise StopIteration
        return self._token  # type: ignore[return-value]


class UnicodeTokenizer:
    """Tokenizer for multilingual text (registered as ``"unicode"``).

    Instances hold no per-text state and may be reused; every call builds an
    independent stream whose positions start at 0.
    """

    def __init__(self, tables: CharacterTables | None = None) -> None:
        self.tables = tables or DEFAULT_TABLES

    @classmethod
    def from_settings(cls, settings: Settings) -> UnicodeTokenizer:
        return cls(settings.character_tables())

    def token_stream(self, text: str) -> UnicodeTokenStream:
        pending = tokenize_text(text, self.tables)
        logger.debug("Tokenized %d chars into %d tokens", len(text), len(pending))
        return UnicodeTokenStream(pending)

    def __call__(self, text: str) -> Iterator[Token]:
        return self.token_stream(text)
