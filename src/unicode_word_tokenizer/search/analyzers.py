"""Analyzer utilities around the Unicode tokenizer.

This module mirrors Whoosh's composable tokenizer/filter design: a tokenizer
turns text into a stream of tokens and filters transform that stream. The
named analyzers registered here match the ones a search index expects to find
(``raw``, ``default``, ``unicode``, ``en_stem`` and ``whitespace``).

Filters only rewrite token text or drop tokens. Offsets and positions are
left as the tokenizer produced them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Protocol
import unicodedata

from nltk.stem import SnowballStemmer
import regex

from unicode_word_tokenizer.search.charsets import DEFAULT_TABLES, CharacterTables
from unicode_word_tokenizer.search.models import Token
from unicode_word_tokenizer.search.segmentation import char_to_byte_offsets, utf8_len
from unicode_word_tokenizer.search.unicode_tokenizer import UnicodeTokenizer


DEFAULT_MAX_TOKEN_BYTES = 40


class Analyzer(Protocol):
    """Protocol implemented by analyzers."""

    def __call__(self, text: str) -> list[Token]:  # pragma: no cover - interface definition
        ...


class Tokenizer(Protocol):
    """Protocol implemented by tokenizers."""

    def __call__(self, text: str) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class TokenFilter(Protocol):
    """Protocol implemented by token filters."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class RegexTokenizer:
    """Regex-based tokenizer that yields every match as a token."""

    def __init__(self, pattern: str, flags: int = 0) -> None:
        self.pattern = regex.compile(pattern, flags)

    def __call__(self, text: str) -> Iterator[Token]:
        byte_offsets = char_to_byte_offsets(text)
        for position, match in enumerate(self.pattern.finditer(text)):
            yield Token(
                text=match.group(0),
                position=position,
                offset_from=byte_offsets[match.start()],
                offset_to=byte_offsets[match.end()],
            )


class SimpleTokenizer(RegexTokenizer):
    """Splits on every character that is not alphanumeric."""

    def __init__(self) -> None:
        super().__init__(r"[\p{Alphabetic}\p{N}]+")


class WhitespaceTokenizer(RegexTokenizer):
    """Splits on ASCII whitespace only; punctuation and no-break spaces stay attached."""

    def __init__(self) -> None:
        super().__init__(r"[^ \t\n\f\r]+")


class RawTokenizer:
    """Emits the whole input as a single token.

    Empty input yields no token rather than one empty token.
    """

    def __call__(self, text: str) -> Iterator[Token]:
        if text:
            yield Token(text=text, position=0, offset_from=0, offset_to=utf8_len(text))


class LowercaseFilter:
    """Filter that lowercases token text."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text.islower():
                yield token
            else:
                yield token.copy_with(text=token.text.lower())


# Letters that carry no canonical decomposition but have a common ASCII form.
_ASCII_FOLDING_TABLE: dict[str, str] = {
    "ß": "ss",
    "ẞ": "SS",
    "æ": "ae",
    "Æ": "AE",
    "œ": "oe",
    "Œ": "OE",
    "ø": "o",
    "Ø": "O",
    "ł": "l",
    "Ł": "L",
    "đ": "d",
    "Đ": "D",
    "ð": "d",
    "Ð": "D",
    "þ": "th",
    "Þ": "TH",
    "ı": "i",
    "ħ": "h",
    "Ħ": "H",
    "ŋ": "n",
    "Ŋ": "N",
}


def _fold_char(ch: str) -> str:
    if ch.isascii():
        return ch
    if ch in _ASCII_FOLDING_TABLE:
        return _ASCII_FOLDING_TABLE[ch]
    decomposed = "".join(c for c in unicodedata.normalize("NFKD", ch) if not unicodedata.combining(c))
    if decomposed and decomposed.isascii():
        return decomposed
    return ch


class AsciiFoldingFilter:
    """Replaces accented Latin characters with their ASCII equivalents.

    Characters without an ASCII form (CJK, Greek, Cyrillic, ...) are kept.
    """

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text.isascii():
                yield token
                continue
            folded = "".join(_fold_char(ch) for ch in token.text)
            yield token if folded == token.text else token.copy_with(text=folded)


class RemoveLongFilter:
    """Drops tokens whose UTF-8 text is ``limit_bytes`` long or longer."""

    def __init__(self, limit_bytes: int = DEFAULT_MAX_TOKEN_BYTES) -> None:
        self.limit_bytes = limit_bytes

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if utf8_len(token.text) < self.limit_bytes:
                yield token


class EnglishStemFilter:
    """Stems token text with the English Snowball (Porter2) stemmer."""

    def __init__(self) -> None:
        self._stemmer = SnowballStemmer("english")

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            stemmed = self._stemmer.stem(token.text)
            yield token if stemmed == token.text else token.copy_with(text=stemmed)


class AnalyzerPipeline:
    """Composable analyzer pipeline (tokenizer + filters)."""

    def __init__(self, tokenizer: Tokenizer, filters: Sequence[TokenFilter] | None = None) -> None:
        self.tokenizer = tokenizer
        self.filters = list(filters or [])

    def __call__(self, text: str) -> list[Token]:
        stream: Iterable[Token] = self.tokenizer(text)
        for token_filter in self.filters:
            stream = token_filter(stream)
        return list(stream)


def _raw(tables: CharacterTables, max_token_bytes: int) -> Analyzer:
    return AnalyzerPipeline(RawTokenizer())


def _default(tables: CharacterTables, max_token_bytes: int) -> Analyzer:
    return AnalyzerPipeline(SimpleTokenizer(), [RemoveLongFilter(max_token_bytes), LowercaseFilter()])


def _unicode(tables: CharacterTables, max_token_bytes: int) -> Analyzer:
    return AnalyzerPipeline(UnicodeTokenizer(tables), [LowercaseFilter(), AsciiFoldingFilter()])


def _en_stem(tables: CharacterTables, max_token_bytes: int) -> Analyzer:
    return AnalyzerPipeline(
        SimpleTokenizer(),
        [RemoveLongFilter(max_token_bytes), LowercaseFilter(), EnglishStemFilter()],
    )


def _whitespace(tables: CharacterTables, max_token_bytes: int) -> Analyzer:
    return AnalyzerPipeline(WhitespaceTokenizer())


_ANALYZER_FACTORIES: dict[str, Callable[[CharacterTables, int], Analyzer]] = {
    "raw": _raw,
    "default": _default,
    "unicode": _unicode,
    "en_stem": _en_stem,
    "whitespace": _whitespace,
}


def available_analyzers() -> list[str]:
    return sorted(_ANALYZER_FACTORIES)


def get_analyzer(
    name: str | None,
    *,
    tables: CharacterTables | None = None,
    max_token_bytes: int = DEFAULT_MAX_TOKEN_BYTES,
) -> Analyzer:
    """Return analyzer by name, defaulting to the ``default`` analyzer."""

    normalized = "default" if name is None else name.lower()
    if normalized not in _ANALYZER_FACTORIES:
        msg = f"Unknown analyzer '{name}'. Available: {available_analyzers()}"
        raise ValueError(msg)
    return _ANALYZER_FACTORIES[normalized](tables or DEFAULT_TABLES, max_token_bytes)
