"""Unit tests for analyzers, filters and the analyzer registry."""

import pytest

from unicode_word_tokenizer.search.analyzers import (
    AnalyzerPipeline,
    AsciiFoldingFilter,
    EnglishStemFilter,
    LowercaseFilter,
    RawTokenizer,
    RemoveLongFilter,
    SimpleTokenizer,
    WhitespaceTokenizer,
    available_analyzers,
    get_analyzer,
)
from unicode_word_tokenizer.search.charsets import DEFAULT_TABLES
from unicode_word_tokenizer.search.models import Token


def texts(tokens):
    return [token.text for token in tokens]


class TestTokenizers:
    def test_simple_tokenizer_byte_offsets(self):
        tokens = list(SimpleTokenizer()("café, co-op"))
        assert tokens == [
            Token(text="café", position=0, offset_from=0, offset_to=5),
            Token(text="co", position=1, offset_from=7, offset_to=9),
            Token(text="op", position=2, offset_from=10, offset_to=12),
        ]

    def test_whitespace_tokenizer_keeps_punctuation(self):
        assert texts(WhitespaceTokenizer()("Hello, World!")) == ["Hello,", "World!"]

    def test_raw_tokenizer(self):
        assert list(RawTokenizer()("Hello Wörld")) == [
            Token(text="Hello Wörld", position=0, offset_from=0, offset_to=12)
        ]

    def test_raw_tokenizer_empty_text_returns_empty(self):
        assert list(RawTokenizer()("")) == []


class TestFilters:
    def test_lowercase_filter(self):
        tokens = [Token("ÉCOLE", 0, 0, 7), Token("already", 1, 8, 15)]
        assert texts(LowercaseFilter()(tokens)) == ["école", "already"]

    def test_ascii_folding(self):
        tokens = [Token(text, index, 0, 0) for index, text in enumerate(["naïve", "straße", "æsir", "łódź"])]
        assert texts(AsciiFoldingFilter()(tokens)) == ["naive", "strasse", "aesir", "lodz"]

    def test_ascii_folding_keeps_unfoldable_scripts(self):
        tokens = [Token("δέλτα", 0, 0, 10), Token("汉", 1, 11, 14), Token("ascii", 2, 15, 20)]
        assert texts(AsciiFoldingFilter()(tokens)) == ["δέλτα", "汉", "ascii"]

    def test_ascii_folding_preserves_offsets_and_positions(self):
        folded = list(AsciiFoldingFilter()([Token("café", 3, 7, 12)]))
        assert folded == [Token("cafe", 3, 7, 12)]

    def test_remove_long_filter_uses_bytes(self):
        tokens = [Token("a" * 39, 0, 0, 39), Token("a" * 40, 1, 40, 80), Token("é" * 20, 2, 81, 121)]
        assert [token.position for token in RemoveLongFilter(40)(tokens)] == [0]

    def test_english_stem_filter(self):
        tokens = [Token("running", 0, 0, 7), Token("ponies", 1, 8, 14), Token("happily", 2, 15, 22)]
        assert texts(EnglishStemFilter()(tokens)) == ["run", "poni", "happili"]

    def test_english_stem_filter_preserves_offsets_and_positions(self):
        stemmed = list(EnglishStemFilter()([Token("jumps", 4, 10, 15)]))
        assert stemmed == [Token("jump", 4, 10, 15)]


class TestAnalyzerPipeline:
    def test_pipeline_applies_filters_in_order(self):
        pipeline = AnalyzerPipeline(WhitespaceTokenizer(), [LowercaseFilter(), AsciiFoldingFilter()])
        assert texts(pipeline("CAFÉ Noël")) == ["cafe", "noel"]

    def test_pipeline_without_filters(self):
        assert texts(AnalyzerPipeline(SimpleTokenizer())("one two")) == ["one", "two"]

    def test_positions_keep_gaps_for_removed_tokens(self):
        tokens = get_analyzer("default")("a " + "b" * 40 + " c")
        assert [(token.text, token.position) for token in tokens] == [("a", 0), ("c", 2)]


class TestNamedAnalyzers:
    def test_unicode_analyzer(self):
        tokens = get_analyzer("unicode")("Naïve Co-Op")
        assert texts(tokens) == ["naive", "co", "op", "coop"]
        assert [(token.offset_from, token.offset_to) for token in tokens] == [(0, 6), (7, 9), (10, 12), (7, 12)]
        assert [token.position for token in tokens] == [0, 1, 2, 3]

    def test_unicode_analyzer_folds_special_letters(self):
        assert texts(get_analyzer("unicode")("Straße Æsir Sam’s")) == ["strasse", "aesir", "sams"]

    def test_unicode_analyzer_custom_tables(self):
        analyzer = get_analyzer("unicode", tables=DEFAULT_TABLES.extended(dashes="/"))
        assert texts(analyzer("Foo/Bar")) == ["foo", "bar", "foobar"]

    def test_default_analyzer(self):
        assert texts(get_analyzer("default")("Hello, co-op WORLD")) == ["hello", "co", "op", "world"]

    def test_default_analyzer_respects_max_token_bytes(self):
        analyzer = get_analyzer("default", max_token_bytes=4)
        assert texts(analyzer("abc abcd")) == ["abc"]

    def test_en_stem_analyzer(self):
        assert texts(get_analyzer("en_stem")("Running ponies happily")) == ["run", "poni", "happili"]

    def test_whitespace_analyzer_is_bare(self):
        tokens = get_analyzer("whitespace")("Hello, World! " + "x" * 50)
        assert texts(tokens) == ["Hello,", "World!", "x" * 50]

    def test_whitespace_analyzer_splits_on_ascii_whitespace_only(self):
        assert texts(get_analyzer("whitespace")("a\u00a0b c\td\ne")) == ["a\u00a0b", "c", "d", "e"]

    def test_raw_analyzer(self):
        assert texts(get_analyzer("raw")("Hello World")) == ["Hello World"]

    def test_none_selects_default(self):
        assert texts(get_analyzer(None)("Hello World")) == ["hello", "world"]

    def test_names_are_case_insensitive(self):
        assert texts(get_analyzer("UNICODE")("co-op")) == ["co", "op", "coop"]

    def test_unknown_analyzer_raises(self):
        with pytest.raises(ValueError, match="Unknown analyzer 'nope'"):
            get_analyzer("nope")

    def test_available_analyzers(self):
        assert available_analyzers() == ["default", "en_stem", "raw", "unicode", "whitespace"]

    def test_each_call_builds_a_fresh_analyzer(self):
        assert get_analyzer("unicode") is not get_analyzer("unicode")
