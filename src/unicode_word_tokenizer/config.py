"""Centralized configuration for unicode-word-tokenizer using Pydantic Settings."""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from unicode_word_tokenizer.search.analyzers import DEFAULT_MAX_TOKEN_BYTES, available_analyzers
from unicode_word_tokenizer.search.charsets import DEFAULT_TABLES, CharacterTables
from unicode_word_tokenizer.search.segmentation import is_alphanumeric


class Settings(BaseSettings):
    """Strictly typed configuration loaded from ``UNICODE_TOKENIZER_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="UNICODE_TOKENIZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Analysis
    default_analyzer: str = Field(default="unicode", description="Analyzer used when none is requested")
    max_token_bytes: int = Field(
        default=DEFAULT_MAX_TOKEN_BYTES,
        ge=1,
        description="Tokens this many UTF-8 bytes long or longer are dropped by length-limited analyzers",
    )
    extra_apostrophes: str = Field(
        default="",
        description="Additional apostrophe-like characters, written as one string (e.g. '᾽')",
    )
    extra_dashes: str = Field(
        default="",
        description="Additional dash-like characters, written as one string (e.g. '⸺')",
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    @field_validator("default_analyzer")
    @classmethod
    def _check_analyzer(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in available_analyzers():
            raise ValueError(f"Unknown analyzer '{value}'. Available: {available_analyzers()}")
        return normalized

    @field_validator("extra_apostrophes", "extra_dashes")
    @classmethod
    def _check_punctuation(cls, value: str) -> str:
        for ch in value:
            if ch.isspace() or is_alphanumeric(ch):
                raise ValueError(f"{ch!r} cannot be used as punctuation: it is whitespace or alphanumeric")
        return value

    @model_validator(mode="after")
    def _check_disjoint_tables(self) -> "Settings":
        tables = self.character_tables()
        overlap = tables.apostrophes & tables.dashes
        if overlap:
            raise ValueError(f"Characters cannot be both apostrophe-like and dash-like: {sorted(overlap)}")
        return self

    def character_tables(self) -> CharacterTables:
        """Built-in apostrophe/dash tables extended with the configured extras."""
        if not self.extra_apostrophes and not self.extra_dashes:
            return DEFAULT_TABLES
        return DEFAULT_TABLES.extended(apostrophes=self.extra_apostrophes, dashes=self.extra_dashes)
