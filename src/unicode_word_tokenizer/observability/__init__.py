"""Observability helpers (structured logging)."""

from unicode_word_tokenizer.observability.logging import JsonFormatter, configure_logging


__all__ = [
    "JsonFormatter",
    "configure_logging",
]
