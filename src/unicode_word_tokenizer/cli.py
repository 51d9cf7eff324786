"""Command line entry point: print the tokens an analyzer produces for some text."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
import sys
from typing import TextIO

import orjson
from pydantic import ValidationError

from unicode_word_tokenizer.config import Settings
from unicode_word_tokenizer.observability.logging import configure_logging
from unicode_word_tokenizer.search.analyzers import available_analyzers, get_analyzer
from unicode_word_tokenizer.search.models import Token


logger = logging.getLogger(__name__)


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unicode-tokenize",
        description="Tokenize text and print one token per line",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to tokenize (joined with spaces); read from stdin when omitted",
    )
    parser.add_argument(
        "--analyzer",
        help=f"Analyzer name, one of {', '.join(available_analyzers())} (default: from settings)",
    )
    parser.add_argument(
        "--format",
        choices=("jsonl", "text"),
        default="jsonl",
        help="Output format (default: jsonl)",
    )
    parser.add_argument(
        "--log-level",
        help="Override the configured log level",
    )
    return parser


def _format_token(token: Token) -> str:
    return f"{token.position:>6} {token.offset_from:>8} {token.offset_to:>8}  {token.text}"


def _write_tokens(tokens: Sequence[Token], output_format: str, out: TextIO) -> None:
    for token in tokens:
        if output_format == "text":
            out.write(_format_token(token) + "\n")
        else:
            out.write(orjson.dumps(token.to_dict()).decode("utf-8") + "\n")


def _read_input(args: argparse.Namespace) -> str:
    if args.text:
        return " ".join(args.text)
    return sys.stdin.read()


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as exc:
        configure_logging("ERROR", json_output=False, stream=sys.stderr)
        logger.error("Invalid settings: %s", exc)
        return 1

    configure_logging(args.log_level or settings.log_level, settings.log_json, stream=sys.stderr)

    try:
        analyzer = get_analyzer(
            args.analyzer or settings.default_analyzer,
            tables=settings.character_tables(),
            max_token_bytes=settings.max_token_bytes,
        )
    except ValueError as exc:
        logger.error("%s", exc)
        return 1

    tokens = analyzer(_read_input(args))
    _write_tokens(tokens, args.format, sys.stdout)
    logger.debug("Emitted %d tokens", len(tokens))
    return 0


if __name__ == "__main__":
    sys.exit(main())
