"""Shared test fixtures and configuration."""

import os

import pytest


ENV_PREFIX = "UNICODE_TOKENIZER_"

# Complete test environment that overrides every config value
TEST_ENV = {
    "UNICODE_TOKENIZER_DEFAULT_ANALYZER": "unicode",
    "UNICODE_TOKENIZER_MAX_TOKEN_BYTES": "40",
    "UNICODE_TOKENIZER_EXTRA_APOSTROPHES": "",
    "UNICODE_TOKENIZER_EXTRA_DASHES": "",
    "UNICODE_TOKENIZER_LOG_LEVEL": "warning",
    "UNICODE_TOKENIZER_LOG_JSON": "true",
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Reset tokenizer settings before each test and keep stray .env files out of reach."""
    for key in list(os.environ):
        if key.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.chdir(tmp_path)
