"""Shared pytest fixtures."""

import io

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove environment variables that change defaults."""
    for name in ("ALIGN_TEXT_ALIGN", "ALIGN_TEXT_BIAS", "ALIGN_TEXT_COLUMNS", "COLUMNS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def stdin(monkeypatch):
    """Replace standard input with the given text."""

    def feed(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return feed
