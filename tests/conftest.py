"""Shared test fixtures for figma-export."""

import pytest

from figma_export.tokens import DEFAULT_TOKENS


@pytest.fixture
def tokens():
    return DEFAULT_TOKENS


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("FIGMA_EXPORT_OUTPUT_DIR", raising=False)
