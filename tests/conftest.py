"""Pytest fixtures for obslint tests."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep OBSLINT_* variables from the developer's shell out of tests."""
    for name in ("OBSLINT_EXTENSIONS", "OBSLINT_EXCLUDE", "OBSLINT_WORKERS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_vault(tmp_path):
    """Create a temporary vault for testing.

    Args:
        tmp_path: pytest's built-in temporary directory fixture

    Returns:
        Path to temporary vault root
    """
    vault_root = tmp_path / "test_vault"
    vault_root.mkdir()
    return vault_root


@pytest.fixture
def write_note(temp_vault):
    """Return a helper that writes a UTF-8 note relative to the vault root."""

    def _write(rel_path: str, text: str) -> Path:
        path = temp_vault / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
