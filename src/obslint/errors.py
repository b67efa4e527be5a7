"""Exceptions raised by obslint."""

from __future__ import annotations

from pathlib import Path


class ObslintError(Exception):
    """Base class for obslint failures."""
    pass


class DocumentReadError(ObslintError):
    """Exception raised when a document in the vault cannot be read.

    A partial corpus would shrink the vocabulary and hide mentions, so the
    whole run is aborted instead of skipping the file.
    """

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Could not read {path}: {reason}")
        self.path = path
        self.reason = reason
