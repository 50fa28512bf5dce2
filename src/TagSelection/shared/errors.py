"""Custom exception hierarchy for tag-based test selection."""
from __future__ import annotations


class TagSelectionError(Exception):
    """Base exception for tag-based test selection."""


class TagSyntaxError(TagSelectionError, ValueError):
    """Raised when a tag expression has no name component."""


class TagScannerError(TagSelectionError):
    """Raised when the scanner is asked for a lookup it cannot perform."""
