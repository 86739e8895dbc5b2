"""rdfterm exception classes."""

from __future__ import annotations


class LiteralError(Exception):
    """Base exception for all literal errors."""


class InvalidLiteralError(LiteralError):
    """Operation requires a parsed value the literal does not have."""
