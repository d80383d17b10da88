"""Error taxonomy for lake_level."""

from __future__ import annotations

from typing import Any


class LakeLevelError(Exception):
    """Base class for every failure that aborts a fetch."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class TransportError(LakeLevelError):
    """Raised when a page cannot be retrieved."""


class ParseDocumentError(LakeLevelError):
    """Raised when a response body is not an HTML document."""


class StructureError(LakeLevelError):
    """Raised when an expected table, row or column is missing."""


class DateParseError(LakeLevelError, ValueError):
    """Raised when a required date cell does not match the expected pattern."""

    def __init__(self, text: str, fmt: str):
        super().__init__(f"invalid date {text!r} (expected {fmt})", context={"text": text, "format": fmt})
        self.text = text
