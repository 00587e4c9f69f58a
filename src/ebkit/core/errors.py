"""Exceptions raised while encoding binary save data."""
from __future__ import annotations

from typing import Sequence


class EncodeError(Exception):
    """Base exception for binary encoding failures."""


class RangeError(EncodeError, ValueError):
    """Raised when a numeric value does not fit its declared byte width."""


class EncodingError(EncodeError, ValueError):
    """Raised when text cannot be represented in the game's character set."""


class UnsupportedFieldError(EncodeError):
    """Raised when a record reaches fields the model cannot represent yet."""

    def __init__(self, missing_fields: Sequence[str], *, bytes_written: int | None = None) -> None:
        self.missing_fields = tuple(missing_fields)
        self.bytes_written = bytes_written
        super().__init__(f"Encoding not yet supported for: {', '.join(self.missing_fields)}")
