"""Exceptions raised by timestamp conversions."""

from __future__ import annotations


class TimestampError(RuntimeError):
    """Base exception for timestamp conversion failures."""


class UnsupportedConversionError(TimestampError):
    """Raised when a conversion exists in the interface but not for timestamps.

    Generic numeric primary-key code paths ask column types to build a value
    from a generated row id. A timestamp column must never be fed one.
    """

    def __init__(self, operation: str, message: str = "Timestamps not supported") -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation


class TimestampDecodeError(TimestampError):
    """Raised by strict decoding when a native value has no timestamp mapping."""


class WireDecodeError(TimestampError):
    """Raised when bytes cannot be parsed as a serialized timestamp message."""
