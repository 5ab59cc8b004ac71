"""Canonical timestamp value with wire, text and database representations."""

from epochstamp.core.errors import (
    TimestampDecodeError,
    TimestampError,
    UnsupportedConversionError,
    WireDecodeError,
)
from epochstamp.storage import StorageEncoding, TimestampType
from epochstamp.timestamp import Timestamp

__version__ = "0.1.0"

__all__ = [
    "Timestamp",
    "StorageEncoding", "TimestampType",
    "TimestampError", "TimestampDecodeError", "UnsupportedConversionError", "WireDecodeError",
]
