"""Persistence adapters for ``Timestamp`` columns."""

from .encoding import (
    BigInt,
    DateTimeUtc,
    DateTimeWithTimeZone,
    Double,
    Int,
    NativeValue,
    StorageEncoding,
    Unrecognized,
    array_type,
    column_type,
    encode,
    from_driver,
    lenient_decode,
    native_kind,
    null_value,
    strict_decode,
)
from .types import TimestampType

__all__ = [
    "BigInt", "DateTimeUtc", "DateTimeWithTimeZone", "Double", "Int", "NativeValue",
    "StorageEncoding", "Unrecognized",
    "array_type", "column_type", "encode", "from_driver", "lenient_decode",
    "native_kind", "null_value", "strict_decode",
    "TimestampType",
]
