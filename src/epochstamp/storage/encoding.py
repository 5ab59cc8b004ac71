"""Storage encodings and the native values a column driver exchanges.

A timestamp column is physically stored in one of three ways: a
timezone-aware datetime (the default), whole integer seconds, or float
seconds. The encoding is picked once at startup and passed to whatever
adapter writes or reads the column; writes produce exactly one native kind
for that encoding.

Reads are more forgiving. Drivers may hand back any of the native kinds
below, for example from columns written before the encoding was changed, and
each of them maps to a timestamp. Values that match none of them decode to
the empty timestamp under the lenient policy, or raise under the strict one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from functools import partial
from typing import Any

from sqlalchemy import ARRAY, BigInteger, DateTime, Double as DoubleColumn
from sqlalchemy.types import TypeEngine

from epochstamp.core.errors import TimestampDecodeError
from epochstamp.timestamp import Timestamp

logger = logging.getLogger(__name__)


class StorageEncoding(str, Enum):
    """Physical column encoding for timestamp values."""

    DATETIME_WITH_TIMEZONE = "datetime"
    INTEGER_SECONDS = "integer"
    DOUBLE_SECONDS = "double"


@dataclass(frozen=True, slots=True)
class DateTimeWithTimeZone:
    """Aware datetime in an arbitrary zone."""

    value: datetime | None = None


@dataclass(frozen=True, slots=True)
class DateTimeUtc:
    """UTC datetime. Naive driver values are tagged with this kind."""

    value: datetime | None = None


@dataclass(frozen=True, slots=True)
class BigInt:
    value: int | None = None


@dataclass(frozen=True, slots=True)
class Double:
    value: float | None = None


@dataclass(frozen=True, slots=True)
class Int:
    value: int | None = None


@dataclass(frozen=True, slots=True)
class Unrecognized:
    """Driver value of a kind no timestamp conversion exists for."""

    value: Any = None


NativeValue = DateTimeWithTimeZone | DateTimeUtc | BigInt | Double | Int | Unrecognized

_NATIVE_KINDS: dict[StorageEncoding, type[DateTimeUtc | BigInt | Double]] = {
    StorageEncoding.DATETIME_WITH_TIMEZONE: DateTimeUtc,
    StorageEncoding.INTEGER_SECONDS: BigInt,
    StorageEncoding.DOUBLE_SECONDS: Double,
}

_COLUMN_TYPES: dict[type, Callable[[], TypeEngine[Any]]] = {
    DateTimeUtc: partial(DateTime, timezone=True),
    BigInt: BigInteger,
    Double: DoubleColumn,
}


def native_kind(encoding: StorageEncoding) -> type[DateTimeUtc | BigInt | Double]:
    """Return the native value kind written under ``encoding``."""
    return _NATIVE_KINDS[StorageEncoding(encoding)]


def from_driver(raw: Any) -> NativeValue:
    """Tag a raw DB-API value with its native kind.

    Python ints carry no width, so every int is tagged ``BigInt``; ``Int`` is
    only built by callers that know the column is a 32-bit integer. Strings
    are what SQLite stores datetimes as and are tagged as datetimes when they
    parse as ISO 8601. Column adapters deal with SQL NULL before calling
    this; a bare ``None`` has no kind of its own and is tagged
    ``Unrecognized``.
    """
    if isinstance(raw, str):
        try:
            raw = datetime.fromisoformat(raw)
        except ValueError:
            return Unrecognized(raw)
    if isinstance(raw, datetime):
        offset = raw.utcoffset()
        if offset is None or offset == timedelta(0):
            return DateTimeUtc(raw)
        return DateTimeWithTimeZone(raw)
    # bool is an int subclass but never a timestamp.
    if isinstance(raw, bool):
        return Unrecognized(raw)
    if isinstance(raw, int):
        return BigInt(raw)
    if isinstance(raw, float):
        return Double(raw)
    return Unrecognized(raw)


def _decode(native: NativeValue) -> Timestamp | None:
    match native:
        case DateTimeWithTimeZone(value) | DateTimeUtc(value) if value is not None:
            return Timestamp.from_datetime(value)
        case BigInt(value) | Int(value) if value is not None:
            return Timestamp.from_int(value)
        case Double(value) if value is not None:
            return Timestamp.from_float(value)
        case _:
            return None


def lenient_decode(native: NativeValue) -> Timestamp:
    """Decode a native value, reading anything unrecognised as empty.

    This never raises. Callers that need to detect malformed columns should
    use :func:`strict_decode` instead.
    """
    decoded = _decode(native)
    if decoded is None:
        logger.debug("No timestamp mapping for %r; reading it as empty", native)
        return Timestamp.empty()
    return decoded


def strict_decode(native: NativeValue) -> Timestamp:
    """Decode a native value.

    Raises:
        TimestampDecodeError: If ``native`` is null or of an unrecognised kind.
    """
    decoded = _decode(native)
    if decoded is None:
        raise TimestampDecodeError(f"No timestamp mapping for {native!r}")
    return decoded


def encode(value: Timestamp, encoding: StorageEncoding) -> NativeValue:
    """Encode a timestamp as the single native kind ``encoding`` writes."""
    match StorageEncoding(encoding):
        case StorageEncoding.DOUBLE_SECONDS:
            return Double(value.to_float())
        case StorageEncoding.INTEGER_SECONDS:
            return BigInt(value.to_int())
        case _:
            return DateTimeUtc(value.to_datetime())


def null_value(encoding: StorageEncoding) -> NativeValue:
    """Return the SQL NULL of the native kind ``encoding`` writes.

    This is an absent column, unlike the empty timestamp which is a present
    zero value.
    """
    return native_kind(encoding)(None)


def column_type(encoding: StorageEncoding) -> TypeEngine[Any]:
    """Column type of the native kind ``encoding`` writes."""
    return _COLUMN_TYPES[native_kind(encoding)]()


def array_type(encoding: StorageEncoding) -> ARRAY:
    """Array column type whose elements are the native kind ``encoding`` writes."""
    return ARRAY(column_type(encoding))
