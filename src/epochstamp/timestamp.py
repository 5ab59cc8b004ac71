"""Canonical point-in-time value shared by the wire, memory and database layers.

A ``Timestamp`` is a pair of integers: whole seconds since the Unix epoch and
the nanosecond offset within that second. Every other representation
(``datetime``, float or integer epoch seconds, protobuf bytes, database
columns) is derived from or reduced to this pair.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from epochstamp.core.errors import UnsupportedConversionError

logger = logging.getLogger(__name__)

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MICRO = 1_000
SECONDS_PER_DAY = 86_400
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def utcnow() -> datetime:
    """Read the system clock as an aware UTC datetime."""
    return datetime.now(UTC)


@dataclass(frozen=True, order=True, slots=True)
class Timestamp:
    """An instant as ``(seconds, nanoseconds)`` since 1970-01-01T00:00:00Z.

    ``nanoseconds`` is expected to lie in ``[0, 1_000_000_000)``. The plain
    constructor does not check it so that decoded wire values are kept exactly
    as received; the float and duration constructors always produce a
    normalized pair.
    """

    seconds: int = 0
    nanoseconds: int = 0

    @classmethod
    def empty(cls) -> Timestamp:
        """Return the ``(0, 0)`` sentinel used in place of a missing value."""
        return cls(0, 0)

    @classmethod
    def now(cls, clock: Callable[[], datetime] | None = None) -> Timestamp:
        """Capture the current instant from ``clock`` (the system UTC clock by default)."""
        return cls.from_datetime((clock or utcnow)())

    def is_empty(self) -> bool:
        return self.seconds == 0 and self.nanoseconds == 0

    # datetime

    @classmethod
    def from_datetime(cls, value: datetime) -> Timestamp:
        """Build a timestamp from the instant ``value`` denotes.

        The result does not depend on the zone ``value`` is expressed in.
        Naive datetimes are read as UTC, which is what SQLite hands back for
        timezone-aware columns.
        """
        if value.tzinfo is None or value.utcoffset() is None:
            value = value.replace(tzinfo=UTC)
        delta = value - EPOCH
        return cls(
            seconds=delta.days * SECONDS_PER_DAY + delta.seconds,
            nanoseconds=delta.microseconds * NANOS_PER_MICRO,
        )

    def to_datetime(self) -> datetime:
        """Return the instant as an aware UTC datetime.

        ``datetime`` resolves microseconds, so trailing nanoseconds are
        truncated. Pairs outside what ``datetime`` can hold come back as the
        Unix epoch instead of raising.
        """
        if not 0 <= self.nanoseconds < NANOS_PER_SECOND:
            logger.debug("Nanoseconds out of range for %r; using the epoch", self)
            return EPOCH
        try:
            return EPOCH + timedelta(
                seconds=self.seconds,
                microseconds=self.nanoseconds // NANOS_PER_MICRO,
            )
        except OverflowError:
            logger.debug("%r is outside the datetime range; using the epoch", self)
            return EPOCH

    def to_local_datetime(self) -> datetime:
        """Return :meth:`to_datetime` converted to the process-local zone."""
        return self.to_datetime().astimezone()

    # durations

    @classmethod
    def from_duration(cls, value: timedelta) -> Timestamp:
        """Copy a duration's whole seconds and sub-second part field for field."""
        return cls(
            seconds=value.days * SECONDS_PER_DAY + value.seconds,
            nanoseconds=value.microseconds * NANOS_PER_MICRO,
        )

    # float epoch seconds

    @classmethod
    def from_float(cls, value: float) -> Timestamp:
        """Split float epoch seconds into whole seconds and truncated nanoseconds."""
        if math.isnan(value):
            return cls.empty()
        if math.isinf(value):
            return cls(INT64_MAX if value > 0 else INT64_MIN, 0)
        floor = math.floor(value)
        nanoseconds = int((value - floor) * 1e9)
        # (value - floor) can round up to exactly 1.0 for tiny negative inputs.
        carry, nanoseconds = divmod(nanoseconds, NANOS_PER_SECOND)
        seconds = min(max(floor + carry, INT64_MIN), INT64_MAX)
        return cls(seconds, nanoseconds)

    def to_float(self) -> float:
        return self.seconds + self.nanoseconds / 1e9

    def __float__(self) -> float:
        return self.to_float()

    # integer epoch seconds

    @classmethod
    def from_int(cls, value: int) -> Timestamp:
        """Whole epoch seconds; there is no sub-second part to carry over."""
        return cls(seconds=int(value), nanoseconds=0)

    def to_int(self) -> int:
        """Whole epoch seconds. The nanosecond part is dropped."""
        return self.seconds

    def __int__(self) -> int:
        return self.to_int()

    # generated identities

    @classmethod
    def from_row_id(cls, value: int) -> Timestamp:
        """Reject construction from an auto-increment row id."""
        raise UnsupportedConversionError("Timestamp.from_row_id")
