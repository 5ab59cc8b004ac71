"""Protobuf encoding for ``Timestamp``.

The wire shape is two fields: ``int64 seconds = 1`` and ``int32 nanos = 2``.
That is exactly ``google.protobuf.Timestamp``, so the well-known message is
used directly and stays byte-compatible with any producer or consumer of it.
"""

from __future__ import annotations

from google.protobuf.message import DecodeError
from google.protobuf.timestamp_pb2 import Timestamp as TimestampMessage

from epochstamp.core.errors import WireDecodeError
from epochstamp.timestamp import Timestamp

SECONDS_FIELD_NUMBER = TimestampMessage.SECONDS_FIELD_NUMBER
NANOS_FIELD_NUMBER = TimestampMessage.NANOS_FIELD_NUMBER


def to_message(value: Timestamp) -> TimestampMessage:
    """Copy a timestamp into the protobuf message, field for field."""
    return TimestampMessage(seconds=value.seconds, nanos=value.nanoseconds)


def from_message(message: TimestampMessage) -> Timestamp:
    """Read both fields independently; no cross-field checks are made."""
    return Timestamp(seconds=message.seconds, nanoseconds=message.nanos)


def encode(value: Timestamp) -> bytes:
    """Serialize a timestamp to protobuf bytes."""
    return to_message(value).SerializeToString()


def decode(data: bytes) -> Timestamp:
    """Parse protobuf bytes into a timestamp.

    Raises:
        WireDecodeError: If ``data`` is not a valid message.
    """
    message = TimestampMessage()
    try:
        message.ParseFromString(data)
    except DecodeError as exc:
        raise WireDecodeError(f"Invalid timestamp message: {exc}") from exc
    return from_message(message)
