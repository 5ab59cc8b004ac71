"""Structured-text schema for timestamps in logs and API payloads."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from epochstamp.timestamp import Timestamp


class TimestampSchema(BaseModel):
    """Timestamp as a ``{"seconds": ..., "nanoseconds": ...}`` object."""

    model_config = ConfigDict(frozen=True)

    seconds: int = Field(default=0, description="Whole seconds since the Unix epoch.")
    nanoseconds: int = Field(default=0, description="Nanoseconds within the second.")

    @classmethod
    def from_timestamp(cls, value: Timestamp) -> TimestampSchema:
        return cls(seconds=value.seconds, nanoseconds=value.nanoseconds)

    def to_timestamp(self) -> Timestamp:
        return Timestamp(seconds=self.seconds, nanoseconds=self.nanoseconds)
