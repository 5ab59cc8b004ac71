"""
Pydantic schemas for the structured-text form of timestamps.
"""

from .timestamp import TimestampSchema

__all__ = ["TimestampSchema"]
