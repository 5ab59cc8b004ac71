"""Binary wire form of ``Timestamp``."""

from .wire import decode, encode, from_message, to_message

__all__ = ["decode", "encode", "from_message", "to_message"]
