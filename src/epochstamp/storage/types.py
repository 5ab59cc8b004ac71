"""SQLAlchemy column type for ``Timestamp`` values."""

from __future__ import annotations

from typing import Any

from sqlalchemy.engine import Dialect
from sqlalchemy.types import DateTime, TypeDecorator, TypeEngine

from epochstamp.storage.encoding import (
    StorageEncoding,
    column_type,
    encode,
    from_driver,
    lenient_decode,
    null_value,
    strict_decode,
)
from epochstamp.timestamp import Timestamp


class TimestampType(TypeDecorator[Timestamp]):
    """Store ``Timestamp`` values under a single storage encoding.

    Python ``None`` maps to SQL NULL in both directions. Non-null column values
    are decoded leniently unless ``strict`` is set, so rows written under a
    different encoding still load.

    Example:
        created_at: Mapped[Timestamp] = mapped_column(TimestampType())
    """

    impl = DateTime
    cache_ok = True

    def __init__(
        self,
        encoding: StorageEncoding | str | None = None,
        strict: bool | None = None,
    ) -> None:
        # Imported here: settings depends on the encoding enum in this package.
        from epochstamp.core.settings import settings

        super().__init__()
        self.encoding = StorageEncoding(
            settings.storage_encoding if encoding is None else encoding
        )
        self.strict = settings.strict_decode if strict is None else strict

    @property
    def python_type(self) -> type[Timestamp]:
        return Timestamp

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        return dialect.type_descriptor(column_type(self.encoding))

    def process_bind_param(self, value: Timestamp | None, dialect: Dialect) -> Any:
        if value is None:
            return null_value(self.encoding).value
        if not isinstance(value, Timestamp):
            raise TypeError(f"Expected Timestamp, got {type(value).__name__}")
        return encode(value, self.encoding).value

    def result_processor(self, dialect: Dialect, coltype: Any) -> Any:
        # Raw driver values go straight to from_driver; the impl's own parser
        # would reject rows written under another encoding.
        def process(value: Any) -> Timestamp | None:
            return self.process_result_value(value, dialect)

        return process

    def process_result_value(self, value: Any, dialect: Dialect) -> Timestamp | None:
        if value is None:
            return None
        native = from_driver(value)
        return strict_decode(native) if self.strict else lenient_decode(native)
