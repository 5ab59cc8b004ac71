# tests/conftest.py
from __future__ import annotations

from collections.abc import Generator, Iterator
from datetime import UTC, datetime

import pytest
from sqlalchemy import Integer, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

from epochstamp import StorageEncoding, Timestamp, TimestampType

TEST_DB_URL = "sqlite://"


class Base(DeclarativeBase):
    """Declarative base for the test-only models."""


class StampedEvent(Base):
    """One timestamp column per storage encoding."""

    __tablename__ = "stamped_event"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    at_datetime: Mapped[Timestamp | None] = mapped_column(
        TimestampType(StorageEncoding.DATETIME_WITH_TIMEZONE), nullable=True
    )
    at_integer: Mapped[Timestamp | None] = mapped_column(
        TimestampType(StorageEncoding.INTEGER_SECONDS), nullable=True
    )
    at_double: Mapped[Timestamp | None] = mapped_column(
        TimestampType(StorageEncoding.DOUBLE_SECONDS), nullable=True
    )
    at_integer_strict: Mapped[Timestamp | None] = mapped_column(
        TimestampType(StorageEncoding.INTEGER_SECONDS, strict=True), nullable=True
    )
    at_datetime_strict: Mapped[Timestamp | None] = mapped_column(
        TimestampType(StorageEncoding.DATETIME_WITH_TIMEZONE, strict=True), nullable=True
    )


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        if transaction.is_active:
            transaction.rollback()
        connection.close()


@pytest.fixture()
def fixed_instant() -> datetime:
    """2023-11-14T22:13:20.5Z, i.e. 1_700_000_000.5 epoch seconds."""
    return datetime(2023, 11, 14, 22, 13, 20, 500000, tzinfo=UTC)
