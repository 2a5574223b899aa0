"""Async database handle, declarative base, and timestamp mixin."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime

from sqlalchemy import DateTime, MetaData, event, func
from sqlalchemy.ext.asyncio import (
    AsyncAttrs,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for constraints (Alembic auto-migration friendly)
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(AsyncAttrs, DeclarativeBase):
    """Base class for all ORM models."""

    metadata = MetaData(naming_convention=convention)


class TimestampMixin:
    """Mixin that adds created_at / updated_at columns."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


def _enable_sqlite_savepoints(engine: AsyncEngine) -> None:
    """Let SQLAlchemy own BEGIN on SQLite so SAVEPOINT nests correctly."""

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, _connection_record) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn) -> None:
        conn.exec_driver_sql("BEGIN")


class Database:
    """Owns the async engine and session factory for one process.

    Constructed once at startup and disposed at shutdown; nothing in the
    package holds a module-level engine.
    """

    def __init__(self, url: str, **engine_kwargs) -> None:
        self.url = url
        self._engine_kwargs = engine_kwargs
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("database is not open; call open() first")
        return self._engine

    def open(self) -> async_sessionmaker[AsyncSession]:
        """Create the engine and session factory. Idempotent."""
        if self._engine is None:
            kwargs = {"pool_pre_ping": True, **self._engine_kwargs}
            if self.url.startswith("postgresql"):
                kwargs.setdefault("pool_size", 10)
                kwargs.setdefault("max_overflow", 20)
                kwargs.setdefault("pool_recycle", 1800)
            self._engine = create_async_engine(self.url, **kwargs)
            if self.url.startswith("sqlite"):
                _enable_sqlite_savepoints(self._engine)
            self._session_factory = async_sessionmaker(self._engine, expire_on_commit=False)
        return self._session_factory

    async def close(self) -> None:
        """Dispose the engine, closing all pooled connections."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None

    async def create_all(self) -> None:
        """Create every table and index registered on :class:`Base`."""
        import noodlebar.models  # noqa: F401  (registers tables on Base.metadata)

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session inside a transaction; commit on success, roll back on error."""
        if self._session_factory is None:
            raise RuntimeError("database is not open; call open() first")
        async with self._session_factory() as session:
            async with session.begin():
                yield session
