"""SQLAlchemy adapter – SqlAlchemySessionFactory."""
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from radioking.kernel.errors import InfrastructureError

logger = logging.getLogger(__name__)


def _is_sqlite_memory(url: URL) -> bool:
    return url.database in (None, "", ":memory:") or url.query.get("mode") == "memory"


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:  # noqa: ARG001
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class SqlAlchemySessionFactory:
    """Creates async SQLAlchemy sessions from an engine URL.

    SQLite connections get ``PRAGMA foreign_keys=ON`` on connect. In-memory
    SQLite is refused: every session would share one connection, so a
    rollback in one session could undo a commit made by another.
    """

    def __init__(self, database_url: str, **engine_kwargs: Any) -> None:
        url = make_url(database_url)
        sqlite = url.get_backend_name() == "sqlite"
        if sqlite and _is_sqlite_memory(url):
            raise InfrastructureError(
                "in-memory SQLite is not supported, use a database file",
                detail={"database_url": database_url},
            )
        self._engine: AsyncEngine = create_async_engine(database_url, **engine_kwargs)
        if sqlite:
            event.listen(self._engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        self._session_factory = async_sessionmaker(self._engine, class_=AsyncSession, expire_on_commit=False)

    def __call__(self) -> AsyncSession:
        return self._session_factory()

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def create_all(self, base: type[DeclarativeBase]) -> None:
        """Create every table of *base*'s metadata that does not exist yet."""
        async with self._engine.begin() as conn:
            await conn.run_sync(base.metadata.create_all)
        logger.info("database.schema_ready tables=%s", ",".join(sorted(base.metadata.tables)))

    async def ping(self) -> bool:
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    async def dispose(self) -> None:
        await self._engine.dispose()


__all__ = ["SqlAlchemySessionFactory"]
