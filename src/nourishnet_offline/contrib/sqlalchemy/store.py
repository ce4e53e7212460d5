"""SQLAlchemy-backed durable key-value store."""

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)

from nourishnet_offline.contrib.sqlalchemy.models import Base, KeyValueModel
from nourishnet_offline.exceptions import StorageError


async def create_tables(engine: AsyncEngine) -> None:
    """Create the key-value table if it does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


class SQLAlchemyKeyValueStore:
    """Key-value store backed by SQLAlchemy async sessions.

    Implements the KeyValueStore protocol. Database errors are re-raised
    as StorageError.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self._session_factory = session_factory

    async def get(self, key: str) -> str | None:
        """Get the value stored under ``key``."""
        try:
            async with self._session_factory() as session:
                entry = await session.get(KeyValueModel, key)
                return None if entry is None else entry.value
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to read key {key!r}") from exc

    async def set(self, key: str, value: str) -> None:
        """Insert or replace the value stored under ``key``."""
        try:
            async with self._session_factory() as session:
                entry = await session.get(KeyValueModel, key)
                if entry is None:
                    session.add(KeyValueModel(key=key, value=value))
                else:
                    entry.value = value
                await session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to write key {key!r}") from exc

    async def remove(self, key: str) -> None:
        """Delete ``key`` if present."""
        try:
            async with self._session_factory() as session:
                await session.execute(
                    delete(KeyValueModel).where(KeyValueModel.key == key)
                )
                await session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to remove key {key!r}") from exc
