"""Shared fixtures for nourishnet-offline tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from typing import Any

import pytest
from litestar import Litestar
from litestar.testing import TestClient

from nourishnet_offline import sync as sync_module
from nourishnet_offline.config import OfflineQueueConfig
from nourishnet_offline.connectivity import ConnectivityNotifier
from nourishnet_offline.executors import register_donation_executors
from nourishnet_offline.operation_queue import OfflineQueue
from nourishnet_offline.plugin import create_offline_queue_router
from nourishnet_offline.registry import OperationRegistry
from nourishnet_offline.storage import InMemoryKeyValueStore


class RecordingStore(InMemoryKeyValueStore):
    """In-memory store that counts writes and can be made to fail."""

    def __init__(self) -> None:
        super().__init__()
        self.writes = 0
        self.fail_reads = False
        self.fail_writes = False

    async def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise OSError("storage unavailable")
        return await super().get(key)

    async def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.writes += 1
        await super().set(key, value)


class FakeDonationBackend:
    def __init__(self) -> None:
        self.created: list[tuple[dict, str]] = []
        self.claimed: list[tuple[str, str, dict]] = []
        self._counter = 0

    async def create_donation(
        self, donation_data: dict[str, Any], user_id: str
    ) -> dict[str, Any]:
        self._counter += 1
        self.created.append((donation_data, user_id))
        return {"id": f"d{self._counter}", **donation_data}

    async def claim_donation(
        self,
        donation_id: str,
        user_id: str,
        claim_data: dict[str, Any],
    ) -> dict[str, Any]:
        self.claimed.append((donation_id, user_id, claim_data))
        return {"success": True}


@pytest.fixture(autouse=True)
def reset_offline_sync() -> Iterator[None]:
    yield
    sync_module._offline_sync = None


@pytest.fixture()
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture()
def backend() -> FakeDonationBackend:
    return FakeDonationBackend()


@pytest.fixture()
def registry() -> OperationRegistry:
    return OperationRegistry()


@pytest.fixture()
def config() -> OfflineQueueConfig:
    return OfflineQueueConfig()


@pytest.fixture()
def queue(
    store: RecordingStore,
    registry: OperationRegistry,
    config: OfflineQueueConfig,
) -> OfflineQueue:
    return OfflineQueue(store, registry, config)


@pytest.fixture()
def notifier() -> ConnectivityNotifier:
    return ConnectivityNotifier()


@pytest.fixture()
def test_app(
    queue: OfflineQueue,
    backend: FakeDonationBackend,
    notifier: ConnectivityNotifier,
) -> Litestar:
    register_donation_executors(queue.registry, backend)
    router = create_offline_queue_router(queue=queue, notifier=notifier)
    return Litestar(route_handlers=[router])


@pytest.fixture()
def client(test_app: Litestar) -> Iterator[TestClient]:
    with TestClient(app=test_app) as tc:
        yield tc


# ---------------------------------------------------------------------------
# SQLAlchemy fixtures (conditional)
# ---------------------------------------------------------------------------

_HAS_SQLALCHEMY = False
try:
    from sqlalchemy.ext.asyncio import (
        AsyncSession,
        async_sessionmaker,
        create_async_engine,
    )

    _HAS_SQLALCHEMY = True
except ImportError:
    pass

if _HAS_SQLALCHEMY:
    from nourishnet_offline.contrib.sqlalchemy.store import create_tables

    @pytest.fixture()
    async def async_engine() -> AsyncIterator:
        engine = create_async_engine("sqlite+aiosqlite://", echo=False)
        await create_tables(engine)
        yield engine
        await engine.dispose()

    @pytest.fixture()
    async def async_session_factory(async_engine):
        return async_sessionmaker(
            async_engine, class_=AsyncSession, expire_on_commit=False
        )
