"""Litestar example app serving the offline queue over HTTP."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from litestar import Litestar

from nourishnet_offline.config import OfflineQueueConfig
from nourishnet_offline.connectivity import ConnectivityNotifier
from nourishnet_offline.executors import register_donation_executors
from nourishnet_offline.operation_queue import OfflineQueue
from nourishnet_offline.plugin import create_offline_queue_router
from nourishnet_offline.registry import OperationRegistry
from nourishnet_offline.storage import InMemoryKeyValueStore
from nourishnet_offline.sync import (
    initialize_offline_sync,
    shutdown_offline_sync,
)


class InMemoryDonationBackend:
    def __init__(self) -> None:
        self.donations: dict[str, dict[str, Any]] = {}
        self.claims: list[dict[str, Any]] = []
        self._counter = 0

    async def create_donation(
        self, donation_data: dict[str, Any], user_id: str
    ) -> dict[str, Any]:
        self._counter += 1
        donation_id = f"d-{self._counter}"
        donation = {
            "id": donation_id,
            **donation_data,
            "donorId": user_id,
            "status": "available",
        }
        self.donations[donation_id] = donation
        return donation

    async def claim_donation(
        self,
        donation_id: str,
        user_id: str,
        claim_data: dict[str, Any],
    ) -> dict[str, Any]:
        donation = self.donations.get(donation_id)
        if donation is None:
            return {"success": False, "error": "Donation not found"}
        donation["status"] = "claimed"
        donation["claimedBy"] = user_id
        self.claims.append(
            {"donationId": donation_id, "userId": user_id, **claim_data}
        )
        return {"success": True}


backend = InMemoryDonationBackend()
config = OfflineQueueConfig(reject_unknown_types=True)
queue = OfflineQueue(
    InMemoryKeyValueStore(),
    register_donation_executors(OperationRegistry(), backend),
    config,
)
notifier = ConnectivityNotifier()


@asynccontextmanager
async def lifespan(app: Litestar) -> AsyncGenerator[None, None]:
    initialize_offline_sync(queue, notifier)
    yield
    await shutdown_offline_sync()


app = Litestar(
    route_handlers=[
        create_offline_queue_router(
            queue=queue,
            notifier=notifier,
        )
    ],
    lifespan=[lifespan],
)
