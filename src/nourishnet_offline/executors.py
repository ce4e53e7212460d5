"""Executors replaying queued donation mutations."""

from __future__ import annotations

from typing import Any

from nourishnet_offline.enums import OperationType
from nourishnet_offline.protocols import DonationBackend, OperationExecutor
from nourishnet_offline.registry import OperationRegistry


def _require(payload: dict[str, Any], key: str) -> Any:
    try:
        return payload[key]
    except KeyError as exc:
        raise ValueError(f"Queued payload is missing {key!r}") from exc


def create_donation_executor(backend: DonationBackend) -> OperationExecutor:
    """Replay ``{"donationData": {...}, "userId": ...}`` payloads."""

    async def execute(payload: dict[str, Any]) -> Any:
        return await backend.create_donation(
            _require(payload, "donationData"),
            _require(payload, "userId"),
        )

    return execute


def claim_donation_executor(backend: DonationBackend) -> OperationExecutor:
    """Replay ``{"donationId": ..., "userId": ..., "claimData": {...}}``."""

    async def execute(payload: dict[str, Any]) -> Any:
        return await backend.claim_donation(
            _require(payload, "donationId"),
            _require(payload, "userId"),
            payload.get("claimData") or {},
        )

    return execute


def register_donation_executors(
    registry: OperationRegistry,
    backend: DonationBackend,
) -> OperationRegistry:
    registry.register(
        OperationType.CREATE_DONATION, create_donation_executor(backend)
    )
    registry.register(
        OperationType.CLAIM_DONATION, claim_donation_executor(backend)
    )
    return registry
