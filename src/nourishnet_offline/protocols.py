"""Collaborator protocols for the offline queue."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from nourishnet_offline.schemas import ConnectivityState

__all__ = [
    "ConnectivityListener",
    "ConnectivityObserver",
    "DonationBackend",
    "KeyValueStore",
    "OperationExecutor",
    "Unsubscribe",
]

ConnectivityListener = Callable[["ConnectivityState"], None]
Unsubscribe = Callable[[], None]


@runtime_checkable
class KeyValueStore(Protocol):
    """Durable local storage addressed by string keys.

    Values are strings; the queue stores one JSON document per key.
    """

    async def get(self, key: str) -> str | None:
        """Return the value stored under ``key`` or None."""
        ...

    async def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    async def remove(self, key: str) -> None:
        """Delete ``key``. Missing keys are ignored."""
        ...


@runtime_checkable
class ConnectivityObserver(Protocol):
    """Source of connectivity-changed events."""

    def subscribe(self, listener: ConnectivityListener) -> Unsubscribe:
        """Register ``listener`` and return a callable that removes it."""
        ...


@runtime_checkable
class OperationExecutor(Protocol):
    """Performs one buffered mutation against the backend."""

    async def __call__(self, payload: dict[str, Any]) -> Any: ...


@runtime_checkable
class DonationBackend(Protocol):
    """Backend mutations replayed by the built-in donation executors."""

    async def create_donation(
        self, donation_data: dict[str, Any], user_id: str
    ) -> Any:
        """Create a donation record. Returns the created donation."""
        ...

    async def claim_donation(
        self,
        donation_id: str,
        user_id: str,
        claim_data: dict[str, Any],
    ) -> Any:
        """Claim a donation for ``user_id``."""
        ...
