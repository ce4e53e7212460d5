"""Queue records and request/response schemas."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field, TypeAdapter

from nourishnet_offline.enums import EnqueueErrorCode, OperationStatus


class QueuedOperation(BaseModel):
    """A buffered mutation awaiting execution.

    Persisted as one element of the queue's JSON array.
    """

    id: str
    type: str
    data: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(tz=UTC))
    retries: int = Field(default=0, ge=0)
    status: OperationStatus = OperationStatus.PENDING


QUEUE_ADAPTER = TypeAdapter(list[QueuedOperation])


class EnqueueRequest(BaseModel):
    """Payload for queueing an operation over HTTP."""

    type: str = Field(min_length=1)
    data: dict[str, Any] = Field(default_factory=dict)


class EnqueueResult(BaseModel):
    """Outcome of ``OfflineQueue.enqueue``."""

    success: bool
    queue_id: str | None = None
    error: str | None = None
    error_code: EnqueueErrorCode | None = None


class ProcessResult(BaseModel):
    """Outcome of one replay pass."""

    success: bool
    processed: int = 0
    remaining: int = 0
    error: str | None = None


class ConnectivityState(BaseModel):
    """Network status reported by the host platform.

    ``is_internet_reachable`` is None while the platform has not
    determined reachability yet.
    """

    is_connected: bool
    is_internet_reachable: bool | None = None

    @property
    def is_online(self) -> bool:
        return bool(self.is_connected and self.is_internet_reachable)


class ConnectivityResponse(BaseModel):
    """Acknowledgement of a reported connectivity change."""

    status: str
    online: bool
