"""Offline queue endpoints."""

from __future__ import annotations

import logging
from typing import Annotated, ClassVar

from litestar import Controller, delete, get, post
from litestar.params import Dependency
from litestar.status_codes import HTTP_200_OK

from nourishnet_offline.enums import EnqueueErrorCode
from nourishnet_offline.exceptions import (
    OfflineQueueError,
    OperationNotFoundError,
    QueueFullError,
    StorageError,
    UnknownOperationTypeError,
)
from nourishnet_offline.operation_queue import OfflineQueue
from nourishnet_offline.schemas import (
    EnqueueRequest,
    EnqueueResult,
    ProcessResult,
    QueuedOperation,
)

logger = logging.getLogger(__name__)


class QueueController(Controller):
    """Inspect, feed and replay the offline queue."""

    path = "/queue"
    tags: ClassVar[list[str]] = ["queue"]

    @get("/health")
    async def queue_health(self) -> dict[str, str]:
        """Healthcheck endpoint for queue routes."""
        return {"status": "ok"}

    @get("/")
    async def list_operations(
        self,
        queue: Annotated[OfflineQueue, Dependency(skip_validation=True)],
    ) -> list[QueuedOperation]:
        """List queued operations in replay order."""
        return await queue.get_queue()

    @post("/")
    async def enqueue_operation(
        self,
        data: EnqueueRequest,
        queue: Annotated[OfflineQueue, Dependency(skip_validation=True)],
    ) -> EnqueueResult:
        """Queue an operation for later replay.

        A refused operation is raised as the matching queue error, so the
        response carries its ``code``.
        """
        result = await queue.enqueue(data.type, data.data)
        if result.success:
            return result

        logger.warning("Enqueue over HTTP failed: %s", result.error)
        if result.error_code == EnqueueErrorCode.QUEUE_FULL:
            raise QueueFullError(queue.config.max_queue_size)
        if result.error_code == EnqueueErrorCode.UNKNOWN_OPERATION_TYPE:
            raise UnknownOperationTypeError(data.type)
        if result.error_code == EnqueueErrorCode.INVALID_OPERATION:
            raise OfflineQueueError(result.error or "Invalid operation")
        raise StorageError(result.error or "Failed to persist operation")

    @post("/process", status_code=HTTP_200_OK)
    async def process_queue(
        self,
        queue: Annotated[OfflineQueue, Dependency(skip_validation=True)],
    ) -> ProcessResult:
        """Run one replay pass now."""
        return await queue.process_queue()

    @delete("/")
    async def clear_queue(
        self,
        queue: Annotated[OfflineQueue, Dependency(skip_validation=True)],
    ) -> None:
        """Drop every queued operation."""
        await queue.clear_queue()

    @get("/{queue_id:str}")
    async def get_operation(
        self,
        queue_id: str,
        queue: Annotated[OfflineQueue, Dependency(skip_validation=True)],
    ) -> QueuedOperation:
        operation = await queue.get_operation(queue_id)
        if operation is None:
            raise OperationNotFoundError(queue_id)
        return operation
