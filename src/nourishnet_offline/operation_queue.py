"""Durable offline operation queue with bounded retries."""

from __future__ import annotations

import asyncio
import copy
import logging
import time
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from nourishnet_offline.config import OfflineQueueConfig
from nourishnet_offline.enums import EnqueueErrorCode, OperationStatus
from nourishnet_offline.exceptions import (
    QueueFullError,
    UnknownOperationTypeError,
)
from nourishnet_offline.protocols import KeyValueStore, OperationExecutor
from nourishnet_offline.registry import OperationRegistry
from nourishnet_offline.schemas import (
    QUEUE_ADAPTER,
    EnqueueResult,
    ProcessResult,
    QueuedOperation,
)

logger = logging.getLogger(__name__)


def is_successful_result(result: Any) -> bool:
    """Interpret an executor's return value.

    A result succeeds when it is truthy and does not carry an explicit
    ``success`` of ``False``: ``{"donation": {...}}`` and ``{"id": "d1"}``
    succeed, ``{"success": False, "id": "d1"}`` and ``{}`` fail. Objects
    exposing a ``success`` attribute are read the same way.
    """
    if isinstance(result, Mapping):
        explicit = result.get("success")
    else:
        explicit = getattr(result, "success", None)
    if explicit is False:
        return False
    return bool(result)


class OfflineQueue:
    """Buffers mutating operations and replays them in insertion order.

    The whole queue lives in one JSON array under ``config.storage_key``.
    ``enqueue``, ``process_queue`` and ``clear_queue`` hold the same lock
    for their read-modify-write, so an executor must never call back into
    ``enqueue`` on the queue that is replaying it.
    """

    def __init__(
        self,
        store: KeyValueStore,
        registry: OperationRegistry | None = None,
        config: OfflineQueueConfig | None = None,
    ) -> None:
        self._store = store
        self._registry = (
            registry if registry is not None else OperationRegistry()
        )
        self._config = config or OfflineQueueConfig()
        self._lock = asyncio.Lock()
        self._last_millis = 0

    @property
    def registry(self) -> OperationRegistry:
        return self._registry

    @property
    def config(self) -> OfflineQueueConfig:
        return self._config

    async def enqueue(
        self, operation_type: str, data: dict[str, Any]
    ) -> EnqueueResult:
        """Append an operation to the persisted queue.

        Never raises; failures are reported in the result.
        """
        operation_type = str(operation_type)
        if (
            self._config.reject_unknown_types
            and operation_type not in self._registry
        ):
            error = UnknownOperationTypeError(operation_type)
            logger.warning("Rejected offline operation: %s", error)
            return EnqueueResult(
                success=False,
                error=str(error),
                error_code=EnqueueErrorCode.UNKNOWN_OPERATION_TYPE,
            )

        try:
            async with self._lock:
                queue = await self._load()
                self._make_room(queue)
                operation = QueuedOperation(
                    id=self._next_id(operation_type, {op.id for op in queue}),
                    type=operation_type,
                    data=data,
                )
                queue.append(operation)
                await self._save(queue)
        except QueueFullError as exc:
            logger.warning("Rejected %s operation: %s", operation_type, exc)
            return EnqueueResult(
                success=False,
                error=str(exc),
                error_code=EnqueueErrorCode.QUEUE_FULL,
            )
        except ValidationError as exc:
            logger.warning("Invalid %s operation: %s", operation_type, exc)
            return EnqueueResult(
                success=False,
                error=str(exc),
                error_code=EnqueueErrorCode.INVALID_OPERATION,
            )
        except Exception as exc:
            logger.exception("Error queuing %s operation", operation_type)
            return EnqueueResult(
                success=False,
                error=str(exc),
                error_code=EnqueueErrorCode.STORAGE_ERROR,
            )

        logger.info("Queued offline operation %s", operation.id)
        return EnqueueResult(success=True, queue_id=operation.id)

    async def get_queue(self) -> list[QueuedOperation]:
        """Return the persisted queue, or an empty list if unreadable."""
        try:
            return await self._load()
        except Exception:
            logger.exception("Error reading offline queue")
            return []

    async def get_operation(self, queue_id: str) -> QueuedOperation | None:
        for operation in await self.get_queue():
            if operation.id == queue_id:
                return operation
        return None

    async def process_queue(self) -> ProcessResult:
        """Run one replay pass over the pending operations.

        Succeeded operations are removed, failed ones are kept with an
        incremented retry counter. The surviving entries are written back
        once, after the pass.
        """
        try:
            async with self._lock:
                queue = await self._load()
                if not queue:
                    return ProcessResult(success=True)

                processed = 0
                remaining: list[QueuedOperation] = []
                for operation in queue:
                    if operation.status is not OperationStatus.PENDING:
                        remaining.append(operation)
                        continue

                    executor = self._registry.get(operation.type)
                    if executor is None:
                        if self._apply_unknown_type_policy(operation):
                            remaining.append(operation)
                        continue

                    if await self._execute(executor, operation):
                        processed += 1
                        logger.info(
                            "Processed queued operation %s", operation.id
                        )
                    else:
                        self._record_failure(operation)
                        remaining.append(operation)

                await self._save(remaining)
        except Exception as exc:
            logger.exception("Error processing offline queue")
            return ProcessResult(success=False, error=str(exc))

        return ProcessResult(
            success=True,
            processed=processed,
            remaining=len(remaining),
        )

    async def clear_queue(self) -> None:
        """Delete the persisted queue, terminal entries included."""
        async with self._lock:
            await self._store.remove(self._config.storage_key)
        logger.info("Cleared offline queue")

    async def _load(self) -> list[QueuedOperation]:
        raw = await self._store.get(self._config.storage_key)
        if not raw:
            return []
        try:
            return QUEUE_ADAPTER.validate_json(raw)
        except ValidationError:
            logger.exception(
                "Offline queue under %r is not decodable, treating as empty",
                self._config.storage_key,
            )
            return []

    async def _save(self, queue: list[QueuedOperation]) -> None:
        await self._store.set(
            self._config.storage_key,
            QUEUE_ADAPTER.dump_json(queue).decode(),
        )

    def _next_id(self, operation_type: str, taken: set[str]) -> str:
        # Millis never repeat within a queue, even when the clock does.
        millis = max(time.time_ns() // 1_000_000, self._last_millis + 1)
        while f"{operation_type}_{millis}" in taken:
            millis += 1
        self._last_millis = millis
        return f"{operation_type}_{millis}"

    def _make_room(self, queue: list[QueuedOperation]) -> None:
        limit = self._config.max_queue_size
        while len(queue) >= limit:
            index = next(
                (
                    i
                    for i, operation in enumerate(queue)
                    if operation.status.is_terminal
                ),
                None,
            )
            if index is None:
                raise QueueFullError(limit)
            evicted = queue.pop(index)
            logger.warning(
                "Evicted %s operation %s to make room in offline queue",
                evicted.status,
                evicted.id,
            )

    async def _execute(
        self, executor: OperationExecutor, operation: QueuedOperation
    ) -> bool:
        payload = copy.deepcopy(operation.data)
        try:
            if self._config.executor_timeout is None:
                result = await executor(payload)
            else:
                result = await asyncio.wait_for(
                    executor(payload),
                    timeout=self._config.executor_timeout,
                )
        except Exception as exc:
            logger.error(
                "Error processing queued operation %s: %r",
                operation.id,
                exc,
            )
            return False
        return is_successful_result(result)

    def _record_failure(self, operation: QueuedOperation) -> None:
        operation.retries += 1
        if operation.retries > self._config.max_retries:
            operation.status = OperationStatus.FAILED
            logger.warning(
                "Operation %s exhausted after %d attempts",
                operation.id,
                operation.retries,
            )
        else:
            operation.status = OperationStatus.PENDING
            logger.info(
                "Operation %s: attempt %d failed, will retry",
                operation.id,
                operation.retries,
            )

    def _apply_unknown_type_policy(self, operation: QueuedOperation) -> bool:
        """Apply the unknown-type policy. Returns True to keep the entry."""
        logger.warning(
            "Unknown operation type %r for queued operation %s",
            operation.type,
            operation.id,
        )
        if self._config.unknown_type_policy == "drop":
            return False
        operation.status = OperationStatus.UNRECOVERABLE
        return True
