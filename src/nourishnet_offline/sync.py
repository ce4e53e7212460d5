"""Connectivity-triggered replay of the offline queue."""

from __future__ import annotations

import asyncio
import logging

from nourishnet_offline.config import OfflineQueueConfig
from nourishnet_offline.operation_queue import OfflineQueue
from nourishnet_offline.protocols import ConnectivityObserver, Unsubscribe
from nourishnet_offline.schemas import ConnectivityState, ProcessResult

logger = logging.getLogger(__name__)


class OfflineSync:
    """Replays the queue whenever the device comes back online.

    At most one replay task runs at a time. Triggers arriving while it is
    in flight are folded into a single extra pass, run once the current
    one finishes, so operations queued or connectivity regained during a
    pass are not left waiting for the next event.
    """

    def __init__(
        self,
        queue: OfflineQueue,
        observer: ConnectivityObserver,
        config: OfflineQueueConfig | None = None,
    ) -> None:
        self._queue = queue
        self._observer = observer
        self._config = config or queue.config
        self._unsubscribe: Unsubscribe | None = None
        self._task: asyncio.Task[ProcessResult] | None = None
        self._rerun = False

    @property
    def queue(self) -> OfflineQueue:
        return self._queue

    @property
    def is_started(self) -> bool:
        return self._unsubscribe is not None

    @property
    def in_flight(self) -> asyncio.Task[ProcessResult] | None:
        if self._task is not None and not self._task.done():
            return self._task
        return None

    def start(self) -> None:
        """Subscribe to connectivity events. Calling it again is a no-op."""
        if self._unsubscribe is not None:
            return
        if not self._config.sync_enabled:
            logger.info("Offline sync disabled by configuration")
            return
        self._unsubscribe = self._observer.subscribe(
            self._on_connectivity_change
        )
        logger.info("Offline sync started")

    async def stop(self) -> None:
        """Unsubscribe and wait for the in-flight replay to finish."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._rerun = False
        task, self._task = self._task, None
        if task is not None and not task.done():
            await task
        logger.info("Offline sync stopped")

    def trigger(self) -> asyncio.Task[ProcessResult]:
        """Schedule a replay pass, or return the one already running.

        A trigger that finds a pass in flight makes that task run one more
        pass before it completes.
        """
        task = self.in_flight
        if task is not None:
            logger.debug("Replay already in flight, scheduling one rerun")
            self._rerun = True
            return task
        self._task = asyncio.get_running_loop().create_task(self._replay())
        return self._task

    async def _replay(self) -> ProcessResult:
        while True:
            self._rerun = False
            result = await self._queue.process_queue()
            if result.success:
                logger.info(
                    "Offline replay processed %d operations, %d remaining",
                    result.processed,
                    result.remaining,
                )
            else:
                logger.error("Offline replay failed: %s", result.error)
            if not self._rerun:
                return result
            logger.info("Replay requested during pass, running again")

    def _on_connectivity_change(self, state: ConnectivityState) -> None:
        if not state.is_online:
            logger.debug("Connectivity changed, still offline: %s", state)
            return
        logger.info("Network restored, processing offline queue")
        self.trigger()


_offline_sync: OfflineSync | None = None


def initialize_offline_sync(
    queue: OfflineQueue,
    observer: ConnectivityObserver,
    config: OfflineQueueConfig | None = None,
) -> OfflineSync:
    """Start the process-wide offline sync.

    Repeated calls return the running instance without subscribing again.
    """
    global _offline_sync
    if _offline_sync is None:
        _offline_sync = OfflineSync(queue, observer, config)
    elif _offline_sync.queue is not queue:
        logger.warning(
            "Offline sync already initialized for another queue, reusing it"
        )
    _offline_sync.start()
    return _offline_sync


def get_offline_sync() -> OfflineSync | None:
    return _offline_sync


async def shutdown_offline_sync() -> None:
    """Stop the process-wide offline sync, if any."""
    global _offline_sync
    sync, _offline_sync = _offline_sync, None
    if sync is not None:
        await sync.stop()
