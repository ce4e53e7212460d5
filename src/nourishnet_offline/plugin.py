"""Router factory for nourishnet-offline."""

from __future__ import annotations

from litestar import Router
from litestar.di import Provide

from nourishnet_offline.connectivity import ConnectivityNotifier
from nourishnet_offline.exceptions import EXCEPTION_HANDLERS
from nourishnet_offline.operation_queue import OfflineQueue
from nourishnet_offline.routes.connectivity import ConnectivityController
from nourishnet_offline.routes.queue import QueueController


def create_offline_queue_router(
    *,
    queue: OfflineQueue,
    notifier: ConnectivityNotifier | None = None,
) -> Router:
    """Create a configured Litestar router.

    The endpoints follow the queue's own configuration, so limits and the
    unknown-type policy are set once on the ``OfflineQueue``.

    Args:
        queue: The offline queue served by the endpoints.
        notifier: Connectivity notifier fed by ``POST /connectivity``.

    Returns:
        A Litestar Router with the queue and connectivity endpoints.
    """
    return Router(
        path="/",
        route_handlers=[
            QueueController,
            ConnectivityController,
        ],
        dependencies={
            "queue": Provide(lambda: queue, sync_to_thread=False),
            "notifier": Provide(lambda: notifier, sync_to_thread=False),
        },
        exception_handlers=EXCEPTION_HANDLERS,
    )
