"""In-process connectivity observer."""

from __future__ import annotations

import contextlib
import logging

from nourishnet_offline.protocols import ConnectivityListener, Unsubscribe
from nourishnet_offline.schemas import ConnectivityState

logger = logging.getLogger(__name__)


class ConnectivityNotifier:
    """Fans connectivity-changed events out to subscribed listeners.

    Implements the ConnectivityObserver protocol. The host feeds it with
    :meth:`publish`, for example from the ``/connectivity`` endpoint.
    """

    def __init__(self) -> None:
        self._listeners: list[ConnectivityListener] = []
        self.last_state: ConnectivityState | None = None

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: ConnectivityListener) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, state: ConnectivityState) -> None:
        """Deliver ``state`` to every listener.

        A failing listener is logged and does not stop delivery.
        """
        self.last_state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Connectivity listener %r failed", listener)
