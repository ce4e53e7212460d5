"""Connectivity endpoints."""

from __future__ import annotations

import logging
from typing import Annotated

from litestar import Controller, post
from litestar.params import Dependency

from nourishnet_offline.connectivity import ConnectivityNotifier
from nourishnet_offline.exceptions import ConfigurationError
from nourishnet_offline.schemas import ConnectivityResponse, ConnectivityState

logger = logging.getLogger(__name__)


class ConnectivityController(Controller):
    """Receives network status changes relayed by the host platform."""

    path = "/connectivity"
    tags = ["connectivity"]

    @post("/")
    async def report_connectivity(
        self,
        data: ConnectivityState,
        notifier: Annotated[
            ConnectivityNotifier | None,
            Dependency(skip_validation=True),
        ] = None,
    ) -> ConnectivityResponse:
        """Publish a connectivity change to the subscribed listeners."""
        if notifier is None:
            raise ConfigurationError("Connectivity notifier not configured")

        logger.debug("Connectivity reported: %s", data)
        notifier.publish(data)
        return ConnectivityResponse(status="accepted", online=data.is_online)
