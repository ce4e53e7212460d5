"""Tests for exception-to-HTTP-response mapping."""

import pytest
from litestar import Litestar, get
from litestar.testing import TestClient

from nourishnet_offline.exceptions import (
    EXCEPTION_HANDLERS,
    ConfigurationError,
    OfflineQueueError,
    OperationNotFoundError,
    QueueFullError,
    StorageError,
    UnknownOperationTypeError,
)


def _raise_through_app(exc: Exception):
    @get("/test")
    async def handler() -> None:
        raise exc

    app = Litestar(
        route_handlers=[handler],
        exception_handlers=EXCEPTION_HANDLERS,
    )
    with TestClient(app) as client:
        return client.get("/test")


@pytest.mark.parametrize(
    ("exc", "status_code", "code"),
    [
        (OperationNotFoundError("CREATE_DONATION_1"), 404, "not_found"),
        (
            UnknownOperationTypeError("RATE_DONOR"),
            400,
            "unknown_operation_type",
        ),
        (QueueFullError(100), 503, "queue_full"),
        (StorageError("disk full"), 503, "storage_error"),
        (ConfigurationError("missing notifier"), 500, "configuration_error"),
        (OfflineQueueError("bad request"), 400, "offline_queue_error"),
    ],
)
def test_exception_maps_to_response(exc, status_code, code):
    resp = _raise_through_app(exc)
    assert resp.status_code == status_code
    data = resp.json()
    assert data["code"] == code
    assert data["detail"] == str(exc)


def test_not_found_detail_names_operation():
    resp = _raise_through_app(OperationNotFoundError("CLAIM_DONATION_7"))
    assert "CLAIM_DONATION_7" in resp.json()["detail"]


def test_queue_full_keeps_limit():
    exc = QueueFullError(25)
    assert exc.max_size == 25
    assert "25" in str(exc)


def test_all_errors_share_base_class():
    for exc_type in EXCEPTION_HANDLERS:
        assert issubclass(exc_type, OfflineQueueError)


def test_exception_handlers_is_dict():
    """EXCEPTION_HANDLERS is a dict of exception types to callables."""
    assert isinstance(EXCEPTION_HANDLERS, dict)
    assert len(EXCEPTION_HANDLERS) == 6
    for exc_type, handler in EXCEPTION_HANDLERS.items():
        assert isinstance(exc_type, type)
        assert issubclass(exc_type, Exception)
        assert callable(handler)
