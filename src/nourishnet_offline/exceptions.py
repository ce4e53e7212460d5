"""Exception handling for nourishnet-offline."""

from litestar import Request, Response


class OfflineQueueError(Exception):
    """Base class for offline queue errors."""


class StorageError(OfflineQueueError):
    """The durable key-value store failed to read or write."""


class QueueFullError(OfflineQueueError):
    """The queue holds its maximum number of entries."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        super().__init__(f"Offline queue is full ({max_size} operations)")


class UnknownOperationTypeError(OfflineQueueError):
    """No executor is registered for an operation type."""

    def __init__(self, operation_type: str) -> None:
        self.operation_type = operation_type
        super().__init__(f"Unknown operation type {operation_type!r}")


class OperationNotFoundError(OfflineQueueError):
    """Queued operation with given ID was not found."""

    def __init__(self, queue_id: str) -> None:
        self.queue_id = queue_id
        super().__init__(f"Queued operation {queue_id!r} not found")


class ConfigurationError(OfflineQueueError):
    """A required component is not configured."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


def _error_response(
    request: Request, detail: str, code: str, status_code: int
) -> Response:
    return Response(
        content={"detail": detail, "code": code},
        status_code=status_code,
    )


def handle_operation_not_found(
    request: Request, exc: OperationNotFoundError
) -> Response:
    """Map OperationNotFoundError to 404."""
    return _error_response(request, str(exc), "not_found", 404)


def handle_unknown_operation_type(
    request: Request, exc: UnknownOperationTypeError
) -> Response:
    """Map UnknownOperationTypeError to 400."""
    return _error_response(request, str(exc), "unknown_operation_type", 400)


def handle_queue_full(request: Request, exc: QueueFullError) -> Response:
    """Map QueueFullError to 503."""
    return _error_response(request, str(exc), "queue_full", 503)


def handle_storage_error(request: Request, exc: StorageError) -> Response:
    """Map StorageError to 503."""
    return _error_response(request, str(exc), "storage_error", 503)


def handle_configuration_error(
    request: Request, exc: ConfigurationError
) -> Response:
    """Map ConfigurationError to 500."""
    return _error_response(request, str(exc), "configuration_error", 500)


def handle_offline_queue_error(
    request: Request, exc: OfflineQueueError
) -> Response:
    """Map generic OfflineQueueError to 400."""
    return _error_response(request, str(exc), "offline_queue_error", 400)


EXCEPTION_HANDLERS = {
    OperationNotFoundError: handle_operation_not_found,
    UnknownOperationTypeError: handle_unknown_operation_type,
    QueueFullError: handle_queue_full,
    StorageError: handle_storage_error,
    ConfigurationError: handle_configuration_error,
    OfflineQueueError: handle_offline_queue_error,
}
