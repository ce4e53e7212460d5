"""Operation tags and lifecycle states."""

from enum import StrEnum


class OperationType(StrEnum):
    """Built-in operation tags.

    The set is open: the registry accepts any string tag.
    """

    CREATE_DONATION = "CREATE_DONATION"
    CLAIM_DONATION = "CLAIM_DONATION"


class OperationStatus(StrEnum):
    """Lifecycle state of a queued operation.

    Only ``PENDING`` operations are replayed. ``FAILED`` and
    ``UNRECOVERABLE`` are terminal and kept until the queue is cleared.
    """

    PENDING = "pending"
    FAILED = "failed"
    UNRECOVERABLE = "unrecoverable"

    @property
    def is_terminal(self) -> bool:
        return self is not OperationStatus.PENDING


class EnqueueErrorCode(StrEnum):
    """Why ``OfflineQueue.enqueue`` refused an operation."""

    QUEUE_FULL = "queue_full"
    UNKNOWN_OPERATION_TYPE = "unknown_operation_type"
    INVALID_OPERATION = "invalid_operation"
    STORAGE_ERROR = "storage_error"
