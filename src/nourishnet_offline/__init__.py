# src/nourishnet_offline/__init__.py
"""Offline operation queue for the NourishNet donation marketplace."""

from typing import TYPE_CHECKING

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ConnectivityNotifier",
    "ConnectivityObserver",
    "ConnectivityState",
    "EnqueueErrorCode",
    "EnqueueResult",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "OfflineQueue",
    "OfflineQueueConfig",
    "OfflineQueueError",
    "OfflineSync",
    "OperationRegistry",
    "OperationStatus",
    "OperationType",
    "ProcessResult",
    "QueueFullError",
    "QueuedOperation",
    "StorageError",
    "__version__",
    "create_offline_queue_router",
    "initialize_offline_sync",
    "register_donation_executors",
    "shutdown_offline_sync",
]

if TYPE_CHECKING:
    from nourishnet_offline.config import OfflineQueueConfig
    from nourishnet_offline.connectivity import ConnectivityNotifier
    from nourishnet_offline.enums import (
        EnqueueErrorCode,
        OperationStatus,
        OperationType,
    )
    from nourishnet_offline.exceptions import (
        ConfigurationError,
        OfflineQueueError,
        QueueFullError,
        StorageError,
    )
    from nourishnet_offline.executors import register_donation_executors
    from nourishnet_offline.operation_queue import OfflineQueue
    from nourishnet_offline.plugin import create_offline_queue_router
    from nourishnet_offline.protocols import (
        ConnectivityObserver,
        KeyValueStore,
    )
    from nourishnet_offline.registry import OperationRegistry
    from nourishnet_offline.schemas import (
        ConnectivityState,
        EnqueueResult,
        ProcessResult,
        QueuedOperation,
    )
    from nourishnet_offline.storage import InMemoryKeyValueStore
    from nourishnet_offline.sync import (
        OfflineSync,
        initialize_offline_sync,
        shutdown_offline_sync,
    )

_LAZY_MODULES = {
    "OfflineQueueConfig": "config",
    "ConnectivityNotifier": "connectivity",
    "EnqueueErrorCode": "enums",
    "OperationStatus": "enums",
    "OperationType": "enums",
    "ConfigurationError": "exceptions",
    "OfflineQueueError": "exceptions",
    "QueueFullError": "exceptions",
    "StorageError": "exceptions",
    "register_donation_executors": "executors",
    "OfflineQueue": "operation_queue",
    "create_offline_queue_router": "plugin",
    "ConnectivityObserver": "protocols",
    "KeyValueStore": "protocols",
    "OperationRegistry": "registry",
    "ConnectivityState": "schemas",
    "EnqueueResult": "schemas",
    "ProcessResult": "schemas",
    "QueuedOperation": "schemas",
    "InMemoryKeyValueStore": "storage",
    "OfflineSync": "sync",
    "initialize_offline_sync": "sync",
    "shutdown_offline_sync": "sync",
}


def __getattr__(name: str):
    # Lazy imports to avoid loading all submodules on package import.
    module_name = _LAZY_MODULES.get(name)
    if module_name is None:
        raise AttributeError(
            f"module 'nourishnet_offline' has no attribute {name!r}"
        )
    from importlib import import_module

    module = import_module(f"nourishnet_offline.{module_name}")
    return getattr(module, name)
