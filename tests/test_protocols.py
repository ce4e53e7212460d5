"""Tests for protocol definitions."""

from nourishnet_offline.protocols import (
    DonationBackend,
    KeyValueStore,
    OperationExecutor,
)
from nourishnet_offline.storage import InMemoryKeyValueStore


def test_key_value_store_has_all_methods():
    """KeyValueStore protocol defines get/set/remove."""
    for method_name in ("get", "set", "remove"):
        assert hasattr(KeyValueStore, method_name), (
            f"KeyValueStore missing method: {method_name}"
        )


def test_in_memory_store_is_key_value_store():
    assert isinstance(InMemoryKeyValueStore(), KeyValueStore)


def test_non_conforming_store_is_not_instance():
    class ReadOnly:
        async def get(self, key: str) -> str | None:
            return None

    assert not isinstance(ReadOnly(), KeyValueStore)


def test_async_function_is_operation_executor():
    async def execute(payload: dict) -> bool:
        return True

    assert isinstance(execute, OperationExecutor)


def test_donation_backend_is_runtime_checkable():
    """A class with both mutations satisfies DonationBackend."""

    class Backend:
        async def create_donation(self, donation_data, user_id):
            return {"id": "d1"}

        async def claim_donation(self, donation_id, user_id, claim_data):
            return {"success": True}

    class CreateOnly:
        async def create_donation(self, donation_data, user_id):
            return {"id": "d1"}

    assert isinstance(Backend(), DonationBackend)
    assert not isinstance(CreateOnly(), DonationBackend)
