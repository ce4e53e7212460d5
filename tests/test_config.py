"""Tests for OfflineQueueConfig."""

import pytest
from pydantic import ValidationError

from nourishnet_offline.config import DEFAULT_STORAGE_KEY, OfflineQueueConfig


def test_config_defaults():
    """Config has retry and storage defaults."""
    config = OfflineQueueConfig()
    assert config.storage_key == DEFAULT_STORAGE_KEY == (
        "@nourishnet_offline_queue"
    )
    assert config.max_retries == 3
    assert config.max_queue_size == 100
    assert config.executor_timeout is None
    assert config.unknown_type_policy == "unrecoverable"
    assert config.reject_unknown_types is False
    assert config.sync_enabled is True


def test_config_custom_retry():
    """Config accepts custom retry settings."""
    config = OfflineQueueConfig(
        max_retries=5,
        executor_timeout=2.5,
        sync_enabled=False,
    )
    assert config.max_retries == 5
    assert config.executor_timeout == 2.5
    assert config.sync_enabled is False


def test_config_env_prefix(monkeypatch):
    """Config reads from NOURISHNET_ env vars."""
    monkeypatch.setenv("NOURISHNET_STORAGE_KEY", "custom_queue")
    monkeypatch.setenv("NOURISHNET_MAX_RETRIES", "10")
    monkeypatch.setenv("NOURISHNET_UNKNOWN_TYPE_POLICY", "drop")
    config = OfflineQueueConfig()
    assert config.storage_key == "custom_queue"
    assert config.max_retries == 10
    assert config.unknown_type_policy == "drop"


def test_unknown_type_policy_is_validated():
    with pytest.raises(ValidationError):
        OfflineQueueConfig(unknown_type_policy="retry")


def test_max_queue_size_must_be_positive():
    with pytest.raises(ValidationError):
        OfflineQueueConfig(max_queue_size=0)


def test_executor_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        OfflineQueueConfig(executor_timeout=0)


def test_negative_max_retries_rejected():
    with pytest.raises(ValidationError):
        OfflineQueueConfig(max_retries=-1)
