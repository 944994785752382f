"""Pytest configuration and shared fixtures."""

import pytest
from unittest.mock import Mock

from app_lifecycle.source import ManualLifecycleSource


@pytest.fixture
def source() -> ManualLifecycleSource:
    """In-process lifecycle source."""
    return ManualLifecycleSource()


@pytest.fixture
def release_mock() -> Mock:
    """Release callable shared by every handle the mock source hands out."""
    return Mock()


@pytest.fixture
def mock_source(release_mock: Mock) -> Mock:
    """Lifecycle source double recording subscribe/release calls."""
    source = Mock()
    source.subscribe.return_value = Mock(release=release_mock)
    return source
