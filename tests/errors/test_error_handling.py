"""
Error handling tests for the lifecycle tracker.

Covers the error hierarchy, what the tracker propagates and what it treats
as ordinary input.
"""

import pytest
from unittest.mock import Mock

from app_lifecycle.errors import (
    LifecycleError,
    TrackerDisposedError,
    ConfigurationError,
    LifecycleSourceError,
    UnsupportedEventError,
    ReentrantEmitError,
)
from app_lifecycle.config.defaults import TrackerConfig, TrackerParams
from app_lifecycle.config.validation import ValidationError
from app_lifecycle.state.tracker import LifecycleStateTracker


class TestErrorClassification:
    """Test error classification system."""

    def test_base_error(self):
        """Base errors carry message and context and are not recoverable."""
        error = LifecycleError("base error")
        assert error.message == "base error"
        assert error.context == {}
        assert error.recoverable is False

    def test_tracker_errors(self):
        """Tracker errors derive from LifecycleError."""
        disposed = TrackerDisposedError("gone", tracker_name="home", context={"raw_value": "active"})
        assert isinstance(disposed, LifecycleError)
        assert disposed.tracker_name == "home"
        assert disposed.context == {"raw_value": "active"}

        issue = ValidationError(field="level", message="bad", value="LOUD")
        config_error = ConfigurationError("invalid", errors=[issue])
        assert isinstance(config_error, LifecycleError)
        assert config_error.errors == [issue]

    def test_source_errors(self):
        """Source errors share a common base."""
        unsupported = UnsupportedEventError("nope", event_name="blur")
        reentrant = ReentrantEmitError("again", value="active")

        for error in (unsupported, reentrant):
            assert isinstance(error, LifecycleSourceError)
            assert isinstance(error, LifecycleError)

        assert unsupported.event_name == "blur"
        assert reentrant.value == "active"


class TestTrackerErrorPropagation:
    """Test which failures escape the tracker."""

    def test_collaborator_error_not_wrapped(self):
        """Subscribe failures propagate with their own type."""
        source = Mock()
        source.subscribe.side_effect = ConnectionError("bridge down")
        tracker = LifecycleStateTracker(source)

        with pytest.raises(ConnectionError):
            tracker.track(True)

    def test_unsupported_event_from_source(self, source):
        """A misconfigured event name surfaces as the source's error."""
        tracker = LifecycleStateTracker(
            source, config=TrackerConfig(tracker=TrackerParams(event_name="focus"))
        )

        with pytest.raises(UnsupportedEventError):
            tracker.track(True)

    def test_malformed_value_is_not_an_error(self, source):
        """Unknown raw values are ignored rather than raised."""
        tracker = LifecycleStateTracker(source)
        tracker.track(True)

        source.emit("")
        source.emit("unknown")

        assert tracker.track(True).is_active is True
