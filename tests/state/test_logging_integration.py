"""Tests for logging integration in the lifecycle tracker."""

from unittest.mock import Mock

import structlog
from structlog.testing import capture_logs

from app_lifecycle.logging.config import (
    configure_logging, get_state_logger, log_state_transition
)
from app_lifecycle.state.tracker import LifecycleStateTracker


def make_logger() -> Mock:
    """Logger double whose bind() returns itself."""
    logger = Mock()
    logger.bind.return_value = logger
    return logger


class TestLogStateTransition:
    """Test the state transition log helper."""

    def test_binds_transition_fields(self):
        """Transition fields are bound before the info record."""
        logger = make_logger()

        log_state_transition(
            logger, tracker="home", from_value="active", to_value="background",
            trigger="source"
        )

        logger.bind.assert_called_once_with(
            tracker="home", from_value="active", to_value="background", trigger="source"
        )
        logger.info.assert_called_once_with("state_transition")

    def test_binds_context_when_given(self):
        """Context is bound as a nested field."""
        logger = make_logger()

        log_state_transition(
            logger, tracker="home", from_value="inactive", to_value="active",
            trigger="synthetic", context={"category": "active"}
        )

        logger.bind.assert_any_call(context={"category": "active"})


class TestTrackerLogging:
    """Test log records produced by a tracker."""

    def test_synthetic_transition_logged(self, mock_source):
        """The initial event is logged as a synthetic transition."""
        tracker = LifecycleStateTracker(mock_source, name="home")
        tracker.logger = make_logger()

        tracker.track(True)

        tracker.logger.bind.assert_any_call(
            tracker="home", from_value="inactive", to_value="active", trigger="synthetic"
        )
        tracker.logger.info.assert_called_once_with("state_transition")

    def test_filtered_value_logged_at_debug(self, mock_source):
        """Suppressed events are logged at debug level."""
        tracker = LifecycleStateTracker(mock_source)
        tracker.logger = make_logger()
        tracker.track(True)
        tracker.logger.reset_mock()

        handler = mock_source.subscribe.call_args[0][1]
        handler("active")

        tracker.logger.info.assert_not_called()
        debug_calls = [c for c in tracker.logger.debug.call_args_list
                       if c[0][0] == "Lifecycle value filtered"]
        assert len(debug_calls) == 1
        assert debug_calls[0][1]["category"] == "active"

    def test_subscribe_failure_logged(self, mock_source):
        """Collaborator failures are logged before propagating."""
        mock_source.subscribe.side_effect = RuntimeError("boom")
        tracker = LifecycleStateTracker(mock_source)
        tracker.logger = make_logger()

        try:
            tracker.track(True)
        except RuntimeError:
            pass

        tracker.logger.error.assert_called_once_with(
            "Lifecycle subscribe failed", event_name="change", error="boom"
        )

    def test_records_captured(self, mock_source):
        """Records reach structlog with the tracker bound."""
        with capture_logs() as records:
            tracker = LifecycleStateTracker(mock_source, name="settings")
            tracker.track(True)

        transitions = [r for r in records if r["event"] == "state_transition"]
        assert len(transitions) == 1
        assert transitions[0]["tracker"] == "settings"
        assert transitions[0]["subsystem"] == "lifecycle_tracker"
        assert transitions[0]["to_value"] == "active"


class TestConfigureLogging:
    """Test structlog configuration."""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_renderer(self):
        """JSON output ends the processor chain with a JSON renderer."""
        configure_logging(level="DEBUG", format_json=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_without_timestamp(self):
        """Console output can drop timestamps."""
        configure_logging(level="INFO", include_timestamp=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)

    def test_extra_processors_precede_renderer(self):
        """Extra processors run before rendering."""
        extra = Mock()
        configure_logging(extra_processors=[extra])

        processors = structlog.get_config()["processors"]
        assert processors[-2] is extra

    def test_state_logger_binds_subsystem(self):
        """State loggers carry subsystem and audit fields."""
        with capture_logs() as records:
            get_state_logger("app_lifecycle.test").info("bound")

        assert records[0]["subsystem"] == "lifecycle_tracker"
        assert records[0]["audit_trail"] is True
