"""
Tracker-level error classifications.

These exceptions represent misuse of a tracker or its configuration. None of
them are retried; they bubble to whatever owns the tracker.
"""

from typing import Optional, Dict, Any, List


class LifecycleError(Exception):
    """Base class for lifecycle tracking failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = False


class TrackerDisposedError(LifecycleError):
    """A disposed tracker was asked to evaluate again."""

    def __init__(self, message: str, tracker_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.tracker_name = tracker_name


class ConfigurationError(LifecycleError):
    """Configuration failed validation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
