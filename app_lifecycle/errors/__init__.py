"""
Error classification for the lifecycle tracker.

Collaborator failures raised by the lifecycle source itself are not wrapped;
these classes cover misuse of the tracker, the bundled source and the
configuration layer.
"""

from .lifecycle import (
    LifecycleError,
    TrackerDisposedError,
    ConfigurationError,
)
from .source import (
    LifecycleSourceError,
    UnsupportedEventError,
    ReentrantEmitError,
)

__all__ = [
    # Tracker errors
    "LifecycleError",
    "TrackerDisposedError",
    "ConfigurationError",
    # Source errors
    "LifecycleSourceError",
    "UnsupportedEventError",
    "ReentrantEmitError",
]
