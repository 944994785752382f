"""
Lifecycle source error classifications.

Raised by the bundled in-process source when it is used outside of the
collaborator contract the tracker relies on.
"""

from typing import Optional

from .lifecycle import LifecycleError


class LifecycleSourceError(LifecycleError):
    """Base class for lifecycle source contract violations."""


class UnsupportedEventError(LifecycleSourceError):
    """Subscription requested for an event the source does not emit."""

    def __init__(self, message: str, event_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.event_name = event_name


class ReentrantEmitError(LifecycleSourceError):
    """A handler tried to emit while the source was already dispatching."""

    def __init__(self, message: str, value: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value = value
