"""
App Lifecycle - Debounced application foreground/background state tracking

Collapses the noisy stream of host lifecycle notifications ("active",
"inactive", "background", ...) into a stable active/not-active signal with
a single synthetic initialization event.
"""

from .source import ManualLifecycleSource
from .state.models import PublishedState, TrackerState
from .state.tracker import LifecycleStateTracker

__version__ = "0.1.0"
__author__ = "App Lifecycle Team"

__all__ = [
    "LifecycleStateTracker",
    "ManualLifecycleSource",
    "PublishedState",
    "TrackerState",
]
