"""
Lifecycle tracker data models.

Immutable value types for the tracker's owned state, the pair it publishes
to its consumer and the inputs/outputs of effect planning.
"""

from dataclasses import dataclass
from enum import Enum


class LifecycleCategory(str, Enum):
    """Semantic category of a raw lifecycle value."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TrackerState:
    """State owned by a single tracker instance."""

    raw_value: str = "inactive"                      # Last committed raw lifecycle value
    initialized: bool = False                        # Synthetic event already fired

    def with_raw_value(self, raw_value: str) -> 'TrackerState':
        """Create new state with an updated raw value."""
        return TrackerState(raw_value=raw_value, initialized=self.initialized)

    def with_initialized(self) -> 'TrackerState':
        """Mark the synthetic initialization as done."""
        return TrackerState(raw_value=self.raw_value, initialized=True)


@dataclass(frozen=True)
class PublishedState:
    """Derived pair handed to the consumer."""

    is_active: bool
    is_inactive: bool

    def as_dict(self) -> dict:
        """Return the pair keyed the way host UI layers expect."""
        return {"isActive": self.is_active, "isInactive": self.is_inactive}


@dataclass(frozen=True)
class EffectDeps:
    """Inputs the subscription effect depends on."""

    enabled: bool
    raw_value: str
    initialized: bool


@dataclass(frozen=True)
class EffectPlan:
    """Work the tracker must perform to reconcile its subscription."""

    release: bool = False                            # Tear down the previous effect
    subscribe: bool = False                          # Register a new change handler
    synthesize: bool = False                         # Inject the initial event

    @property
    def is_noop(self) -> bool:
        return not (self.release or self.subscribe or self.synthesize)
