"""
Core lifecycle classification and hysteresis logic.

Pure functions only: the tracker in ``tracker.py`` owns all state and side
effects and calls into this module to decide what to do.
"""

import re
from typing import Optional

from ..config.defaults import TrackerParams
from .models import EffectDeps, EffectPlan, LifecycleCategory, PublishedState

DEFAULT_PARAMS = TrackerParams()


def is_active(value: str, params: Optional[TrackerParams] = None) -> bool:
    """ActiveLike: exact match against the active value."""
    params = params or DEFAULT_PARAMS
    return value == params.active_value


def is_inactive(value: str, params: Optional[TrackerParams] = None) -> bool:
    """
    InactiveLike: the inactive pattern occurs anywhere in the value.

    This is a substring search, looser than the exact match used by
    ``is_active``; "not-inactive-yet" classifies as InactiveLike.
    """
    params = params or DEFAULT_PARAMS
    return re.search(params.inactive_pattern, value) is not None


def classify(value: str, params: Optional[TrackerParams] = None) -> LifecycleCategory:
    """Classify a raw lifecycle value."""
    if is_active(value, params):
        return LifecycleCategory.ACTIVE
    if is_inactive(value, params):
        return LifecycleCategory.INACTIVE
    return LifecycleCategory.UNKNOWN


def next_lifecycle_value(
    baseline: str,
    incoming: str,
    params: Optional[TrackerParams] = None
) -> Optional[str]:
    """
    Apply the hysteresis filter to an incoming raw value.

    Args:
        baseline: Raw value the change handler was registered with
        incoming: Raw value delivered by the lifecycle source
        params: Classification parameters

    Returns:
        The value to commit, or None when the event does not cross the
        active/inactive boundary
    """
    baseline_inactive = is_inactive(baseline, params)

    if baseline_inactive and is_active(incoming, params):
        return incoming

    if not baseline_inactive and is_inactive(incoming, params):
        return incoming

    return None


def derive_published_state(raw_value: str, params: Optional[TrackerParams] = None) -> PublishedState:
    """Derive the consumer-facing pair from a raw value."""
    return PublishedState(
        is_active=is_active(raw_value, params),
        is_inactive=is_inactive(raw_value, params),
    )


def plan_effects(previous: Optional[EffectDeps], deps: EffectDeps) -> EffectPlan:
    """
    Decide how to reconcile the subscription effect with new inputs.

    The previous effect is always torn down before a new one runs, whether
    or not it held a subscription. Nothing runs while the inputs are
    unchanged.

    Args:
        previous: Inputs of the last executed effect, None if none ran yet
        deps: Current inputs

    Returns:
        EffectPlan describing release/subscribe/synthesize work
    """
    if previous == deps:
        return EffectPlan()

    return EffectPlan(
        release=previous is not None,
        subscribe=deps.enabled,
        synthesize=deps.enabled and not deps.initialized,
    )
