"""
Lifecycle state tracker.

Wraps the pure planning functions from ``machine.py`` with the imperative
side: holding the single source subscription, running teardown before every
re-subscription and publishing a referentially stable state pair.
"""

import itertools
from typing import Any, Callable, Optional

from ..config.defaults import TrackerConfig, TrackerParams
from ..errors import TrackerDisposedError
from ..logging.config import get_state_logger, log_state_transition
from .machine import classify, derive_published_state, next_lifecycle_value, plan_effects
from .models import EffectDeps, PublishedState, TrackerState


_tracker_ids = itertools.count(1)


class ListenerScope:
    """Owns at most one subscription handle and releases it once."""

    def __init__(self):
        self._handle: Optional[Any] = None

    @property
    def active(self) -> bool:
        return self._handle is not None

    def hold(self, handle: Any) -> None:
        self._handle = handle

    def close(self) -> bool:
        """
        Release the held handle.

        Returns:
            True if a handle was released, False if the scope was empty
        """
        if self._handle is None:
            return False

        # Cleared first so a failing release is never attempted twice
        handle, self._handle = self._handle, None
        handle.release()
        return True


class ChangeHandler:
    """Source callback with a classification baseline fixed at registration."""

    def __init__(
        self,
        baseline: str,
        params: TrackerParams,
        commit: Callable[[str, str], None],
        logger: Any
    ):
        self.baseline = baseline
        self.params = params
        self.attached = True
        self._commit = commit
        self._logger = logger

    def __call__(self, value: str, trigger: str = "source") -> bool:
        """
        Handle a raw lifecycle value.

        Returns:
            True if the value was committed
        """
        if not self.attached:
            return False

        next_value = next_lifecycle_value(self.baseline, value, self.params)
        if next_value is None:
            self._logger.debug(
                "Lifecycle value filtered",
                baseline=self.baseline,
                value=value,
                category=classify(value, self.params).value,
                trigger=trigger
            )
            return False

        self._commit(next_value, trigger)
        return True

    def rebase(self, baseline: str) -> None:
        self.baseline = baseline

    def detach(self) -> None:
        self.attached = False


class LifecycleStateTracker:
    """
    Debounced active/inactive tracker over a lifecycle source.

    Call ``track(enabled)`` whenever the consumer re-evaluates. While enabled
    the tracker holds exactly one subscription to the source; the first time
    it is enabled it injects a synthetic "active" event. Committed changes
    re-register the handler with the new baseline and are reported to the
    optional ``on_change`` callback.
    """

    def __init__(
        self,
        source: Any,
        state: Optional[TrackerState] = None,
        config: Optional[TrackerConfig] = None,
        on_change: Optional[Callable[[PublishedState], None]] = None,
        name: Optional[str] = None
    ):
        self.config = config or TrackerConfig()
        self.params = self.config.tracker
        self.source = source
        self.name = name or f"tracker-{next(_tracker_ids)}"
        self.logger = get_state_logger(__name__).bind(tracker=self.name)

        self._state = state or TrackerState(raw_value=self.params.initial_value)
        self._on_change = on_change
        self._scope = ListenerScope()
        self._handler: Optional[ChangeHandler] = None
        self._deps: Optional[EffectDeps] = None
        self._enabled = False
        self._published: Optional[PublishedState] = None
        self._reported: Optional[PublishedState] = None
        self._pending_report = False
        self._reconciling = False
        self._disposed = False

    @property
    def state(self) -> TrackerState:
        return self._state

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def is_subscribed(self) -> bool:
        return self._scope.active

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def published(self) -> PublishedState:
        return self._publish()

    def track(self, enabled: bool) -> PublishedState:
        """
        Re-evaluate the tracker for the consumer.

        Args:
            enabled: Whether the consumer wants lifecycle updates

        Returns:
            Published pair; the same object while its values are unchanged

        Raises:
            TrackerDisposedError: If dispose() was already called
        """
        if self._disposed:
            raise TrackerDisposedError(
                f"Tracker {self.name} was disposed",
                tracker_name=self.name
            )

        self._enabled = bool(enabled)
        self._reconcile()
        self._reported = self._publish()
        return self._reported

    def dispose(self) -> None:
        """Release the subscription for good. Safe to call repeatedly."""
        if self._disposed:
            return

        self._disposed = True
        self._teardown()
        self._deps = None
        self.logger.debug("Tracker disposed", raw_value=self._state.raw_value)

    def __enter__(self) -> "LifecycleStateTracker":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def _current_deps(self) -> EffectDeps:
        return EffectDeps(
            enabled=self._enabled,
            raw_value=self._state.raw_value,
            initialized=self._state.initialized,
        )

    def _reconcile(self) -> None:
        deps = self._current_deps()
        plan = plan_effects(self._deps, deps)

        if plan.is_noop:
            self._deps = deps
            return

        self._reconciling = True
        try:
            if plan.release:
                self._teardown()
            # Left unset if subscribe fails so the next evaluation runs again
            self._deps = None
            if plan.subscribe:
                self._run_effect(plan.synthesize)
            self._deps = self._current_deps()
        finally:
            self._reconciling = False

        if self._pending_report:
            self._pending_report = False
            self._report()

    def _run_effect(self, synthesize: bool) -> None:
        handler = ChangeHandler(
            baseline=self._state.raw_value,
            params=self.params,
            commit=self._commit,
            logger=self.logger
        )

        try:
            handle = self.source.subscribe(self.params.event_name, handler)
        except Exception as e:
            self.logger.error(
                "Lifecycle subscribe failed",
                event_name=self.params.event_name,
                error=str(e)
            )
            raise

        self._scope.hold(handle)
        self._handler = handler
        # Sources may replay the current value from inside subscribe
        handler.rebase(self._state.raw_value)
        self.logger.debug(
            "Subscribed to lifecycle source",
            event_name=self.params.event_name,
            baseline=handler.baseline
        )

        if synthesize:
            handler(self.params.synthetic_value, trigger="synthetic")
            self._state = self._state.with_initialized()
            # Registration settles on the post-synthesis value
            handler.rebase(self._state.raw_value)

    def _teardown(self) -> None:
        if self._handler is not None:
            self._handler.detach()
            self._handler = None

        try:
            released = self._scope.close()
        except Exception as e:
            self.logger.error("Lifecycle release failed", error=str(e))
            raise

        if released:
            self.logger.debug("Released lifecycle subscription")

    def _commit(self, value: str, trigger: str) -> None:
        previous = self._state.raw_value
        self._state = self._state.with_raw_value(value)

        log_state_transition(
            self.logger,
            tracker=self.name,
            from_value=previous,
            to_value=value,
            trigger=trigger,
            context={"category": classify(value, self.params).value}
        )

        # Changes made while an effect runs are settled by that effect
        if self._reconciling:
            if trigger != "synthetic":
                self._pending_report = True
            return

        self._reconcile()
        self._report()

    def _report(self) -> None:
        published = self._publish()
        if published is self._reported:
            return

        self._reported = published
        if self._on_change is not None:
            self._on_change(published)

    def _publish(self) -> PublishedState:
        candidate = derive_published_state(self._state.raw_value, self.params)
        if candidate != self._published:
            self._published = candidate
        return self._published
