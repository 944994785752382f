"""Lifecycle source contract and an in-process implementation."""

from abc import ABC, abstractmethod
from typing import Callable

from .errors import ReentrantEmitError, UnsupportedEventError
from .logging.config import get_logger

ChangeCallback = Callable[[str], None]

CHANGE_EVENT = "change"

logger = get_logger(__name__)


class SubscriptionHandle(ABC):
    """Registration returned by a lifecycle source."""

    @abstractmethod
    def release(self) -> None:
        """Stop delivering events to the registered handler."""
        pass


class LifecycleSource(ABC):
    """
    Host lifecycle notification source.

    Trackers only rely on ``subscribe``; any object with a compatible
    ``subscribe`` method returning something with ``release()`` works.
    """

    @abstractmethod
    def subscribe(self, event_name: str, handler: ChangeCallback) -> SubscriptionHandle:
        """
        Register a handler for an event.

        Args:
            event_name: Notification name, "change" for lifecycle changes
            handler: Called with each new raw lifecycle value

        Returns:
            Handle that unregisters the handler on release()
        """
        pass


class ManualSubscription(SubscriptionHandle):
    """Handle for a ManualLifecycleSource registration."""

    def __init__(self, source: "ManualLifecycleSource", handler: ChangeCallback):
        self._source = source
        self.handler = handler
        self.released = False

    def release(self) -> None:
        if self.released:
            return
        self.released = True
        self._source._remove(self)


class ManualLifecycleSource(LifecycleSource):
    """
    Lifecycle source driven by explicit ``emit`` calls.

    Delivery is serial and non-reentrant: each emit reaches the handlers
    registered when it started, in registration order.
    """

    def __init__(self):
        self.logger = logger
        self._subscriptions: list[ManualSubscription] = []
        self._dispatching = False
        self.subscribe_calls = 0
        self.release_calls = 0

    @property
    def listener_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, event_name: str, handler: ChangeCallback) -> ManualSubscription:
        if event_name != CHANGE_EVENT:
            raise UnsupportedEventError(
                f"Unsupported lifecycle event: {event_name}",
                event_name=event_name
            )

        subscription = ManualSubscription(self, handler)
        self._subscriptions.append(subscription)
        self.subscribe_calls += 1

        self.logger.debug(
            "Lifecycle handler subscribed",
            event_name=event_name,
            listener_count=len(self._subscriptions)
        )
        return subscription

    def emit(self, value: str) -> int:
        """
        Deliver a raw lifecycle value to current handlers.

        Returns:
            Number of handlers the value was delivered to
        """
        if self._dispatching:
            raise ReentrantEmitError(
                f"Lifecycle value emitted during dispatch: {value}",
                value=value
            )

        self._dispatching = True
        delivered = 0
        try:
            for subscription in list(self._subscriptions):
                # Released by an earlier handler in this dispatch
                if subscription.released:
                    continue
                subscription.handler(value)
                delivered += 1
        finally:
            self._dispatching = False

        self.logger.debug("Lifecycle value emitted", value=value, delivered=delivered)
        return delivered

    def _remove(self, subscription: ManualSubscription) -> None:
        self._subscriptions.remove(subscription)
        self.release_calls += 1
        self.logger.debug(
            "Lifecycle handler released",
            listener_count=len(self._subscriptions)
        )
