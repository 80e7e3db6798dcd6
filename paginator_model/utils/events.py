"""Ordered, synchronous event channels with detachable subscriptions."""

from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar

EventT = TypeVar("EventT")
Handler = Callable[[EventT], None]


class Subscription(Generic[EventT]):
    """Handle returned by a subscribe call; detach() removes the handler."""

    def __init__(self, channel: "EventChannel[EventT]", handler: Handler) -> None:
        self._channel: Optional[EventChannel[EventT]] = channel
        self.handler = handler

    @property
    def attached(self) -> bool:
        return self._channel is not None

    def detach(self) -> None:
        """Remove the handler from its channel. Safe to call more than once."""
        if self._channel is None:
            return
        channel = self._channel
        self._channel = None
        channel._remove(self)

    def __repr__(self) -> str:
        state = "attached" if self.attached else "detached"
        return f"<Subscription {getattr(self.handler, '__name__', self.handler)!r} {state}>"


class EventChannel(Generic[EventT]):
    """A list of subscribers notified in registration order."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._subscriptions: List[Subscription[EventT]] = []

    def __len__(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, handler: Handler) -> Subscription[EventT]:
        """Register a handler and return its subscription handle."""
        if not callable(handler):
            raise TypeError(f"{self.name} handler must be callable, got {handler!r}")
        subscription = Subscription(self, handler)
        self._subscriptions.append(subscription)
        return subscription

    def fire(self, event: EventT) -> None:
        """Call every handler with the event."""
        # Snapshot: subscribe or detach calls made by a handler apply from the next event.
        for subscription in tuple(self._subscriptions):
            subscription.handler(event)

    def detach_all(self) -> None:
        """Detach every outstanding subscription."""
        for subscription in tuple(self._subscriptions):
            subscription.detach()

    def _remove(self, subscription: Subscription[EventT]) -> None:
        self._subscriptions.remove(subscription)
