"""Subscriber registry and subscription handles."""

from __future__ import annotations

import logging
from types import MethodType
from typing import Callable
from weakref import WeakMethod

from .types import Listener

logger = logging.getLogger(__name__)


class Subscription:
    """
    Handle returned by Store.subscribe().

    Handles compare by identity. Pass one to Store.unsubscribe(), or call
    unsubscribe() on it directly.
    """

    __slots__ = ("_callback", "_registry")

    def __init__(
        self,
        callback: Listener | WeakMethod,
        registry: SubscriberRegistry,
    ) -> None:
        self._callback = callback
        self._registry: SubscriberRegistry | None = registry

    @property
    def active(self) -> bool:
        """Whether this subscription is still registered and its target alive."""
        return self._registry is not None and self.resolve() is not None

    @property
    def is_weak(self) -> bool:
        return isinstance(self._callback, WeakMethod)

    def resolve(self) -> Listener | None:
        """Return the callback, or None if a weakly held target was collected."""
        if isinstance(self._callback, WeakMethod):
            return self._callback()
        return self._callback

    def unsubscribe(self) -> None:
        """Remove this subscription. Safe to call more than once."""
        if self._registry is not None:
            self._registry.remove(self)

    def __repr__(self) -> str:
        state = "active" if self.active else "inactive"
        return f"<Subscription {state}{' weak' if self.is_weak else ''}>"


class SubscriberRegistry:
    """
    Insertion-ordered set of subscriptions.

    Weak subscriptions whose target has been garbage collected are pruned
    when the registry is next walked.
    """

    __slots__ = ("_subscriptions",)

    def __init__(self) -> None:
        self._subscriptions: dict[Subscription, None] = {}

    def add(self, callback: Listener, *, weak: bool = False) -> Subscription:
        """
        Register a zero-argument callback.

        Args:
            callback: Called after every successful mutation.
            weak: Hold a bound-method callback through a weak reference.

        Raises:
            TypeError: If callback is not callable, or weak is requested for
                anything but a bound method.
        """
        if not callable(callback):
            raise TypeError(f"Subscriber callback must be callable, got {callback!r}")

        target: Callable[[], None] | WeakMethod = callback
        if weak:
            if not isinstance(callback, MethodType):
                raise TypeError("weak=True requires a bound method callback")
            target = WeakMethod(callback)

        subscription = Subscription(target, self)
        self._subscriptions[subscription] = None
        return subscription

    def remove(self, subscription: Subscription) -> bool:
        """
        Remove a subscription.

        Returns:
            True if it was registered here, False for unknown or already
            removed handles.
        """
        if self._subscriptions.pop(subscription, False) is None:
            subscription._registry = None
            return True
        return False

    def __contains__(self, subscription: object) -> bool:
        return subscription in self._subscriptions

    def __len__(self) -> int:
        self._prune()
        return len(self._subscriptions)

    def snapshot(self) -> list[Subscription]:
        """Get the live subscriptions in registration order."""
        self._prune()
        return list(self._subscriptions)

    def clear(self) -> None:
        for subscription in self._subscriptions:
            subscription._registry = None
        self._subscriptions.clear()

    def _prune(self) -> None:
        dead = [s for s in self._subscriptions if s.resolve() is None]
        for subscription in dead:
            logger.debug("Dropping collected weak subscriber %r", subscription)
            self.remove(subscription)
