"""Store - owns the counter, applies actions and notifies subscribers."""

from __future__ import annotations

import logging
import threading
from collections import deque

from .config import ReentrancyPolicy, StoreConfig
from .errors import ReentrantDispatchError
from .reducer import counter_reducer
from .state import StateCell
from .subscribers import SubscriberRegistry, Subscription
from .types import CounterAction, Decrement, Increment, Listener, Reducer

logger = logging.getLogger(__name__)


class Store:
    """
    Single source of truth for a shared counter.

    Pass one Store instance to every consumer that needs the counter. Each
    dispatch reduces the current value, writes it, then synchronously calls
    every subscriber in registration order before returning.

    Usage:
        ```python
        store = create_store(name="clicks")

        header = bind(store, lambda value: print(f"header sees {value}"))
        page = bind(store, lambda value: print(f"page sees {value}"))

        page.increment()
        # header sees 1
        # page sees 1
        store.get_value()  # 1
        ```
    """

    __slots__ = (
        "_cell",
        "_subscribers",
        "_reducer",
        "_config",
        "_lock",
        "_notifying_thread",
        "_deferred",
    )

    def __init__(
        self,
        config: StoreConfig | None = None,
        *,
        reducer: Reducer = counter_reducer,
    ) -> None:
        self._config = config or StoreConfig()
        self._cell = StateCell(self._config.initial, name=self._config.name)
        self._subscribers = SubscriberRegistry()
        self._reducer = reducer
        self._lock = threading.Lock()
        self._notifying_thread: int | None = None
        self._deferred: deque[CounterAction] = deque()

    @property
    def name(self) -> str | None:
        """Get store name."""
        return self._config.name

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def value(self) -> int:
        """Get the current counter value."""
        return self._cell.value

    @property
    def subscriber_count(self) -> int:
        """Number of live subscriptions."""
        return len(self._subscribers)

    @property
    def is_notifying(self) -> bool:
        """Whether a notification pass is running."""
        return self._notifying_thread is not None

    def get_value(self) -> int:
        """Get the current counter value."""
        return self._cell.value

    def dispatch(self, action: CounterAction) -> None:
        """
        Apply an action and notify every subscriber.

        Calls from other threads wait until the running dispatch, including
        its notification pass, has finished.

        Args:
            action: Increment() or Decrement().

        Raises:
            ReentrantDispatchError: If called from a subscriber callback while
                the store is configured with ReentrancyPolicy.REJECT.
            TypeError: If action is not a counter action.
        """
        if self._notifying_thread == threading.get_ident():
            self._dispatch_reentrant(action)
            return

        with self._lock:
            try:
                self._apply(action)
                while self._deferred:
                    self._apply(self._deferred.popleft())
            except BaseException:
                self._deferred.clear()
                raise

    def increment(self) -> None:
        """Shorthand for dispatch(Increment())."""
        self.dispatch(Increment())

    def decrement(self) -> None:
        """Shorthand for dispatch(Decrement())."""
        self.dispatch(Decrement())

    def subscribe(self, callback: Listener, *, weak: bool = False) -> Subscription:
        """
        Register a zero-argument callback, called after every dispatch.

        A callback registered while subscribers are being notified is first
        called on the next dispatch.

        Args:
            callback: The callback. Read the new value with get_value().
            weak: Hold a bound-method callback weakly, so the subscription
                ends when its owner is garbage collected.

        Returns:
            A Subscription handle for unsubscribe().
        """
        subscription = self._subscribers.add(callback, weak=weak)
        logger.debug("Store %r: subscribed %r", self.name, callback)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """
        Remove a subscription.

        Unknown or already removed handles are ignored.
        """
        if self._subscribers.remove(subscription):
            logger.debug("Store %r: unsubscribed %r", self.name, subscription)
        else:
            logger.debug("Store %r: ignoring unknown subscription %r", self.name, subscription)

    def _apply(self, action: CounterAction) -> None:
        old_value = self._cell.value
        self._cell.set(self._reducer(old_value, action))
        logger.debug(
            "Store %r: %s %d -> %d", self.name, type(action).__name__, old_value, self._cell.value
        )

        # Subscribers added during the pass are not in this snapshot
        subscriptions = self._subscribers.snapshot()
        self._notifying_thread = threading.get_ident()
        try:
            for subscription in subscriptions:
                callback = subscription.resolve() if subscription.active else None
                if callback is not None:
                    callback()
        finally:
            self._notifying_thread = None

    def _dispatch_reentrant(self, action: CounterAction) -> None:
        if not isinstance(action, (Increment, Decrement)):
            raise TypeError(f"Unsupported counter action: {action!r}")

        if self._config.reentrancy is ReentrancyPolicy.DEFER:
            logger.debug("Store %r: deferring %r until notification finishes", self.name, action)
            self._deferred.append(action)
            return

        logger.error("Store %r: rejected re-entrant dispatch of %r", self.name, action)
        raise ReentrantDispatchError(action, self.name)

    def __repr__(self) -> str:
        name = f" name={self.name!r}" if self.name else ""
        return f"Store(value={self._cell.value!r}{name} subscribers={len(self._subscribers)})"


def create_store(
    initial: int = 0,
    *,
    name: str | None = None,
    config: StoreConfig | None = None,
) -> Store:
    """
    Create a new store.

    Args:
        initial: Initial counter value, ignored when config is given.
        name: Optional name for debugging, ignored when config is given.
        config: Full store configuration.

    Returns:
        A Store instance.

    Example:
        ```python
        CounterStore = create_store(name="counter")

        CounterStore.increment()
        CounterStore.get_value()  # 1
        ```
    """
    if config is None:
        config = StoreConfig(initial=initial, name=name)
    return Store(config)
