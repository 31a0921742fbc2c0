"""Binding layer - connects one consumer's lifecycle to a Store."""

from __future__ import annotations

from typing import Any

from .store import Store
from .subscribers import Subscription
from .types import ChangeCallback, CounterAction


class Binding:
    """
    Per-consumer adapter over a Store.

    attach() subscribes and records the current value; every change re-reads
    the store and pushes the value to on_change. detach() unsubscribes. Use
    the binding as a context manager to guarantee detach on every exit path.

    Example:
        ```python
        with Binding(store, render) as counter:
            counter.increment()  # render(1) is called
            counter.value  # 1
        store.subscriber_count  # 0
        ```
    """

    __slots__ = ("_store", "_on_change", "_subscription", "_value")

    def __init__(self, store: Store, on_change: ChangeCallback[int] | None = None) -> None:
        self._store = store
        self._on_change = on_change
        self._subscription: Subscription | None = None
        self._value = store.get_value()

    @property
    def store(self) -> Store:
        """Get the store this binding belongs to."""
        return self._store

    @property
    def value(self) -> int:
        """The last value observed by this binding."""
        return self._value

    @property
    def attached(self) -> bool:
        return self._subscription is not None

    def attach(self) -> Binding:
        """Subscribe to the store. Attaching twice is a no-op."""
        if self._subscription is None:
            self._value = self._store.get_value()
            self._subscription = self._store.subscribe(self._sync)
        return self

    def detach(self) -> None:
        """Unsubscribe from the store. Safe to call more than once."""
        subscription, self._subscription = self._subscription, None
        if subscription is not None:
            self._store.unsubscribe(subscription)

    def dispatch(self, action: CounterAction) -> None:
        """Dispatch an action to the store."""
        self._store.dispatch(action)

    def increment(self) -> None:
        self._store.increment()

    def decrement(self) -> None:
        self._store.decrement()

    def _sync(self) -> None:
        self._value = self._store.get_value()
        if self._on_change is not None:
            self._on_change(self._value)

    def __enter__(self) -> Binding:
        return self.attach()

    def __exit__(self, *exc_info: Any) -> None:
        self.detach()

    def __call__(self) -> int:
        """Shorthand to get the last observed value."""
        return self._value

    def __repr__(self) -> str:
        state = "attached" if self.attached else "detached"
        return f"Binding({self._value!r} {state} store={self._store.name!r})"


def bind(store: Store, on_change: ChangeCallback[int] | None = None) -> Binding:
    """
    Create and attach a binding.

    Args:
        store: The store to observe.
        on_change: Called with the new value after every dispatch.

    Returns:
        An attached Binding. Call detach() when the consumer goes away.
    """
    return Binding(store, on_change).attach()
