"""Exceptions raised by counter-store."""

from __future__ import annotations

from typing import Any


class CounterStoreError(Exception):
    """Base class for counter-store errors."""


class InvariantViolation(CounterStoreError):
    """Raised when the state cell would hold a negative value."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Counter value must be a non-negative integer, got {value!r}")


class ReentrantDispatchError(CounterStoreError):
    """Raised when a subscriber dispatches while a notification pass is running."""

    def __init__(self, action: Any, store_name: str | None = None) -> None:
        self.action = action
        self.store_name = store_name
        name = store_name or "unnamed"
        super().__init__(
            f"Cannot dispatch {action!r} to store '{name}' while it is notifying "
            f"subscribers. Dispatch from an event handler instead of a change callback."
        )
