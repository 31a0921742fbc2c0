"""The counter reducer."""

from __future__ import annotations

from .types import CounterAction, Decrement, Increment


def counter_reducer(state: int, action: CounterAction) -> int:
    """
    Compute the next counter value.

    Increment has no upper bound. Decrement clamps at zero.

    Raises:
        TypeError: If action is not one of the counter actions.
    """
    match action:
        case Increment():
            return state + 1
        case Decrement():
            return state - 1 if state > 0 else 0
    raise TypeError(f"Unsupported counter action: {action!r}")
