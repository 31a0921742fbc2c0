"""Type definitions for counter-store."""

from dataclasses import dataclass
from typing import Callable, Protocol, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Increment:
    """Raise the counter by one."""


@dataclass(frozen=True)
class Decrement:
    """Lower the counter by one, never below zero."""


CounterAction = Increment | Decrement

# Zero-argument notification callback
Listener = Callable[[], None]


class Reducer(Protocol):
    """Protocol for reducer functions."""

    def __call__(self, state: int, action: CounterAction) -> int:
        """Process an action and return new state."""
        ...


class ChangeCallback(Protocol[T]):
    """Protocol for value push callbacks used by bindings."""

    def __call__(self, value: T) -> None:
        """Called with the freshly read value."""
        ...

