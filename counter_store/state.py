"""The state cell holding the counter value."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvariantViolation


class CounterState(BaseModel):
    """Validated snapshot of the counter."""

    model_config = ConfigDict(frozen=True, strict=True)

    value: int = Field(default=0, ge=0)


class StateCell:
    """
    A mutable cell holding one non-negative integer.

    Every write goes through CounterState validation, so the cell can never
    hold a negative value. Only the Store writes to it.

    Example:
        ```python
        cell = StateCell(0)
        cell.set(3)
        cell.value  # 3
        cell.set(-1)  # raises InvariantViolation, value stays 3
        ```
    """

    __slots__ = ("_state", "_name")

    def __init__(self, initial_value: int = 0, *, name: str | None = None) -> None:
        """
        Initialize a new state cell.

        Args:
            initial_value: The initial counter value.
            name: Optional name for debugging purposes.

        Raises:
            InvariantViolation: If initial_value is not a non-negative int.
        """
        self._state = self._validate(initial_value)
        self._name = name

    @property
    def value(self) -> int:
        """Get the current value."""
        return self._state.value

    def get(self) -> int:
        """Get the current value."""
        return self._state.value

    @property
    def snapshot(self) -> CounterState:
        """Get the current validated snapshot."""
        return self._state

    def set(self, new_value: int) -> None:
        """
        Replace the value.

        Raises:
            InvariantViolation: If new_value is not a non-negative int.
        """
        self._state = self._validate(new_value)

    @staticmethod
    def _validate(value: int) -> CounterState:
        try:
            return CounterState(value=value)
        except ValidationError as exc:
            raise InvariantViolation(value) from exc

    def __repr__(self) -> str:
        name = f" name={self._name!r}" if self._name else ""
        return f"StateCell({self._state.value!r}{name})"
