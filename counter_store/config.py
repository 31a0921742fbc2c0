"""Store configuration."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ReentrancyPolicy(str, Enum):
    """What a store does with a dispatch issued from inside a notification pass."""

    REJECT = "reject"
    DEFER = "defer"


class StoreConfig(BaseModel):
    """
    Settings for a Store.

    Attributes:
        initial: Starting counter value.
        name: Optional name for debugging and log records.
        reentrancy: Policy applied to dispatches made by subscribers.

    Example:
        ```python
        config = StoreConfig(name="clicks", reentrancy="defer")
        store = create_store(config=config)
        ```
    """

    model_config = ConfigDict(frozen=True)

    initial: int = Field(default=0, ge=0)
    name: str | None = None
    reentrancy: ReentrancyPolicy = ReentrancyPolicy.REJECT
