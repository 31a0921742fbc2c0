"""
Counter Store - a shared, observable counter with reducer-style updates.

One Store instance is handed to every consumer that shows or changes the
counter. Consumers bind to it, read the current value, and call increment()
or decrement(); every other bound consumer is told about the change
synchronously.

Key Features:
- Store: get_value, dispatch, increment, decrement, subscribe, unsubscribe
- counter_reducer: pure (value, action) -> value, clamped at zero
- Binding: attach/detach lifecycle for one consumer, usable as a context manager
- use_store / @effect: Textual widgets bound through messages and effects

Example:
    ```python
    from textual.app import App, ComposeResult
    from textual.widgets import Button, Static
    from counter_store import StoreChanged, create_store, use_store

    store = create_store(name="counter")

    class Counter(App):
        def compose(self) -> ComposeResult:
            yield Static(id="count")
            yield Button("+1")

        def on_mount(self) -> None:
            self.counter = use_store(self, store)

        def on_unmount(self) -> None:
            self.counter.detach()

        def on_store_changed(self, event: StoreChanged) -> None:
            self.query_one("#count", Static).update(f"Count: {event.new_value}")

        def on_button_pressed(self, event: Button.Pressed) -> None:
            self.counter.increment()
    ```
"""

# Actions and types
from .types import (
    Increment,
    Decrement,
    CounterAction,
    Listener,
    Reducer,
    ChangeCallback,
)

# Errors
from .errors import (
    CounterStoreError,
    InvariantViolation,
    ReentrantDispatchError,
)

# Configuration
from .config import (
    ReentrancyPolicy,
    StoreConfig,
)

# Core
from .reducer import counter_reducer
from .state import CounterState, StateCell
from .subscribers import Subscription, SubscriberRegistry
from .store import Store, create_store

# Binding layer
from .binding import Binding, bind

# Textual integration
from .textual import StoreChanged, effect, use_store

__version__ = "0.1.0"

__all__ = [
    # Types
    "Increment",
    "Decrement",
    "CounterAction",
    "Listener",
    "Reducer",
    "ChangeCallback",
    # Errors
    "CounterStoreError",
    "InvariantViolation",
    "ReentrantDispatchError",
    # Config
    "ReentrancyPolicy",
    "StoreConfig",
    # Core
    "counter_reducer",
    "CounterState",
    "StateCell",
    "Subscription",
    "SubscriberRegistry",
    "Store",
    "create_store",
    # Binding
    "Binding",
    "bind",
    # Textual
    "StoreChanged",
    "effect",
    "use_store",
]
