"""
Shared Counter Example - a header and a page bound to one store.

Neither widget knows about the other. Both render the same counter because
they are bound to the same Store instance.
"""

from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from counter_store import Binding, Store, StoreChanged, create_store, use_store


class CounterHeader(Static):
    """Shows the counter at the top of the screen."""

    counter: Binding

    def __init__(self, store: Store, **kwargs) -> None:
        super().__init__(**kwargs)
        self._counter_store = store

    def on_mount(self) -> None:
        self.counter = use_store(self, self._counter_store)
        self.update(f"Header: {self.counter.value}")

    def on_unmount(self) -> None:
        self.counter.detach()

    def on_store_changed(self, event: StoreChanged) -> None:
        self.update(f"Header: {event.new_value}")


class CounterPage(Vertical):
    """Shows the counter with buttons and a message at every multiple of ten."""

    counter: Binding

    def __init__(self, store: Store, **kwargs) -> None:
        super().__init__(**kwargs)
        self._counter_store = store

    def compose(self) -> ComposeResult:
        yield Static("", id="page-count")
        yield Static("", id="milestone")
        with Horizontal():
            yield Button("-", id="dec", variant="error")
            yield Button("+", id="inc", variant="success")

    def on_mount(self) -> None:
        self.counter = use_store(self, self._counter_store)
        self._update_display(self.counter.value)

    def on_unmount(self) -> None:
        self.counter.detach()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        match event.button.id:
            case "inc":
                self.counter.increment()
            case "dec":
                self.counter.decrement()

    def on_store_changed(self, event: StoreChanged) -> None:
        self._update_display(event.new_value)

    def _update_display(self, value: int) -> None:
        self.query_one("#page-count", Static).update(f"Count: {value}")
        milestone = f"{value} reached!" if value and value % 10 == 0 else ""
        self.query_one("#milestone", Static).update(milestone)


class SharedCounter(App):
    """Counter app with two consumers of one store."""

    CSS = """
    Screen {
        align: center middle;
    }

    CounterHeader {
        width: 100%;
        height: 3;
        text-align: center;
        text-style: bold;
        background: $primary;
    }

    #page-count {
        width: 100%;
        text-align: center;
    }

    #milestone {
        width: 100%;
        text-align: center;
        color: $warning;
    }

    Horizontal {
        width: 100%;
        height: auto;
        align: center middle;
    }

    Button {
        margin: 0 1;
    }
    """

    def __init__(self, store: Store) -> None:
        super().__init__()
        self.counter_store = store

    def compose(self) -> ComposeResult:
        yield CounterHeader(self.counter_store)
        yield CounterPage(self.counter_store)


if __name__ == "__main__":
    SharedCounter(create_store(name="counter")).run()
