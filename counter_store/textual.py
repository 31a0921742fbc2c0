"""Textual integration - bind widgets to a Store via messages and effects."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from textual.message import Message
from textual.widget import Widget

from .binding import Binding, bind
from .store import Store

F = TypeVar("F", bound=Callable[..., Any])

# Stores an effect method reacts to, kept on the function object
EFFECT_STORES_ATTR = "__counter_store_effects__"


class StoreChanged(Message):
    """Message posted to a bound widget after every dispatch."""

    def __init__(self, store: Store, old_value: int, new_value: int) -> None:
        super().__init__()
        self.store = store
        self.old_value = old_value
        self.new_value = new_value


def effect_stores(method: Any) -> tuple[Store, ...]:
    """Get the stores a method was marked with by @effect."""
    return getattr(method, EFFECT_STORES_ATTR, ())


def effect(*stores: Store) -> Callable[[F], F]:
    """
    Decorator to mark a widget method as an effect of store changes.

    The method is called as method(old, new) once use_store() has bound the
    widget to one of the given stores.

    Example:
        ```python
        class Header(Static):
            def on_mount(self):
                self.counter = use_store(self, store)

            def on_unmount(self):
                self.counter.detach()

            @effect(store)
            def on_count_change(self, old: int, new: int):
                self.update(f"Count: {new}")
        ```
    """
    if not stores:
        raise ValueError("@effect requires at least one store")

    def decorator(method: F) -> F:
        setattr(method, EFFECT_STORES_ATTR, (*effect_stores(method), *stores))
        return method

    return decorator


def collect_effects(widget: Any, store: Store) -> list[Callable[[int, int], None]]:
    """Find the bound @effect methods of a widget that target a store."""
    methods: list[Callable[[int, int], None]] = []

    for attr_name in dir(type(widget)):
        if attr_name.startswith("_"):
            continue

        class_attr = getattr(type(widget), attr_name, None)
        if not any(s is store for s in effect_stores(class_attr)):
            continue

        method = getattr(widget, attr_name)
        if callable(method):
            methods.append(method)

    return methods


def use_store(widget: Widget, store: Store) -> Binding:
    """
    Bind a widget to a store.

    The widget receives a StoreChanged message after every dispatch, and its
    @effect(store) methods are called with the old and new value.

    Args:
        widget: The consuming widget.
        store: The shared store.

    Returns:
        An attached Binding. Detach it in the widget's on_unmount.

    Example:
        ```python
        class Page(Widget):
            def on_mount(self):
                self.counter = use_store(self, store)

            def on_unmount(self):
                self.counter.detach()

            def on_store_changed(self, event: StoreChanged) -> None:
                self.refresh()
        ```
    """
    effects = collect_effects(widget, store)
    previous = store.get_value()

    def on_change(value: int) -> None:
        nonlocal previous
        old_value, previous = previous, value
        widget.post_message(StoreChanged(store, old_value, value))
        for method in effects:
            method(old_value, value)

    return bind(store, on_change)
