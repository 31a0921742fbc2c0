"""Tests for the Textual integration."""

from unittest.mock import MagicMock

import pytest

from counter_store import StoreChanged, create_store, effect, use_store
from counter_store.textual import collect_effects, effect_stores


class BaseMockWidget:
    """Base mock widget recording posted messages."""

    def __init__(self):
        self.messages = []

    def post_message(self, message):
        self.messages.append(message)


class TestEffect:
    """Tests for @effect decorator."""

    def test_marks_method(self):
        store = create_store()

        class Widget:
            @effect(store)
            def on_store_change(self, old, new):
                pass

        assert effect_stores(Widget.on_store_change) == (store,)

    def test_multiple_stores(self):
        a = create_store()
        b = create_store()

        class Widget:
            @effect(a, b)
            def on_change(self, old, new):
                pass

        assert effect_stores(Widget.on_change) == (a, b)

    def test_stacked_decorators_accumulate(self):
        a = create_store()
        b = create_store()

        class Widget:
            @effect(a)
            @effect(b)
            def on_change(self, old, new):
                pass

        assert effect_stores(Widget.on_change) == (b, a)

    def test_unmarked_method(self):
        class Widget:
            def on_change(self, old, new):
                pass

        assert effect_stores(Widget.on_change) == ()

    def test_effect_requires_target(self):
        with pytest.raises(ValueError, match="requires at least one store"):

            @effect()
            def no_target(self, old, new):
                pass

    def test_collects_only_matching_store(self):
        a = create_store()
        b = create_store()

        class Widget(BaseMockWidget):
            @effect(a)
            def on_a(self, old, new):
                pass

            @effect(b)
            def on_b(self, old, new):
                pass

        widget = Widget()
        assert [m.__name__ for m in collect_effects(widget, a)] == ["on_a"]


class TestUseStore:
    """Tests for use_store."""

    def test_posts_store_changed(self):
        store = create_store()
        widget = BaseMockWidget()
        use_store(widget, store)

        store.increment()

        assert len(widget.messages) == 1
        message = widget.messages[0]
        assert isinstance(message, StoreChanged)
        assert message.store is store
        assert (message.old_value, message.new_value) == (0, 1)

    def test_calls_effects(self):
        store = create_store(5)
        changes = []

        class Widget(BaseMockWidget):
            @effect(store)
            def on_count_change(self, old: int, new: int):
                changes.append((old, new))

        widget = Widget()
        counter = use_store(widget, store)

        counter.decrement()
        counter.increment()
        counter.increment()

        assert changes == [(5, 4), (4, 5), (5, 6)]

    def test_two_widgets_share_store(self):
        store = create_store()
        header = BaseMockWidget()
        page = BaseMockWidget()
        use_store(header, store)
        page_counter = use_store(page, store)

        page_counter.increment()

        assert [m.new_value for m in header.messages] == [1]
        assert [m.new_value for m in page.messages] == [1]

    def test_detach_stops_messages(self):
        store = create_store()
        widget = MagicMock()
        counter = use_store(widget, store)

        counter.detach()
        store.increment()

        widget.post_message.assert_not_called()
        assert store.subscriber_count == 0
