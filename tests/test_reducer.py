"""Tests for the counter reducer."""

import pytest

from counter_store import Decrement, Increment, counter_reducer


class TestCounterReducer:
    """Tests for counter_reducer."""

    def test_increment(self):
        assert counter_reducer(0, Increment()) == 1
        assert counter_reducer(41, Increment()) == 42

    def test_increment_has_no_upper_bound(self):
        big = 2**64
        assert counter_reducer(big, Increment()) == big + 1

    def test_decrement(self):
        assert counter_reducer(5, Decrement()) == 4
        assert counter_reducer(1, Decrement()) == 0

    def test_decrement_clamps_at_zero(self):
        assert counter_reducer(0, Decrement()) == 0

    def test_is_pure(self):
        action = Increment()
        assert counter_reducer(3, action) == counter_reducer(3, action)

    def test_rejects_unknown_action(self):
        with pytest.raises(TypeError, match="Unsupported counter action"):
            counter_reducer(0, "increment")

    def test_actions_are_immutable(self):
        with pytest.raises(AttributeError):
            Increment().amount = 2

    def test_actions_compare_by_value(self):
        assert Increment() == Increment()
        assert Increment() != Decrement()
