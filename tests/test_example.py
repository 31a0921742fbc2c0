"""Tests for the shared counter example app."""

import importlib.util
from pathlib import Path

from counter_store import create_store

EXAMPLE = Path(__file__).resolve().parent.parent / "examples" / "counter.py"


def load_example():
    spec = importlib.util.spec_from_file_location("shared_counter_example", EXAMPLE)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestSharedCounterExample:
    """The example wires one injected store into both widgets."""

    def test_no_module_level_store(self):
        module = load_example()
        assert not hasattr(module, "store")

    def test_header_and_page_receive_same_store(self):
        module = load_example()
        store = create_store()

        header = module.CounterHeader(store)
        page = module.CounterPage(store)

        assert header._counter_store is store
        assert page._counter_store is store

    def test_app_keeps_injected_store(self):
        module = load_example()
        store = create_store()

        app = module.SharedCounter(store)

        assert app.counter_store is store
