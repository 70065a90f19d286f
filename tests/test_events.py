"""
Tests for the Event System (Observer Pattern)

Tests the listener contract and the registry's synchronous, fail-fast broadcast.
"""

import pytest
from dataclasses import dataclass
from unittest.mock import Mock

from expense_tracker.events import ListenerRegistry, ModelListener


@dataclass
class SummaryView:
    """Listener with value equality"""
    title: str = "summary"

    def update(self, model):
        pass


class RecordingListener:
    """Listener that records every source it was notified with"""

    def __init__(self, log=None, name=""):
        self.sources = []
        self.log = log
        self.name = name

    def update(self, model):
        self.sources.append(model)
        if self.log is not None:
            self.log.append(self.name)


class TestModelListener:
    """Test the listener protocol"""

    def test_object_with_update_is_listener(self):
        assert isinstance(RecordingListener(), ModelListener)

    def test_object_without_update_is_not_listener(self):
        assert not isinstance(object(), ModelListener)


class TestListenerRegistry:
    """Test the listener registry"""

    def setup_method(self):
        self.registry = ListenerRegistry()
        self.source = object()

    def test_initially_empty(self):
        assert len(self.registry) == 0

    def test_register_and_contains(self):
        listener = RecordingListener()

        assert self.registry.register(listener) is True
        assert listener in self.registry
        assert len(self.registry) == 1

    def test_duplicate_and_none_are_rejected(self):
        listener = RecordingListener()
        self.registry.register(listener)

        assert self.registry.register(listener) is False
        assert self.registry.register(None) is False
        assert len(self.registry) == 1

    def test_equal_state_distinct_listeners_both_register(self):
        assert self.registry.register(RecordingListener()) is True
        assert self.registry.register(RecordingListener()) is True
        assert len(self.registry) == 2

    def test_notify_passes_source_in_order(self):
        order = []
        first = RecordingListener(order, "first")
        second = RecordingListener(order, "second")
        self.registry.register(first)
        self.registry.register(second)

        self.registry.notify(self.source)

        assert order == ["first", "second"]
        assert first.sources == [self.source]
        assert second.sources == [self.source]

    def test_failing_listener_stops_broadcast(self):
        before = Mock()
        failing = Mock()
        failing.update.side_effect = ValueError("bad listener")
        after = Mock()
        for listener in (before, failing, after):
            self.registry.register(listener)

        with pytest.raises(ValueError, match="bad listener"):
            self.registry.notify(self.source)

        before.update.assert_called_once_with(self.source)
        after.update.assert_not_called()

    def test_listener_registered_during_broadcast_waits_for_next(self):
        late = Mock()

        class Registering:
            def update(inner_self, model):
                self.registry.register(late)

        self.registry.register(Registering())

        self.registry.notify(self.source)
        late.update.assert_not_called()

        self.registry.notify(self.source)
        late.update.assert_called_once_with(self.source)

    def test_equal_but_distinct_listeners_are_separate(self):
        first = SummaryView()
        second = SummaryView()
        assert first == second

        assert self.registry.register(first) is True
        assert second not in self.registry
        assert self.registry.register(second) is True
        assert len(self.registry) == 2

    def test_equal_listeners_each_notified(self):
        first = Mock(wraps=SummaryView())
        second = Mock(wraps=SummaryView())
        self.registry.register(first)
        self.registry.register(second)

        self.registry.notify(self.source)

        first.update.assert_called_once_with(self.source)
        second.update.assert_called_once_with(self.source)
