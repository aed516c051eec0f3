"""Tests for the event bus system."""

import logging

import pytest

from winded.events import (
    EventBus,
    GameEvent,
    MessageEvent,
    WindedEvent,
    publish_event,
    subscribe_to_event,
    unsubscribe_from_event,
)


class TestEventBus:
    """Tests for the EventBus class."""

    def test_handler_exception_does_not_crash_event_bus(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A failing handler is logged and the remaining handlers still run."""
        bus = EventBus()
        handler_calls: list[str] = []

        def failing_handler(event: GameEvent) -> None:
            handler_calls.append("failing")
            raise ValueError("Handler failed!")

        def succeeding_handler(event: GameEvent) -> None:
            handler_calls.append("succeeding")

        bus.subscribe(MessageEvent, failing_handler)
        bus.subscribe(MessageEvent, succeeding_handler)

        with caplog.at_level(logging.ERROR):
            bus.publish(MessageEvent(text="Test message"))

        assert handler_calls == ["failing", "succeeding"]
        assert "Error handling event MessageEvent" in caplog.text

    def test_handlers_only_see_their_event_type(self) -> None:
        bus = EventBus()
        seen: list[GameEvent] = []
        bus.subscribe(WindedEvent, seen.append)

        bus.publish(MessageEvent(text="ignored"))
        bus.publish(WindedEvent(character=None, overflow=3))

        assert len(seen) == 1
        assert isinstance(seen[0], WindedEvent)

    def test_unsubscribe_unknown_handler_is_ignored(self) -> None:
        bus = EventBus()
        bus.unsubscribe(MessageEvent, print)
        bus.subscribe(MessageEvent, print)
        bus.unsubscribe(MessageEvent, print)
        bus.unsubscribe(MessageEvent, print)

    def test_handler_may_unsubscribe_during_dispatch(self) -> None:
        bus = EventBus()
        calls: list[str] = []

        def once(event: GameEvent) -> None:
            calls.append("once")
            bus.unsubscribe(MessageEvent, once)

        bus.subscribe(MessageEvent, once)
        bus.publish(MessageEvent(text="a"))
        bus.publish(MessageEvent(text="b"))

        assert calls == ["once"]


class TestGlobalEventBus:
    """Tests for the global event bus API."""

    def test_global_subscribe_and_publish(self) -> None:
        received_events: list[MessageEvent] = []
        subscribe_to_event(MessageEvent, received_events.append)

        publish_event(MessageEvent(text="Hello"))

        assert len(received_events) == 1
        assert received_events[0].text == "Hello"

    def test_global_unsubscribe(self) -> None:
        received_events: list[MessageEvent] = []
        subscribe_to_event(MessageEvent, received_events.append)
        unsubscribe_from_event(MessageEvent, received_events.append)

        publish_event(MessageEvent(text="Hello"))

        assert received_events == []

    def test_global_handler_exception_is_handled(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        def bad_handler(event: MessageEvent) -> None:
            raise Exception("Oops!")

        subscribe_to_event(MessageEvent, bad_handler)

        with caplog.at_level(logging.ERROR):
            publish_event(MessageEvent(text="Test"))

        assert "Error handling event MessageEvent" in caplog.text
