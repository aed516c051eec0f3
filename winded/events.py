"""Global event bus for stamina notifications.

The stamina system reports what happened to a character (becoming winded,
straining under a load) by publishing events here. Whatever sits on top, be it
a message log, a sound system or a test, subscribes to the events it cares
about.

USE FOR:
- Messages to the message log
- Notifying other systems that a character became winded or felt pain

DO NOT USE FOR:
- Core stamina mechanics (burn, regen, ledger updates)
- Anything that needs a return value or synchronous confirmation
- Error handling or exception propagation

The bus is fire-and-forget and every handler runs immediately.
"""

import logging
from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass
from typing import Any

from winded import colors

logger = logging.getLogger(__name__)


@dataclass
class GameEvent:
    """Base class for all game events."""

    pass


@dataclass
class MessageEvent(GameEvent):
    """Event for adding messages to the message log."""

    text: str
    color: colors.Color = colors.WHITE


@dataclass
class WindedEvent(GameEvent):
    """A character overexerted themselves and became (or stayed) winded.

    Attributes:
        character: The character who ran out of breath.
        overflow: How much stamina was requested beyond what was left.
    """

    character: Any  # Avoid circular imports
    overflow: int


@dataclass
class StrainEvent(GameEvent):
    """A character felt pain from moving under too much weight."""

    character: Any
    pain: int
    overburden_ratio: float


class EventBus:
    """Simple event bus for publish/subscribe pattern."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable]] = {}

    def subscribe(self, event_type: type, handler: Callable) -> None:
        """Subscribe a handler to an event type."""
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        """Unsubscribe a handler from an event type."""
        if event_type in self._handlers:
            with suppress(ValueError):
                self._handlers[event_type].remove(handler)

    def publish(self, event: GameEvent) -> None:
        """Publish an event to all subscribed handlers."""
        event_type = type(event)
        if event_type in self._handlers:
            # Copy the handler list to allow safe subscribe/unsubscribe during dispatch
            for handler in list(self._handlers[event_type]):
                try:
                    handler(event)
                except Exception:
                    logger.exception(f"Error handling event {event_type.__name__}")


# Global event bus instance
_global_event_bus = EventBus()


def subscribe_to_event(event_type: type, handler: Callable) -> None:
    """Subscribe to an event type globally."""
    _global_event_bus.subscribe(event_type, handler)


def unsubscribe_from_event(event_type: type, handler: Callable) -> None:
    """Unsubscribe from an event type globally."""
    _global_event_bus.unsubscribe(event_type, handler)


def publish_event(event: GameEvent) -> None:
    """Publish an event globally."""
    _global_event_bus.publish(event)


def reset_event_bus_for_testing() -> None:
    """Reset the global event bus. Use only in tests."""
    global _global_event_bus
    _global_event_bus = EventBus()
