from __future__ import annotations

from collections.abc import Iterator

import pytest

from winded.events import reset_event_bus_for_testing
from winded.util import rng
from winded.util.live_vars import live_variable_registry


@pytest.fixture(autouse=True)
def clear_live_variable_registry() -> Iterator[None]:
    """Clear the global live variable registry before and after each test."""
    live_variable_registry.clear()
    yield
    live_variable_registry.clear()


@pytest.fixture(autouse=True)
def fresh_event_bus() -> Iterator[None]:
    """Give each test its own event bus so subscriptions don't leak."""
    reset_event_bus_for_testing()
    yield
    reset_event_bus_for_testing()


@pytest.fixture(autouse=True)
def seeded_rng() -> None:
    """Make every stamina roll deterministic."""
    rng.init(12345)
