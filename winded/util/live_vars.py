"""Runtime-tunable stamina rates and per-tick stamina metrics.

A debug console or overlay reads and writes tunables by name and reads back
how much stamina characters have been burning and recovering. Nothing is
registered until ``register_stamina_live_variables`` is called, and the tick
drivers skip recording for unregistered metrics.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from winded.types import FloatRange

from .metrics import RecentSamples


@dataclass
class LiveVariable:
    """A tunable number read and written through callbacks."""

    name: str
    getter: Callable[[], float]
    setter: Callable[[float], None]
    value_range: FloatRange
    description: str = ""

    def get_value(self) -> float:
        return self.getter()

    def set_value(self, value: float) -> None:
        """Set the variable.

        Raises:
            ValueError: If ``value`` falls outside ``value_range``.
        """
        low, high = self.value_range
        if not low <= value <= high:
            raise ValueError(
                f"Live variable '{self.name}' must be within "
                f"[{low}, {high}], got {value}"
            )
        self.setter(value)


@dataclass
class Metric:
    """A named stream of recent samples."""

    name: str
    description: str = ""
    samples: RecentSamples = field(default_factory=RecentSamples)


class LiveVariableRegistry:
    """Tunables and metrics, keyed by dotted name (``"stamina.base_burn_rate"``)."""

    def __init__(self) -> None:
        self._variables: dict[str, LiveVariable] = {}
        self._metrics: dict[str, Metric] = {}

    def register(
        self,
        name: str,
        getter: Callable[[], float],
        setter: Callable[[float], None],
        *,
        value_range: FloatRange,
        description: str = "",
    ) -> LiveVariable:
        self._ensure_unused(name)
        variable = LiveVariable(name, getter, setter, value_range, description)
        self._variables[name] = variable
        return variable

    def register_metric(
        self, name: str, description: str = "", capacity: int = 1000
    ) -> Metric:
        self._ensure_unused(name)
        metric = Metric(name, description, RecentSamples(capacity))
        self._metrics[name] = metric
        return metric

    def get_variable(self, name: str) -> LiveVariable | None:
        return self._variables.get(name)

    def get_metric(self, name: str) -> Metric | None:
        return self._metrics.get(name)

    def record_metric(self, name: str, value: float) -> None:
        """Record a sample to a registered metric.

        Raises:
            KeyError: If no metric named ``name`` is registered.
        """
        metric = self._metrics.get(name)
        if metric is None:
            raise KeyError(f"Metric '{name}' is not registered")
        metric.samples.record(value)

    def clear(self) -> None:
        self._variables.clear()
        self._metrics.clear()

    def _ensure_unused(self, name: str) -> None:
        if name in self._variables or name in self._metrics:
            raise ValueError(f"Live variable '{name}' already registered")


# Global registry instance used throughout the application
live_variable_registry = LiveVariableRegistry()
