from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from winded import colors, config

if TYPE_CHECKING:
    from .core import Character


@dataclass
class StatusEffect(abc.ABC):
    """Base class for temporary conditions that affect characters.

    Each effect counts down once per turn and removes itself when its
    ``duration`` reaches zero.

    Attributes
    ----------
    name:
        Human readable name used when displaying the effect.
    duration:
        Remaining number of **turns** this effect stays active. Decremented in
        :meth:`StatusEffectsComponent.update_turn`. ``-1`` means indefinite:
        the effect must be removed manually.
    description:
        Short explanation shown in the UI.
    can_stack:
        Whether multiple instances of this effect may exist on the same
        character. If ``False`` (the default), applying another instance
        refreshes the existing one instead.
    """

    name: str
    duration: int
    description: str = ""
    can_stack: bool = False
    display_color: colors.Color = field(default=colors.LIGHT_GREY)

    @abc.abstractmethod
    def apply_on_start(self, character: Character) -> None:
        """Called when the effect is first applied."""

    @abc.abstractmethod
    def apply_turn_effect(self, character: Character) -> None:
        """Called each turn while the effect is active."""

    @abc.abstractmethod
    def remove_effect(self, character: Character) -> None:
        """Called when the effect is removed or expires."""

    def should_remove(self, character: Character) -> bool:
        """Return ``True`` if the effect should be removed this turn."""
        return self.duration == 0

    def refresh(self, other: StatusEffect) -> None:
        """Merge a reapplication of this effect into the existing instance.

        The remaining duration is topped up to the new one; it never shrinks.
        An indefinite effect stays indefinite.
        """
        if self.duration < 0:
            return
        if other.duration < 0 or other.duration > self.duration:
            self.duration = other.duration


class WindedEffect(StatusEffect):
    """Out of breath after trying to spend more stamina than was left.

    While winded a character recovers stamina at a tenth of the normal rate
    and cannot break into a run. Only overflow depletion causes it; spending
    exactly the last point of stamina does not.
    """

    def __init__(self, duration: int = config.WINDED_DURATION_TURNS) -> None:
        super().__init__(
            name="Winded",
            duration=duration,
            description="Stamina recovery slowed, cannot run",
            display_color=colors.LIGHT_BLUE,
        )

    def apply_on_start(self, character: Character) -> None:
        pass

    def apply_turn_effect(self, character: Character) -> None:
        pass

    def remove_effect(self, character: Character) -> None:
        pass
