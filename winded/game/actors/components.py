"""
Component system for character capabilities.

A character is composed of small components that each own one concern,
rather than one class that tracks everything. The stamina ledger only talks
to the other components through the narrow capability protocols below, so it
can be driven by any character type that offers them.

Components:
    StatsComponent: Derived values the stamina system reads (maximum stamina)
    HealthComponent: Pain accumulated from straining under a load
    TraitsComponent: Permanent traits such as a bad back
    StatusEffectsComponent: Temporary effects such as being winded
    StaminaComponent: The stamina ledger itself

Usage:
    Components are created and composed together in Character.__init__():

    self.stats = StatsComponent(max_stamina=10000)
    self.status_effects = StatusEffectsComponent(self)
    self.stamina = StaminaComponent(self.stats, self.status_effects, owner=self)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from winded import config
from winded.events import WindedEvent, publish_event
from winded.game.enums import LedgerOutcome, Trait
from winded.util.live_vars import LiveVariableRegistry, live_variable_registry

from .status_effects import StatusEffect, WindedEffect

if TYPE_CHECKING:
    from winded.types import StaminaDelta, StaminaFraction, StaminaPoints, Turns

    from .core import Character

logger = logging.getLogger(__name__)


# =============================================================================
# CAPABILITY PROTOCOLS
# =============================================================================


class StatusCarrier(Protocol):
    """Something that can hold status effects."""

    def has_status_effect(self, effect_type: type[StatusEffect]) -> bool: ...

    def apply_status_effect(self, effect: StatusEffect) -> None: ...

    def remove_status_effect(
        self, effect_type: type[StatusEffect]
    ) -> list[StatusEffect]: ...


class PainReceiver(Protocol):
    """Something that can be hurt by overexertion."""

    def add_pain(self, amount: int) -> None: ...


class TraitHolder(Protocol):
    """Something that may carry permanent traits."""

    def has_trait(self, trait: Trait) -> bool: ...


# =============================================================================
# TUNING
# =============================================================================


@dataclass
class StaminaTuning:
    """Tunable rates one character's stamina runs on.

    Starts from :mod:`winded.config` and may be changed at runtime through the
    live variables registered by :func:`register_stamina_live_variables`.
    """

    base_burn_rate: int = config.PLAYER_BASE_STAMINA_BURN_RATE
    base_regen_rate: float = config.PLAYER_BASE_STAMINA_REGEN_RATE
    moves_per_turn: int = config.MOVES_PER_TURN
    winded_duration: Turns = config.WINDED_DURATION_TURNS
    pain_per_strain: int = config.PAIN_PER_STRAIN

    def __post_init__(self) -> None:
        if self.base_burn_rate < 0:
            raise ValueError(
                f"base_burn_rate must be non-negative, got {self.base_burn_rate}"
            )
        if self.base_regen_rate < 0:
            raise ValueError(
                f"base_regen_rate must be non-negative, got {self.base_regen_rate}"
            )
        if self.moves_per_turn <= 0:
            raise ValueError(
                f"moves_per_turn must be positive, got {self.moves_per_turn}"
            )
        if self.winded_duration < 0:
            raise ValueError(
                f"winded_duration must be non-negative, got {self.winded_duration}"
            )
        if self.pain_per_strain < 0:
            raise ValueError(
                f"pain_per_strain must be non-negative, got {self.pain_per_strain}"
            )


def register_stamina_live_variables(
    tuning: StaminaTuning,
    registry: LiveVariableRegistry = live_variable_registry,
) -> None:
    """Expose ``tuning`` as live variables plus per-turn stamina metrics."""

    def set_burn_rate(value: float) -> None:
        tuning.base_burn_rate = int(value)

    def set_regen_rate(value: float) -> None:
        tuning.base_regen_rate = float(value)

    registry.register(
        "stamina.base_burn_rate",
        getter=lambda: tuning.base_burn_rate,
        setter=set_burn_rate,
        description="Stamina burned per turn of unburdened walking.",
        value_range=(0.0, 200.0),
    )
    registry.register(
        "stamina.base_regen_rate",
        getter=lambda: tuning.base_regen_rate,
        setter=set_regen_rate,
        description="Stamina recovered per turn while resting.",
        value_range=(0.0, 200.0),
    )
    registry.register_metric(
        "stamina.burn_per_turn", description="Stamina burned per tick of movement."
    )
    registry.register_metric(
        "stamina.regen_per_turn", description="Stamina recovered per tick of rest."
    )


# =============================================================================
# COMPONENTS
# =============================================================================


class StatsComponent:
    """Derived character values the stamina system consumes."""

    def __init__(self, max_stamina: int = config.PLAYER_MAX_STAMINA) -> None:
        if max_stamina < 0:
            raise ValueError(f"max_stamina must be non-negative, got {max_stamina}")
        self._max_stamina = max_stamina

    @property
    def stamina_max(self) -> int:
        return self._max_stamina


class HealthComponent:
    """Tracks pain. Only the pain counter matters to the stamina system."""

    def __init__(self) -> None:
        self.pain = 0

    def add_pain(self, amount: int) -> None:
        """Increase pain by ``amount``."""
        if amount < 0:
            raise ValueError(f"Pain increase must be non-negative, got {amount}")
        self.pain += amount


class TraitsComponent:
    """The set of permanent traits a character has."""

    def __init__(self, traits: set[Trait] | None = None) -> None:
        self._traits: set[Trait] = set(traits) if traits else set()

    def has_trait(self, trait: Trait) -> bool:
        return trait in self._traits

    def toggle_trait(self, trait: Trait) -> bool:
        """Add ``trait`` if missing, otherwise remove it. Return the new state."""
        if trait in self._traits:
            self._traits.remove(trait)
            return False
        self._traits.add(trait)
        return True


class StatusEffectsComponent:
    """Manage a character's temporary status effects.

    The owning character is passed in at construction so lifecycle hooks on
    :class:`StatusEffect` instances can reference it without every method
    needing it as a parameter.
    """

    def __init__(self, character: Any = None) -> None:
        self.character = character
        self._status_effects: list[StatusEffect] = []

    def apply_status_effect(self, effect: StatusEffect) -> None:
        """Add a status effect, or refresh the existing one if it can't stack."""
        if not effect.can_stack:
            existing = self.get_status_effects_by_type(type(effect))
            if existing:
                existing[0].refresh(effect)
                return
        self._status_effects.append(effect)
        effect.apply_on_start(self.character)

    def remove_status_effect(
        self, effect_type: type[StatusEffect]
    ) -> list[StatusEffect]:
        """Remove effects of the given type and call their cleanup."""
        removed_effects: list[StatusEffect] = []
        for effect in self._status_effects[:]:
            if isinstance(effect, effect_type):
                self._status_effects.remove(effect)
                effect.remove_effect(self.character)
                removed_effects.append(effect)
        return removed_effects

    def has_status_effect(self, effect_type: type[StatusEffect]) -> bool:
        """Check if any status effect of the given type exists."""
        return any(isinstance(effect, effect_type) for effect in self._status_effects)

    def get_status_effects_by_type(
        self, effect_type: type[StatusEffect]
    ) -> list[StatusEffect]:
        """Return all status effects of the given type."""
        return [e for e in self._status_effects if isinstance(e, effect_type)]

    def get_all_status_effects(self) -> list[StatusEffect]:
        """Return a copy of all active status effects."""
        return self._status_effects.copy()

    def update_turn(self) -> None:
        """Apply per-turn logic and handle expiration for all effects."""
        for effect in self._status_effects[:]:
            effect.apply_turn_effect(self.character)
            if effect.duration > 0:
                effect.duration -= 1
            if effect.should_remove(self.character):
                effect.remove_effect(self.character)
                self._status_effects.remove(effect)


def triggers_winded(outcome: LedgerOutcome) -> bool:
    """Return ``True`` if a ledger outcome should leave the character winded.

    Only overflowing past zero counts as overexertion. Landing on exactly zero
    does not.
    """
    return outcome == LedgerOutcome.CLAMPED_LOW_OVERFLOW


class StaminaComponent:
    """The stamina ledger: one integer bounded by ``[0, stamina_max]``.

    All gameplay changes go through :meth:`apply_delta`, which clamps to the
    rails and decides whether the character becomes winded. :meth:`set_stamina`
    is a raw setter for initialization and never touches status effects.
    """

    def __init__(
        self,
        stats: StatsComponent,
        status_effects: StatusCarrier,
        tuning: StaminaTuning | None = None,
        owner: Character | None = None,
    ) -> None:
        self.stats = stats
        self.status_effects = status_effects
        self.tuning = tuning if tuning is not None else StaminaTuning()
        self.owner = owner
        self._stamina = self.stats.stamina_max

    @property
    def stamina(self) -> StaminaPoints:
        return self._stamina

    @property
    def stamina_max(self) -> StaminaPoints:
        return self.stats.stamina_max

    @property
    def stamina_fraction(self) -> StaminaFraction:
        """Remaining stamina as a fraction of the maximum, in ``[0.0, 1.0]``."""
        if self.stamina_max == 0:
            return 0.0
        return self._stamina / self.stamina_max

    @property
    def is_exhausted(self) -> bool:
        return self._stamina == 0

    def set_stamina(self, value: StaminaPoints) -> None:
        """Set stamina directly, clamped into ``[0, stamina_max]``.

        Used for initialization and scenario setup. Unlike :meth:`apply_delta`
        this never adds or removes the winded status.
        """
        if not isinstance(value, int):
            raise TypeError(f"Stamina must be an integer, got {value!r}")
        self._stamina = max(0, min(self.stamina_max, value))

    def apply_delta(self, delta: StaminaDelta) -> LedgerOutcome:
        """Add a signed ``delta`` to stamina and return what happened.

        - Above the maximum: capped, no status change.
        - Exactly zero: stored as zero, no status change.
        - Below zero: raised to zero and the character becomes winded.
        - Anything else is stored as-is.
        """
        if not isinstance(delta, int):
            raise TypeError(f"Stamina delta must be an integer, got {delta!r}")

        new_value = self._stamina + delta
        if new_value > self.stamina_max:
            self._stamina = self.stamina_max
            outcome = LedgerOutcome.CLAMPED_HIGH
        elif new_value == 0:
            self._stamina = 0
            outcome = LedgerOutcome.CLAMPED_LOW_EXACT
        elif new_value < 0:
            self._stamina = 0
            outcome = LedgerOutcome.CLAMPED_LOW_OVERFLOW
        else:
            self._stamina = new_value
            outcome = LedgerOutcome.UNCHANGED

        if triggers_winded(outcome):
            self._become_winded(overflow=-new_value)
        return outcome

    def _become_winded(self, overflow: int) -> None:
        self.status_effects.apply_status_effect(
            WindedEffect(duration=self.tuning.winded_duration)
        )
        logger.debug(f"Overexerted by {overflow} stamina, now winded")
        publish_event(WindedEvent(character=self.owner, overflow=overflow))
