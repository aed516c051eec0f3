"""
A character with a stamina pool, and the per-tick stamina drivers.

The surrounding game loop calls :meth:`Character.burn_move_stamina` for a tick
spent moving and :meth:`Character.update_stamina` for a tick spent resting,
then :meth:`Character.update_turn` once per turn to age status effects.

Carried weight, weight capacity and mouth encumbrance are plain values here.
Whatever models inventory and equipment is expected to keep them current.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from winded import colors
from winded.events import MessageEvent, StrainEvent, publish_event
from winded.game import stamina as formulas
from winded.game.enums import LedgerOutcome, MovementMode, Trait
from winded.util import rng
from winded.util.live_vars import live_variable_registry

from .components import (
    HealthComponent,
    StaminaComponent,
    StaminaTuning,
    StatsComponent,
    StatusEffectsComponent,
    TraitsComponent,
)
from .status_effects import WindedEffect

if TYPE_CHECKING:
    from winded.types import Encumbrance, Moves, OverburdenRatio, StaminaPoints

    from .components import PainReceiver, TraitHolder

logger = logging.getLogger(__name__)

_pain_rng = rng.get("stamina.pain")
_rounding_rng = rng.get("stamina.rounding")


class Character:
    """A character whose movement is limited by stamina.

    All the actual functionality comes from the components; this class wires
    them together and feeds the pure stamina formulas with the character's
    current state.
    """

    def __init__(
        self,
        name: str,
        max_stamina: int | None = None,
        tuning: StaminaTuning | None = None,
        carried_weight: float = 0.0,
        weight_capacity: float = 1.0,
        mouth_encumbrance: Encumbrance = 0,
        traits: set[Trait] | None = None,
    ) -> None:
        """
        Instantiate Character.

        Args:
            name: Character name, used in messages
            max_stamina: Maximum stamina. Defaults to ``config.PLAYER_MAX_STAMINA``
            tuning: Burn/regen rates. Defaults to a fresh ``StaminaTuning``
            carried_weight: Total weight currently carried
            weight_capacity: Weight the character can carry without penalty
            mouth_encumbrance: Obstruction of the mouth from worn equipment
            traits: Permanent traits such as ``Trait.BAD_BACK``
        """
        self.name = name
        self.stats = (
            StatsComponent() if max_stamina is None else StatsComponent(max_stamina)
        )
        self.health = HealthComponent()
        self.traits = TraitsComponent(traits)
        self.status_effects = StatusEffectsComponent(self)
        self.stamina = StaminaComponent(
            self.stats, self.status_effects, tuning=tuning, owner=self
        )

        self.carried_weight = carried_weight
        self.weight_capacity = weight_capacity
        self.mouth_encumbrance = mouth_encumbrance
        self.movement_mode = MovementMode.WALK

    def __repr__(self) -> str:
        return (
            f"Character({self.name!r}, stamina={self.stamina.stamina}/"
            f"{self.stamina.stamina_max}, mode={self.movement_mode.name})"
        )

    @property
    def tuning(self) -> StaminaTuning:
        return self.stamina.tuning

    @property
    def overburden_ratio(self) -> OverburdenRatio:
        """Carried weight as a fraction of capacity. 1.0 is exactly full."""
        if self.weight_capacity <= 0:
            raise ValueError(
                f"weight_capacity must be positive, got {self.weight_capacity}"
            )
        return self.carried_weight / self.weight_capacity

    @property
    def is_winded(self) -> bool:
        return self.status_effects.has_status_effect(WindedEffect)

    def catch_breath(self) -> None:
        """Drop the winded status without touching stamina."""
        self.status_effects.remove_status_effect(WindedEffect)

    # === Movement ===

    def can_run(self) -> bool:
        return formulas.can_run(
            self.stamina.stamina, self.stamina.stamina_max, self.is_winded
        )

    def movement_mode_is(self, mode: MovementMode) -> bool:
        return self.movement_mode == mode

    def set_movement_mode(self, mode: MovementMode) -> bool:
        """Switch gait. Returns ``False`` (and walks) if running isn't possible."""
        if mode == MovementMode.RUN and not self.can_run():
            logger.debug(f"{self.name} is too tired to run")
            self.movement_mode = MovementMode.WALK
            return False
        self.movement_mode = mode
        return True

    def stamina_move_cost_modifier(self) -> float:
        """Move cost multiplier for the current gait and stamina level."""
        return formulas.cost_modifier(self.movement_mode, self.stamina.stamina_fraction)

    # === Per-tick stamina drivers ===

    def burn_move_stamina(self, moves: Moves) -> LedgerOutcome:
        """Spend stamina for ``moves`` worth of movement in the current gait.

        The pain check runs after the burn is applied, so a tick that empties
        the pool can already make an overloaded character strain.
        """
        if moves < 0:
            raise ValueError(f"moves must be non-negative, got {moves}")

        tuning = self.tuning
        ratio = self.overburden_ratio
        per_turn = formulas.burn_amount(
            self.movement_mode, tuning.base_burn_rate, ratio
        )
        burned = rng.roll_remainder(
            per_turn * moves / tuning.moves_per_turn, _rounding_rng
        )

        outcome = self.stamina.apply_delta(-burned)
        _record_metric("stamina.burn_per_turn", burned)

        if _rolls_strain(ratio, self.stamina.stamina, self.traits):
            pain = tuning.pain_per_strain
            _strain(self.name, self.health, pain, ratio)
            publish_event(
                StrainEvent(character=self, pain=pain, overburden_ratio=ratio)
            )

        if self.movement_mode == MovementMode.RUN and not self.can_run():
            self.movement_mode = MovementMode.WALK
            publish_event(
                MessageEvent(
                    f"{self.name} is too tired to keep running.", colors.ORANGE
                )
            )

        return outcome

    def update_stamina(self, moves: Moves) -> LedgerOutcome:
        """Recover stamina over ``moves`` of rest. The gait plays no part."""
        tuning = self.tuning
        amount = formulas.regen_amount(
            tuning.base_regen_rate,
            self.is_winded,
            self.mouth_encumbrance,
            moves,
            tuning.moves_per_turn,
        )
        gained = rng.roll_remainder(amount, _rounding_rng)
        _record_metric("stamina.regen_per_turn", gained)
        return self.stamina.apply_delta(gained)

    def update_turn(self) -> None:
        """Age status effects by one turn."""
        self.status_effects.update_turn()


def _record_metric(name: str, value: float) -> None:
    """Record to a stamina metric if one has been registered."""
    if live_variable_registry.get_metric(name) is not None:
        live_variable_registry.record_metric(name, value)


def _rolls_strain(
    ratio: OverburdenRatio, stamina: StaminaPoints, traits: TraitHolder
) -> bool:
    """Roll for pain against the stamina left after this tick's burn."""
    return formulas.should_trigger_pain(
        ratio, stamina, traits.has_trait(Trait.BAD_BACK), _pain_rng
    )


def _strain(name: str, health: PainReceiver, pain: int, ratio: OverburdenRatio) -> None:
    health.add_pain(pain)
    logger.debug(f"{name} strains under {ratio:.0%} load (+{pain} pain)")
    publish_event(MessageEvent("Your body strains under the weight!", colors.RED))
