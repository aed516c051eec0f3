"""
Stamina formulas: movement cost, burn, pain and regeneration.

Everything here is a pure function of its arguments. Tunable base rates come
in as parameters rather than being read from :mod:`winded.config`, so the same
inputs always give the same answer.

The stateful half of the system, the stamina ledger, lives in
:class:`~winded.game.actors.components.StaminaComponent`.

Formulas:
    cost_modifier: How expensive a move is for the given gait and stamina level
    burn_amount: Stamina drained per turn of movement
    pain_chance / should_trigger_pain: Whether straining under a load hurts
    regen_amount: Stamina recovered over some number of moves
    can_run: Whether the character has the breath to run at all
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from winded.constants.stamina import StaminaConstants
from winded.game.enums import MovementMode

if TYPE_CHECKING:
    from winded.types import (
        Encumbrance,
        Moves,
        OverburdenRatio,
        StaminaFraction,
        StaminaPoints,
    )
    from winded.util.rng import RNG


# =============================================================================
# MOVEMENT COST
# =============================================================================


def cost_modifier(mode: MovementMode, stamina_fraction: StaminaFraction) -> float:
    """Return the move cost multiplier for a gait at a given stamina level.

    Walking costs 1.0 at full stamina and falls to 0.5 as stamina runs out.
    Running always costs twice walking and crouching half of it, so the three
    gaits stay in a fixed 4 : 2 : 1 ladder at every stamina level.

    Args:
        mode: The current movement mode.
        stamina_fraction: ``stamina / stamina_max``. Callers clamp this to
            ``[0.0, 1.0]`` before calling.

    Raises:
        ValueError: If ``stamina_fraction`` is outside ``[0.0, 1.0]``.
    """
    if not 0.0 <= stamina_fraction <= 1.0:
        raise ValueError(
            f"stamina_fraction must be within [0.0, 1.0], got {stamina_fraction}"
        )

    walk_modifier = (1.0 + stamina_fraction) / 2.0
    if mode == MovementMode.RUN:
        return walk_modifier * StaminaConstants.RUN_COST_MULTIPLIER
    if mode == MovementMode.CROUCH:
        return walk_modifier / StaminaConstants.CROUCH_COST_DIVISOR
    return walk_modifier


# =============================================================================
# STAMINA BURN
# =============================================================================


def overburden_percent(overburden_ratio: OverburdenRatio) -> int:
    """Return the whole percentage points carried over capacity.

    Zero at or under capacity. ``1.5`` (half again the capacity) is 50.
    """
    if overburden_ratio < 0:
        raise ValueError(
            f"overburden_ratio must be non-negative, got {overburden_ratio}"
        )
    # Round away float noise first so 1.01 is 1 percent, not 0.
    percent = round((overburden_ratio - 1.0) * 100, 6)
    return max(0, math.floor(percent))


def burn_amount(
    mode: MovementMode, base_rate: int, overburden_ratio: OverburdenRatio
) -> StaminaPoints:
    """Return the stamina burned by one turn of movement.

    The overburden penalty is added to the base rate *before* the gait
    multiplier, so running while overloaded is punished fourteen times over.

    Args:
        mode: The current movement mode.
        base_rate: Stamina burned per turn of unburdened walking.
        overburden_ratio: ``carried_weight / weight_capacity``.
    """
    if base_rate < 0:
        raise ValueError(f"base_rate must be non-negative, got {base_rate}")

    effective_rate = (
        base_rate
        + overburden_percent(overburden_ratio)
        * StaminaConstants.OVERBURDEN_BURN_PER_PERCENT
    )
    if mode == MovementMode.RUN:
        return effective_rate * StaminaConstants.RUN_BURN_MULTIPLIER
    if mode == MovementMode.CROUCH:
        return effective_rate // StaminaConstants.CROUCH_BURN_DIVISOR
    return effective_rate


def pain_chance(overburden_ratio: OverburdenRatio) -> float:
    """Return the chance that moving under this load causes pain.

    No chance at or under capacity. Above it the chance rises linearly from
    1 in 25 at full load to certainty at 350% load, and stays certain beyond.
    """
    if overburden_ratio <= 1.0:
        return 0.0
    if overburden_ratio >= StaminaConstants.PAIN_CERTAIN_OVERBURDEN_RATIO:
        return 1.0

    low = StaminaConstants.PAIN_CHANCE_AT_CAPACITY
    span = StaminaConstants.PAIN_CERTAIN_OVERBURDEN_RATIO - 1.0
    progress = (overburden_ratio - 1.0) / span
    return low + (1.0 - low) * progress


def should_trigger_pain(
    overburden_ratio: OverburdenRatio,
    stamina: StaminaPoints,
    bad_back: bool,
    rng: RNG,
) -> bool:
    """Decide whether moving under a load hurts this turn.

    Pain is only possible while overburdened, and only for a character who is
    already out of stamina or whose back can't take the weight. The size of
    the pain is up to the health collaborator; this only decides *whether*.

    ``rng`` is consulted only when pain is possible at all.
    """
    if overburden_ratio <= 1.0:
        return False
    if stamina != 0 and not bad_back:
        return False
    return rng.random() < pain_chance(overburden_ratio)


# =============================================================================
# STAMINA REGENERATION
# =============================================================================


def regen_amount(
    base_rate: float,
    winded: bool,
    mouth_encumbrance: Encumbrance,
    elapsed_moves: Moves,
    moves_per_turn: int,
) -> float:
    """Return the stamina recovered over ``elapsed_moves``.

    Being winded cuts recovery to a tenth. Mouth encumbrance then subtracts a
    flat 1 point per 5 encumbrance, never taking recovery below zero. The gait
    plays no part: running drains stamina through :func:`burn_amount`, it
    doesn't slow recovery.
    """
    if elapsed_moves < 0:
        raise ValueError(f"elapsed_moves must be non-negative, got {elapsed_moves}")
    if moves_per_turn <= 0:
        raise ValueError(f"moves_per_turn must be positive, got {moves_per_turn}")
    if mouth_encumbrance < 0:
        raise ValueError(
            f"mouth_encumbrance must be non-negative, got {mouth_encumbrance}"
        )

    rate = base_rate
    if winded:
        rate *= StaminaConstants.WINDED_REGEN_MULTIPLIER
    rate -= mouth_encumbrance / StaminaConstants.MOUTH_ENCUMBRANCE_REGEN_DIVISOR
    rate = max(0.0, rate)
    return rate * (elapsed_moves / moves_per_turn)


# =============================================================================
# RUNNING
# =============================================================================


def can_run(stamina: StaminaPoints, stamina_max: StaminaPoints, winded: bool) -> bool:
    """Return ``True`` if a character has the breath to break into a run."""
    if winded or stamina_max <= 0:
        return False
    return stamina > stamina_max * StaminaConstants.RUN_MIN_STAMINA_FRACTION
