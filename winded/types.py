from __future__ import annotations

from typing import TypeAlias

# =============================================================================
# STAMINA-RELATED TYPES
# =============================================================================

# Whole units of stamina. The ledger only ever stores and applies these.
StaminaPoints: TypeAlias = int

# Signed change requested of the ledger. Negative values drain stamina.
StaminaDelta: TypeAlias = int

# Remaining stamina divided by maximum stamina, in [0.0, 1.0].
StaminaFraction: TypeAlias = float

# Carried weight divided by weight capacity. 1.0 means exactly at capacity,
# 1.5 means carrying half again as much as the character can manage.
OverburdenRatio: TypeAlias = float

# Obstruction of the mouth from worn equipment. Layers add roughly 10 each.
Encumbrance: TypeAlias = int

# =============================================================================
# TIME-RELATED TYPES
# =============================================================================

# Elapsed game time measured in moves. One turn is ``config.MOVES_PER_TURN``
# moves, so a full turn of walking is 100 moves.
Moves: TypeAlias = int

# Whole game turns, used for status effect durations.
Turns: TypeAlias = int

# =============================================================================
# GAME-RELATED TYPES
# =============================================================================

# Random seed for deterministic generation.
# Can be an int for numeric seeds or a descriptive string like "winded".
RandomSeed: TypeAlias = int | str | None

# =============================================================================
# UTILITY TYPES
# =============================================================================

# Generic min/max float range (e.g. slider bounds for live variables)
FloatRange: TypeAlias = tuple[float, float]
