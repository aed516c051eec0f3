"""
Configuration constants.

Centralizes the tunable numbers used by the stamina system. These are the
defaults a fresh :class:`~winded.game.actors.components.StaminaTuning` starts
from; the formulas themselves never read this module directly.
"""

# =============================================================================
# GENERAL
# =============================================================================

# RANDOM_SEED = None
RANDOM_SEED = "winded"

# =============================================================================
# TIME
# =============================================================================

# Moves that make up one game turn. Elapsed time is always passed around in
# moves and converted to turns with this constant.
MOVES_PER_TURN = 100

# =============================================================================
# STAMINA
# =============================================================================

PLAYER_MAX_STAMINA = 10000

# Stamina burned per turn of walking, before gait and overburden.
PLAYER_BASE_STAMINA_BURN_RATE = 15

# Stamina regained per turn while not exerting.
PLAYER_BASE_STAMINA_REGEN_RATE = 20.0

# How long overexertion leaves a character winded.
WINDED_DURATION_TURNS = 10

# Pain added each time an overloaded character strains under the weight.
PAIN_PER_STRAIN = 1
