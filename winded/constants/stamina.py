"""Constants for the stamina, burn and recovery systems."""


class StaminaConstants:
    """Fixed formula constants for the stamina system.

    Unlike the values in :mod:`winded.config`, these define the shape of the
    formulas and are not meant to be tuned per character.
    """

    # Movement cost multipliers relative to walking.
    # Run : Walk : Crouch = 4 : 2 : 1
    RUN_COST_MULTIPLIER = 2.0
    CROUCH_COST_DIVISOR = 2.0

    # Stamina burn multipliers relative to walking.
    # Run : Walk : Crouch = 14 : 1 : 0.5 (crouch uses integer division)
    RUN_BURN_MULTIPLIER = 14
    CROUCH_BURN_DIVISOR = 2

    # Each full percentage point over weight capacity adds this much to the
    # base burn rate before the gait multiplier.
    OVERBURDEN_BURN_PER_PERCENT = 1

    # Recovery while winded is 10% of normal.
    WINDED_REGEN_MULTIPLIER = 0.10

    # Every 5 points of mouth encumbrance costs 1 point of regen per turn.
    MOUTH_ENCUMBRANCE_REGEN_DIVISOR = 5.0

    # Chance of pain while straining under a load.
    # Linear from 1 in 25 at exactly full load to certain at 350% load.
    PAIN_CHANCE_AT_CAPACITY = 1 / 25
    PAIN_CERTAIN_OVERBURDEN_RATIO = 3.5

    # Running needs more than this fraction of maximum stamina.
    RUN_MIN_STAMINA_FRACTION = 0.1
