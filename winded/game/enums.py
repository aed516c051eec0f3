from enum import Enum, auto


class MovementMode(Enum):
    """Gait selected by the surrounding game logic.

    Affects both how expensive each move is and how fast stamina drains.
    """

    WALK = auto()
    RUN = auto()
    CROUCH = auto()


class Trait(Enum):
    """Permanent character traits the stamina system cares about."""

    BAD_BACK = auto()  # Lower pain tolerance when carrying too much.


class LedgerOutcome(Enum):
    """What happened when a stamina delta was applied.

    Exact arrival at zero and overflowing past zero are distinct outcomes:
    spending exactly the last point of stamina is fine, trying to spend more
    than is left is overexertion.

    - UNCHANGED: The new value was in range and stored as-is
    - CLAMPED_HIGH: The new value exceeded the maximum and was capped
    - CLAMPED_LOW_EXACT: The new value was exactly zero
    - CLAMPED_LOW_OVERFLOW: The new value was negative and was raised to zero
    """

    UNCHANGED = auto()
    CLAMPED_HIGH = auto()
    CLAMPED_LOW_EXACT = auto()
    CLAMPED_LOW_OVERFLOW = auto()
