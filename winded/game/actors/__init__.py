"""
This package contains the character, its components, and the status effects
the stamina system applies.
"""

from . import components, status_effects
from .components import StaminaComponent, StaminaTuning
from .core import Character
from .status_effects import StatusEffect, WindedEffect

__all__ = [
    "Character",
    "StaminaComponent",
    "StaminaTuning",
    "StatusEffect",
    "WindedEffect",
    "components",
    "status_effects",
]
