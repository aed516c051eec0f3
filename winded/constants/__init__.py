"""Constants packages for implementation details.

These are distinct from config.py which contains user-configurable settings.
Constants here are implementation details that need descriptive names.
"""

from .stamina import StaminaConstants

__all__ = ["StaminaConstants"]
