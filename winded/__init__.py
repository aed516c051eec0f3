"""Character stamina: movement cost, burn, regeneration and exhaustion."""
