"""Deterministic random number generation with isolated streams.

Each stamina subsystem draws from its own random stream derived from a master
seed, so the pain roll and remainder rounding never perturb one another:

1. A simulation is fully deterministic from the same master seed
2. Consuming more rolls in one domain doesn't shift another domain's sequence

Usage:
    # At startup
    from winded.util import rng
    rng.init(config.RANDOM_SEED)

    # In any module - cache the stream reference
    _rng = rng.get("stamina.pain")

    def strains() -> bool:
        return _rng.random() < chance

Domain naming convention (hierarchical):
    - "stamina.pain"
    - "stamina.rounding"
"""

from __future__ import annotations

import math
import zlib
from random import Random
from typing import TYPE_CHECKING, TypeAlias

from winded import config

if TYPE_CHECKING:
    from winded.types import RandomSeed


class RNGStream:
    """Proxy that delegates to the current RNG for a domain.

    Callers may cache a stream; it keeps working after :func:`reset` because
    the underlying Random instance is looked up on every call.
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    def _rng(self) -> Random:
        return self._provider._get_raw(self._domain)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng().random()


# Anything with a ``random()`` method in [0, 1) will do; tests pass plain
# ``random.Random`` instances with fixed seeds.
RNG: TypeAlias = Random | RNGStream


class RNGProvider:
    """Provides isolated RNG streams keyed by domain name."""

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, Random] = {}
        self._proxies: dict[str, RNGStream] = {}

    def get(self, domain: str) -> RNGStream:
        """Get a cacheable RNG stream for the named domain."""
        if domain not in self._proxies:
            self._proxies[domain] = RNGStream(self, domain)
        return self._proxies[domain]

    def _get_raw(self, domain: str) -> Random:
        if domain not in self._streams:
            if self._master_seed is None:
                self._streams[domain] = Random()
            else:
                # crc32 rather than hash(): hash() of a str changes between
                # interpreter sessions unless PYTHONHASHSEED is pinned.
                derived_seed = zlib.crc32(f"{self._master_seed}:{domain}".encode())
                self._streams[domain] = Random(derived_seed)
        return self._streams[domain]

    def reset(self, master_seed: RandomSeed = None) -> None:
        """Reset all streams with a new master seed.

        Existing RNGStream proxies remain valid and will use the new streams.
        """
        self._master_seed = master_seed
        self._streams.clear()


def roll_remainder(value: float, rng: RNG) -> int:
    """Round ``value`` to an integer, keeping its fractional part as a chance.

    ``2.25`` becomes ``3`` one time in four and ``2`` otherwise, so the
    expected result equals ``value``. Whole numbers come back unchanged without
    consuming a roll.
    """
    whole = math.floor(value)
    fraction = value - whole
    if fraction == 0:
        return int(whole)
    if rng.random() < fraction:
        return int(whole) + 1
    return int(whole)


# =============================================================================
# Module-level API
# =============================================================================

_provider: RNGProvider | None = None


def init(master_seed: RandomSeed = None) -> None:
    """Initialize the global RNG provider with a master seed.

    An existing provider is reset rather than replaced so cached streams keep
    working.
    """
    global _provider
    if _provider is not None:
        _provider.reset(master_seed)
    else:
        _provider = RNGProvider(master_seed)


def get(domain: str) -> RNGStream:
    """Get an RNG stream for the named domain.

    Auto-initializes from ``config.RANDOM_SEED`` if :func:`init` has not been
    called yet.
    """
    global _provider
    if _provider is None:
        _provider = RNGProvider(config.RANDOM_SEED)
    return _provider.get(domain)


def reset(master_seed: RandomSeed = None) -> None:
    """Reset all RNG streams with a new master seed."""
    if _provider is None:
        raise RuntimeError("RNG not initialized - call rng.init() first")
    _provider.reset(master_seed)
