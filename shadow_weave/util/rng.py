"""Deterministic random number generation with isolated streams.

Each pipeline stage (bands, fields, voids, edges, glyphs) gets its own
independent random stream derived from a master seed. This ensures that:

1. A weave is fully deterministic from the same master seed
2. Changes to one stage's random consumption don't cascade to others
3. Adding/removing stages doesn't shift other stages' random sequences

Usage:
    provider = RNGProvider(master_seed=42)
    _rng = provider.get("weave.bands")
    count = _rng.randrange(3, 6)

Domain naming convention (hierarchical):
    - "weave.bands", "weave.fields", "weave.voids"
    - "weave.edges", "weave.glyphs", "weave.noise"
    - "scene.roulette"
"""

from __future__ import annotations

import zlib
from random import Random
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from shadow_weave.types import FloatRange, RandomSeed


class RNGStream:
    """The random stream for one domain.

    Exposes only the draws the weave needs, forwarded to a private
    Random instance.
    """

    def __init__(self, rng: Random) -> None:
        self._rng = rng

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng.random()

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        """Return randomly selected element from range(start, stop, step)."""
        return self._rng.randrange(start, stop, step)

    def uniform(self, a: float, b: float) -> float:
        """Return random float N such that a <= N <= b."""
        return self._rng.uniform(a, b)

    # -------------------------------------------------------------------------
    # Weave helpers
    # -------------------------------------------------------------------------

    def uniform_range(self, bounds: FloatRange) -> float:
        """Return a uniform float inside a (low, high) tuple."""
        return self._rng.uniform(bounds[0], bounds[1])

    def derive_seed(self) -> int:
        """Return a 32-bit seed for a dependent generator (noise, numpy)."""
        return self._rng.getrandbits(32)

    def numpy_generator(self) -> np.random.Generator:
        """Return a numpy Generator seeded from this stream.

        Used for per-cell rolls that are drawn as whole arrays at once.
        """
        return np.random.default_rng(self._rng.getrandbits(64))


class RNGProvider:
    """Provides isolated RNG streams for different subsystems.

    Each domain gets its own Random instance derived deterministically
    from the master seed. Domains are identified by string names.
    """

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, RNGStream] = {}

    def get(self, domain: str) -> RNGStream:
        """Get the RNG stream for the named domain.

        Repeated calls with the same domain return the same stream, so
        draws continue where the previous caller left off.

        Args:
            domain: Hierarchical name like "weave.bands" or "weave.edges"
        """
        if domain not in self._streams:
            if self._master_seed is None:
                # No seed: use system entropy for non-deterministic behavior
                rng = Random()
            else:
                # Use crc32 instead of hash() - hash() is randomized per Python
                # session via PYTHONHASHSEED, which would break cross-session
                # determinism
                derived_seed = zlib.crc32(f"{self._master_seed}:{domain}".encode())
                rng = Random(derived_seed)
            self._streams[domain] = RNGStream(rng)
        return self._streams[domain]
