"""Deterministic random number generation with isolated streams.

Level generation never touches module-global randomness. Every generation call
receives an explicit generator, and this module is where those generators come
from. Each domain gets its own Random instance derived from a master seed, so:

1. A campaign is fully reproducible from its master seed
2. Drawing more numbers in one level doesn't shift the layout of the next
3. Tools (CLI, benchmarks, tests) can ask for exactly the stream they need

Usage:
    from delve.util import rng
    rng.init("burrito1")

    # Cache the stream reference; it survives rng.reset()
    _rng = rng.get("map.level")
    layout = MapBuilder().build(_rng)

    # Or one stream per dungeon depth
    layout = MapBuilder().build(rng.for_level(3))

Domain naming convention (hierarchical):
    - "map.level", "map.level.0", "map.level.1", ...
    - "bench.automata", "bench.drunkard", "bench.rooms"
"""

from __future__ import annotations

import zlib
from collections.abc import Sequence
from random import Random
from typing import TYPE_CHECKING, TypeAlias, TypeVar

if TYPE_CHECKING:
    from delve.types import RandomSeed

T = TypeVar("T")


class RNGStream:
    """Proxy that delegates to the current RNG for a domain.

    Callers can hold on to a stream across rng.reset(); every draw looks up
    the provider's current Random for the domain. Only the draws that map
    generation needs are exposed.
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    def _rng(self) -> Random:
        return self._provider._get_raw(self._domain)

    # Automata noise
    def random(self) -> float:
        return self._rng().random()

    # Room sizes
    def randint(self, a: int, b: int) -> int:
        return self._rng().randint(a, b)

    # Walker steps, walker drops and room origins
    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        return self._rng().randrange(start, stop, step)

    # Corridor orientation
    def getrandbits(self, k: int) -> int:
        return self._rng().getrandbits(k)

    # Architect and theme selection
    def choice(self, seq: Sequence[T]) -> T:
        return self._rng().choice(seq)

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        """Pick ``k`` distinct spawn points when there are too many candidates."""
        return self._rng().sample(population, k)

    def __repr__(self) -> str:
        return f"RNGStream(domain={self._domain!r})"


# Anything level generation accepts as its random source.
# Use this in type hints: `def generate(self, rng: RNG) -> ArchitectResult:`
RNG: TypeAlias = Random | RNGStream


def level_domain(map_level: int) -> str:
    """Domain name of the stream used to generate a given dungeon depth."""
    return f"map.level.{map_level}"


class RNGProvider:
    """Provides isolated RNG streams keyed by domain name.

    Each domain gets its own Random instance derived deterministically
    from the master seed.
    """

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, Random] = {}
        self._proxies: dict[str, RNGStream] = {}

    @property
    def master_seed(self) -> RandomSeed:
        return self._master_seed

    def get(self, domain: str) -> RNGStream:
        """Get a cacheable stream proxy for the named domain.

        Args:
            domain: Hierarchical name like "map.level" or "map.level.3"

        Returns:
            An RNGStream proxy backed by the domain's current Random
        """
        if domain not in self._proxies:
            self._proxies[domain] = RNGStream(self, domain)
        return self._proxies[domain]

    def _get_raw(self, domain: str) -> Random:
        if domain not in self._streams:
            if self._master_seed is None:
                # No seed: system entropy, a different level every run
                self._streams[domain] = Random()
            else:
                # crc32 rather than hash(): hash() of str is salted per
                # interpreter via PYTHONHASHSEED
                derived_seed = zlib.crc32(f"{self._master_seed}:{domain}".encode())
                self._streams[domain] = Random(derived_seed)
        return self._streams[domain]

    def reset(self, master_seed: RandomSeed = None) -> None:
        """Reset all streams with a new master seed.

        Existing RNGStream proxies remain valid and draw from the new streams.
        """
        self._master_seed = master_seed
        self._streams.clear()


# =============================================================================
# Module-level API
# =============================================================================

_provider: RNGProvider | None = None


def init(master_seed: RandomSeed = None) -> None:
    """Initialize the global provider, or reset it if it already exists.

    Resetting instead of replacing keeps previously cached proxies working.
    """
    global _provider
    if _provider is not None:
        _provider.reset(master_seed)
    else:
        _provider = RNGProvider(master_seed)


def get(domain: str) -> RNGStream:
    """Get a stream for the named domain from the global provider.

    Auto-initializes an unseeded provider if init() was never called.
    """
    global _provider
    if _provider is None:
        _provider = RNGProvider(None)
    return _provider.get(domain)


def for_level(map_level: int) -> RNGStream:
    """Stream dedicated to generating the given dungeon depth."""
    return get(level_domain(map_level))


def reset(master_seed: RandomSeed = None) -> None:
    """Reset all global streams with a new master seed."""
    if _provider is None:
        raise RuntimeError("RNG not initialized - call rng.init() first")
    _provider.reset(master_seed)
