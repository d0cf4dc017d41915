from __future__ import annotations

from collections.abc import Iterator

import pytest

import delve.util.rng as rng_module


@pytest.fixture(autouse=True)
def isolate_global_rng() -> Iterator[None]:
    """Give every test a fresh global RNG provider and restore the old one."""
    saved_provider = rng_module._provider
    rng_module._provider = None
    yield
    rng_module._provider = saved_provider
