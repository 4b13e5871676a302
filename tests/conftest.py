"""Pytest fixtures for steam_machine_id tests."""

from __future__ import annotations

import random
from collections.abc import Iterator

import pytest

from steam_machine_id.config import get_settings
from steam_machine_id.infrastructure.randomness.float32_source import (
    Float32RandomSource,
    reset_default_random_source,
)

ACCOUNT_NAME = "accountname"

# SHA1 of "SteamUser Hash <label> accountname", uppercase hex.
ACCOUNT_VECTORS = {
    "BB3": "6BB2445F8825BFED65E64392F0A4D549FFF7D3E1",
    "FF2": "57AD645E54976AFF3B3662E9CB335D0A24AC7D08",
    "3B3": "C1884025D23FB1A0DDBF125B5D9B8C0812F83390",
}


class FixedRandomSource:
    """RandomSource that replays a fixed sequence of floats."""

    def __init__(self, values: list[float]) -> None:
        self._values = list(values)
        self.calls = 0

    def random_float32(self) -> float:
        value = self._values[self.calls % len(self._values)]
        self.calls += 1
        return value


@pytest.fixture
def account_vectors() -> dict[str, str]:
    """Reference hex digests for ACCOUNT_NAME."""
    return dict(ACCOUNT_VECTORS)


@pytest.fixture
def seeded_source() -> Float32RandomSource:
    """Deterministic random source."""
    return Float32RandomSource(random.Random(1234))


@pytest.fixture
def fixed_source() -> FixedRandomSource:
    """Random source yielding 0.5, 0.25, 0.0."""
    return FixedRandomSource([0.5, 0.25, 0.0])


@pytest.fixture
def clean_settings() -> Iterator[None]:
    """Clear cached settings and the default random source around a test."""
    get_settings.cache_clear()
    reset_default_random_source()
    yield
    get_settings.cache_clear()
    reset_default_random_source()
