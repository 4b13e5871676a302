"""Single-precision random floats and their decimal rendering."""

import random
import struct
import threading
from decimal import Decimal

from steam_machine_id.config import get_settings

# Mantissa bits of an IEEE 754 single; every k / 2**24 is exact in float32.
FLOAT32_RANDOM_BITS = 24
_FLOAT32_MAX_DIGITS = 9

_default_source: "Float32RandomSource | None" = None
_default_lock = threading.Lock()


def to_float32(value: float) -> float:
    """Round a float to the nearest single-precision value."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def format_float32(value: float) -> str:
    """Shortest positional decimal that reads back as the same float32.

    0.1 -> "0.1", 1/3 -> "0.33333334", 0.0 -> "0".
    """
    single = to_float32(value)
    for precision in range(1, _FLOAT32_MAX_DIGITS + 1):
        text = f"{single:.{precision}g}"
        if to_float32(float(text)) == single:
            break
    return format(Decimal(text), "f")


class Float32RandomSource:
    """RandomSource backed by a random.Random instance."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def random_float32(self) -> float:
        """Uniform float32 in [0, 1)."""
        bits = self._rng.getrandbits(FLOAT32_RANDOM_BITS)
        return bits / (1 << FLOAT32_RANDOM_BITS)


def get_default_random_source() -> Float32RandomSource:
    """Process-wide random source, seeded from settings when configured."""
    global _default_source
    with _default_lock:
        if _default_source is None:
            seed = get_settings().random_seed
            _default_source = Float32RandomSource(random.Random(seed))
        return _default_source


def reset_default_random_source() -> None:
    """Drop the process-wide source so the next call re-reads settings."""
    global _default_source
    with _default_lock:
        _default_source = None
