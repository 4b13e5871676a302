"""Random source port - entropy for random machine IDs."""

from typing import Protocol


class RandomSource(Protocol):
    """Port for drawing single-precision floats in [0, 1)."""

    def random_float32(self) -> float: ...
