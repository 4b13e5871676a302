"""SHA1 hash value stored as uppercase hex text."""

import re
from dataclasses import dataclass

DIGEST_SIZE = 20
HEX_SIZE = 2 * DIGEST_SIZE

_UPPER_HEX = re.compile(rb"[0-9A-F]*")


@dataclass(frozen=True)
class HashValue:
    """SHA1 digest as 40 bytes of uppercase ASCII hex (no null terminator)."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != HEX_SIZE:
            raise ValueError(f"Hash value must be {HEX_SIZE} bytes")
        if not _UPPER_HEX.fullmatch(self.value):
            raise ValueError("Hash value must be uppercase hex")

    @classmethod
    def from_digest(cls, digest: bytes) -> "HashValue":
        """Build from a raw 20-byte SHA1 digest."""
        if len(digest) != DIGEST_SIZE:
            raise ValueError(f"Digest must be {DIGEST_SIZE} bytes")
        return cls(value=digest.hex().upper().encode("ascii"))

    @property
    def hex(self) -> str:
        return self.value.decode("ascii")

    @property
    def digest(self) -> bytes:
        """Raw 20-byte digest."""
        return bytes.fromhex(self.hex)

    def __str__(self) -> str:
        return self.hex
