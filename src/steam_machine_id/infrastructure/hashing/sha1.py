"""SHA1 derivation of machine ID hash values.

SHA1 is only a stable fingerprint here, not a security primitive.
"""

import hashlib
import re

from steam_machine_id.application.ports import RandomSource
from steam_machine_id.domain.value_objects import FieldLabel, HashValue
from steam_machine_id.infrastructure.randomness.float32_source import format_float32

ACCOUNT_HASH_PREFIX = "SteamUser Hash"

_UPPER_HEX = re.compile(r"(?:[0-9A-F]{2})*")


def digest(data: bytes) -> bytes:
    """Raw 20-byte SHA1 digest of data."""
    return hashlib.sha1(data).digest()


def hex_encode(data: bytes) -> str:
    """Uppercase hex, two characters per byte."""
    return data.hex().upper()


def hex_decode(text: str) -> bytes:
    """Inverse of hex_encode. Only uppercase hex is accepted."""
    if not _UPPER_HEX.fullmatch(text):
        raise ValueError(f"Not uppercase hex: {text!r}")
    return bytes.fromhex(text)


def hash_text(text: str) -> HashValue:
    return HashValue.from_digest(digest(text.encode("utf-8")))


def derive_random(random_source: RandomSource) -> HashValue:
    """Hash the decimal rendering of one random single-precision float.

    Only about 2**24 distinct values are possible.
    """
    return hash_text(format_float32(random_source.random_float32()))


def derive_from_account(label: FieldLabel, account_name: str) -> HashValue:
    return hash_text(f"{ACCOUNT_HASH_PREFIX} {label} {account_name}")


def derive_from_custom(value: str) -> HashValue:
    return hash_text(value)
