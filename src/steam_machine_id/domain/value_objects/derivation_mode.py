"""Derivation modes for building a machine ID.

A mode is a transient choice consumed once by the derivation use case. Modes
carrying caller text validate it on construction: every value ends up inside a
null-terminated string, so an embedded null byte is rejected up front.
"""

from dataclasses import dataclass

from steam_machine_id.domain.exceptions import InvalidInput


def _reject_null(field: str, text: str) -> None:
    if "\x00" in text:
        raise InvalidInput(f"{field} must not contain a null byte")


@dataclass(frozen=True)
class Random:
    """Each hash value is derived from fresh random entropy."""


@dataclass(frozen=True)
class AccountName:
    """Hash values are derived from an account name."""

    account_name: str

    def __post_init__(self) -> None:
        _reject_null("account_name", self.account_name)


@dataclass(frozen=True)
class CustomFormat:
    """Each hash value is derived from its own caller-supplied string."""

    value_bb3: str
    value_ff2: str
    value_3b3: str

    def __post_init__(self) -> None:
        _reject_null("value_bb3", self.value_bb3)
        _reject_null("value_ff2", self.value_ff2)
        _reject_null("value_3b3", self.value_3b3)


DerivationMode = Random | AccountName | CustomFormat
