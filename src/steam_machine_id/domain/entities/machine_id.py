"""MachineID entity - the three hash values sent with a Steam login."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from steam_machine_id.domain.value_objects import (
    AccountName,
    CustomFormat,
    DerivationMode,
    FieldLabel,
    HashValue,
    Random,
)

if TYPE_CHECKING:
    from steam_machine_id.application.ports import RandomSource


@dataclass(frozen=True)
class MachineID:
    """Immutable triple of BB3, FF2 and 3B3 hash values.

    Usage::

        machine_id = MachineID.from_account_name("accountname")
        login.machine_id = machine_id.to_message()  # 155 bytes
    """

    value_bb3: HashValue
    value_ff2: HashValue
    value_3b3: HashValue

    @classmethod
    def from_mode(
        cls,
        mode: DerivationMode,
        random_source: RandomSource | None = None,
    ) -> MachineID:
        """Derive a machine ID with the given derivation mode."""
        from steam_machine_id.application.use_cases.derive_machine_id import (
            DeriveMachineIdUseCase,
        )

        return DeriveMachineIdUseCase(random_source).execute(mode)

    @classmethod
    def random(cls, random_source: RandomSource | None = None) -> MachineID:
        """Random machine ID. Not suitable as a secret."""
        return cls.from_mode(Random(), random_source)

    @classmethod
    def from_account_name(cls, account_name: str) -> MachineID:
        return cls.from_mode(AccountName(account_name))

    @classmethod
    def custom_format(
        cls,
        value_bb3: str,
        value_ff2: str,
        value_3b3: str,
    ) -> MachineID:
        """Machine ID hashed from one caller-supplied string per field.

        The strings usually follow ``"SteamUser Hash <label> <account name>"``.
        """
        return cls.from_mode(CustomFormat(value_bb3, value_ff2, value_3b3))

    @classmethod
    def from_message(cls, data: bytes) -> MachineID:
        """Parse a message object produced by ``to_message``."""
        from steam_machine_id.infrastructure.encoding.message_object import (
            decode_machine_id,
        )

        return decode_machine_id(data)

    def values(self) -> dict[FieldLabel, HashValue]:
        """Hash values keyed by label, in wire order."""
        return {
            FieldLabel.BB3: self.value_bb3,
            FieldLabel.FF2: self.value_ff2,
            FieldLabel.B3B3: self.value_3b3,
        }

    def to_message(self) -> bytes:
        """Encode as the 155-byte binary message object."""
        from steam_machine_id.infrastructure.encoding.message_object import (
            encode_machine_id,
        )

        return encode_machine_id(self)

    def to_display_string(self) -> str:
        return ":".join(
            f"{label}.{value.digest.hex().upper()}"
            for label, value in self.values().items()
        )

    def __bytes__(self) -> bytes:
        return self.to_message()

    def __str__(self) -> str:
        return self.to_display_string()
