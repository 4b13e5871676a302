"""Derive machine ID use case."""

import logging

from steam_machine_id.application.ports import RandomSource
from steam_machine_id.domain.entities import MachineID
from steam_machine_id.domain.value_objects import (
    AccountName,
    CustomFormat,
    DerivationMode,
    FieldLabel,
    Random,
)
from steam_machine_id.infrastructure.hashing.sha1 import (
    derive_from_account,
    derive_from_custom,
    derive_random,
)
from steam_machine_id.infrastructure.randomness.float32_source import (
    get_default_random_source,
)

logger = logging.getLogger(__name__)


class DeriveMachineIdUseCase:
    """Turn a derivation mode into a MachineID."""

    def __init__(self, random_source: RandomSource | None = None) -> None:
        self._random_source = random_source

    def execute(self, mode: DerivationMode) -> MachineID:
        """Derive all three hash values for the given mode."""
        logger.debug("Deriving machine ID with %s mode", type(mode).__name__)
        match mode:
            case Random():
                source = self._random_source or get_default_random_source()
                return MachineID(
                    value_bb3=derive_random(source),
                    value_ff2=derive_random(source),
                    value_3b3=derive_random(source),
                )
            case AccountName(account_name=account_name):
                return MachineID(
                    value_bb3=derive_from_account(FieldLabel.BB3, account_name),
                    value_ff2=derive_from_account(FieldLabel.FF2, account_name),
                    value_3b3=derive_from_account(FieldLabel.B3B3, account_name),
                )
            case CustomFormat(value_bb3=bb3, value_ff2=ff2, value_3b3=b3b3):
                return MachineID(
                    value_bb3=derive_from_custom(bb3),
                    value_ff2=derive_from_custom(ff2),
                    value_3b3=derive_from_custom(b3b3),
                )
        raise TypeError(f"Unsupported derivation mode: {mode!r}")
