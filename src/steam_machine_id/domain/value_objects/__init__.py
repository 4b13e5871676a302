"""Domain value objects."""

from steam_machine_id.domain.value_objects.derivation_mode import (
    AccountName,
    CustomFormat,
    DerivationMode,
    Random,
)
from steam_machine_id.domain.value_objects.field_label import FieldLabel
from steam_machine_id.domain.value_objects.hash_value import HashValue

__all__ = [
    "AccountName",
    "CustomFormat",
    "DerivationMode",
    "FieldLabel",
    "HashValue",
    "Random",
]
