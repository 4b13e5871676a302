"""Steam machine ID generation."""

__version__ = "0.1.0"

from steam_machine_id.domain.entities import MachineID
from steam_machine_id.domain.exceptions import (
    InvalidInput,
    MachineIDError,
    MalformedMessage,
)
from steam_machine_id.domain.value_objects import (
    AccountName,
    CustomFormat,
    DerivationMode,
    FieldLabel,
    HashValue,
    Random,
)

__all__ = [
    "AccountName",
    "CustomFormat",
    "DerivationMode",
    "FieldLabel",
    "HashValue",
    "InvalidInput",
    "MachineID",
    "MachineIDError",
    "MalformedMessage",
    "Random",
    "__version__",
]
