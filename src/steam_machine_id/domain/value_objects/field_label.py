"""Field labels of a machine ID."""

from enum import StrEnum


class FieldLabel(StrEnum):
    """Labels of the three hash values, in wire order."""

    BB3 = "BB3"
    FF2 = "FF2"
    B3B3 = "3B3"
