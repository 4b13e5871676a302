"""Domain exceptions."""


class MachineIDError(Exception):
    """Base exception for steam_machine_id."""

    pass


class InvalidInput(MachineIDError):
    """Caller-supplied string cannot be encoded as a null-terminated string."""

    pass


class MalformedMessage(MachineIDError):
    """Byte blob is not a well-formed machine ID message object."""

    pass
