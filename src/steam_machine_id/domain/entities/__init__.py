"""Domain entities."""

from steam_machine_id.domain.entities.machine_id import MachineID

__all__ = ["MachineID"]
