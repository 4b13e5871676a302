"""Application ports - interfaces for external adapters."""

from steam_machine_id.application.ports.random_source import RandomSource

__all__ = ["RandomSource"]
