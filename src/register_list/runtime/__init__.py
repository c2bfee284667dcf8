"""Runtime services shared across the register list."""

from . import telemetry

__all__ = ["telemetry"]
