"""Exceptions raised by the terrain generation pipeline."""


class FaultTerrainError(Exception):
    """Base class for fault-terrain errors."""


class InvalidConfigError(FaultTerrainError, ValueError):
    """Raised when a generation request is rejected before any work starts."""
