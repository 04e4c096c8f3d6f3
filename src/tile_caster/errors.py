"""Exceptions raised by the caster."""

__all__ = ["TileCasterError", "ConfigError", "MapError", "DegenerateRayError"]


class TileCasterError(Exception):
    """Base class for all caster errors."""


class ConfigError(TileCasterError, ValueError):
    """Startup configuration is invalid."""


class MapError(ConfigError):
    """A grid map is malformed or not enclosed by walls."""


class DegenerateRayError(TileCasterError, ArithmeticError):
    """A ray direction has both components equal to zero."""
