"""Custom exceptions for the world generator."""


class WorldGenError(Exception):
    """Base exception for world generation errors."""

    pass


class InvalidCoordinateError(WorldGenError):
    """Raised when chunk coordinates are not integers."""

    pass


class InvalidWorldRequestError(WorldGenError):
    """Raised when a world creation request is malformed."""

    pass
