"""Exceptions raised at the engine's input boundary."""


class VoerbalansError(Exception):
    """Base class for all voerbalans errors."""

    pass


class InvalidInputError(VoerbalansError, ValueError):
    """Raised when a value object is constructed with incomplete or out-of-range data."""

    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}={value!r}: {reason}")


class CatalogError(VoerbalansError):
    """Raised when a feed/profile catalog file cannot be parsed."""

    pass
