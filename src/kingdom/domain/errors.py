"""Domain-level exceptions."""


class KingdomError(Exception):
    """Base class for errors raised by the kingdom domain."""


class ValidationError(KingdomError, ValueError):
    """Raised when an entity or config is constructed with invalid values."""


class StructureTypeError(KingdomError, TypeError):
    """Raised when a value is not one of the recognised structure variants."""
