"""Exception hierarchy for the pricing package."""

from typing import Any


class PricingError(Exception):
    """Base exception for all pricing errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PermanentError(PricingError):
    """Errors that will not go away by recalculating with the same input."""

    pass


class InvalidInputError(PermanentError):
    """Out-of-range or malformed calculation input."""

    pass


class ConfigIntegrityError(PermanentError):
    """Rate schedule whose driver and company shares do not add up to the total rate."""

    pass


class ConservationError(PermanentError):
    """Customer total does not equal driver earnings plus company revenue."""

    pass
