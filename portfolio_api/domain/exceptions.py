"""Custom exceptions for portfolio_api domain.

Every invalid input to the core services surfaces as a DataValidationError
so the HTTP layer can map it to a 400 without inspecting messages.
"""

from typing import Any


class PortfolioAPIError(Exception):
    """Base exception for all portfolio_api errors."""

    pass


# ============================================================================
# Data errors
# ============================================================================


class DataError(PortfolioAPIError):
    """Base class for data-related errors."""

    pass


class DataValidationError(DataError):
    """Raised when input fails validation.

    Examples:
    - Empty asset list
    - Non-positive or non-finite risk
    - Non-positive price in a price series
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class InsufficientDataError(DataValidationError):
    """Raised when there's not enough data to perform an operation.

    Examples:
    - Fewer than 2 price points for return statistics
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        required: int | None = None,
        available: int | None = None,
    ):
        super().__init__(message, field=field, value=available)
        self.required = required
        self.available = available


class DataNotFoundError(DataError):
    """Raised when a requested resource does not exist.

    Examples:
    - Unknown project slug
    """

    def __init__(self, message: str, resource: str | None = None):
        super().__init__(message)
        self.resource = resource
