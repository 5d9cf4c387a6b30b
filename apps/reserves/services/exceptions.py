"""
Domain-specific exceptions for reserves app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class ReservesServiceError(Exception):
    """Base exception for all reserves service errors."""
    pass


class InvalidPercentageError(ReservesServiceError):
    """Raised when an account percentage is outside 0-100."""
    pass


class InvalidPeriodError(ReservesServiceError):
    """Raised when a report year or month is out of range."""
    pass


class InvalidAmountError(ReservesServiceError):
    """Raised when an expenditure amount is not positive."""
    pass


class AllocationAccountNotFoundError(ReservesServiceError):
    pass


class DuplicateAccountNameError(ReservesServiceError):
    """Raised when an account name is already taken."""
    pass


class ExpenditureNotFoundError(ReservesServiceError):
    pass
