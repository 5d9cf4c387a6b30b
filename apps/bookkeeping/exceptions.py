"""
Domain exceptions for bookkeeping app.

Raised by the bookkeeping services layer and translated to HTTP
responses by the views.
"""


class BookkeepingServiceError(Exception):
    """Base exception for bookkeeping service errors."""
    pass


class InvalidPeriodError(BookkeepingServiceError):
    """Raised when a year or month is out of range."""
    pass


class ExpenseNotFoundError(BookkeepingServiceError):
    """Raised when an expense does not exist."""
    pass


class InvalidAmountError(BookkeepingServiceError):
    """Raised when a revenue or expense amount is malformed or negative."""
    pass
