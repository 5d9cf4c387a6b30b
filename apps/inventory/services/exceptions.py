"""
Domain-specific exceptions for inventory app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class InventoryServiceError(Exception):
    """Base exception for all inventory service errors."""
    pass


class InvalidQuantityError(InventoryServiceError):
    """Raised when a movement quantity is missing, malformed or not positive."""
    pass


class InvalidDirectionError(InventoryServiceError):
    """Raised when a movement direction is neither 'in' nor 'out'."""
    pass


class StockItemNotFoundError(InventoryServiceError):
    """Raised when a referenced stock item does not exist."""
    pass


class InactiveStockItemError(InventoryServiceError):
    """Raised when a new movement targets a deactivated stock item."""
    pass


class StockTransactionNotFoundError(InventoryServiceError):
    """Raised when a stock transaction does not exist."""
    pass


class InvalidUnitPriceError(InventoryServiceError):
    """Raised when a unit price is malformed, negative or finer than a cent."""
    pass
