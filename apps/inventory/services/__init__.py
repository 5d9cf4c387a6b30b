"""
Inventory app services layer.

Services contain business logic and orchestrate operations across models.
Every balance-changing operation runs in a transaction and updates the
cached stock level with a single atomic statement.
"""

from .exceptions import (
    InventoryServiceError,
    InvalidQuantityError,
    InvalidDirectionError,
    StockItemNotFoundError,
    InactiveStockItemError,
    StockTransactionNotFoundError,
    InvalidUnitPriceError,
)

from .item_registry import (
    create_item,
    get_item_by_id,
    update_item,
    delete_item,
    get_low_stock_items,
)

from .balance_maintenance import (
    UNSET,
    apply_movement,
    reverse_movement,
    create_transaction,
    update_transaction,
    delete_transaction,
    ledger_balance,
    rebuild_stock_balance,
)

from .price_history import get_price_history


__all__ = [
    # Exceptions
    'InventoryServiceError',
    'InvalidQuantityError',
    'InvalidDirectionError',
    'StockItemNotFoundError',
    'InactiveStockItemError',
    'StockTransactionNotFoundError',
    'InvalidUnitPriceError',

    # Item registry
    'create_item',
    'get_item_by_id',
    'update_item',
    'delete_item',
    'get_low_stock_items',

    # Balance maintenance
    'UNSET',
    'apply_movement',
    'reverse_movement',
    'create_transaction',
    'update_transaction',
    'delete_transaction',
    'ledger_balance',
    'rebuild_stock_balance',

    # Price history
    'get_price_history',
]
