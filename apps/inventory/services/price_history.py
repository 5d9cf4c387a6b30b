"""Price history projection over the stock ledger."""

from typing import List
from uuid import UUID

from apps.inventory.models import StockItem, StockTransaction

from .exceptions import StockItemNotFoundError


def get_price_history(*, item_id: UUID) -> List[dict]:
    """
    List every priced movement of an item, newest first.

    Transactions without a unit price are skipped. Ties on the
    transaction date are ordered by creation time, newest first.

    Args:
        item_id: UUID of the stock item

    Returns:
        List of dicts with date, price, type, quantity and notes

    Raises:
        StockItemNotFoundError: If item doesn't exist

    Example:
        >>> get_price_history(item_id=item.id)
        [{'date': date(2025, 3, 2), 'price': Decimal('52000.00'),
          'type': 'in', 'quantity': Decimal('10.00'), 'notes': ''}]
    """
    if not StockItem.objects.filter(id=item_id).exists():
        raise StockItemNotFoundError(f"Stock item with ID {item_id} not found")

    rows = (
        StockTransaction.objects
        .filter(item_id=item_id, unit_price__isnull=False)
        .order_by('-transaction_date', '-created_at')
        .values('transaction_date', 'unit_price', 'type', 'quantity', 'notes')
    )

    return [
        {
            'date': row['transaction_date'],
            'price': row['unit_price'],
            'type': row['type'],
            'quantity': row['quantity'],
            'notes': row['notes'],
        }
        for row in rows
    ]
