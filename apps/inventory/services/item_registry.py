"""
Stock item registry service.

Handles stock item CRUD. The cached ``current_stock`` is never written
here; it belongs to the balance maintenance service.
"""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import F, QuerySet

from apps.inventory.models import StockItem

from .exceptions import StockItemNotFoundError

logger = logging.getLogger(__name__)


def create_item(
    *,
    name: str,
    unit: str,
    unit_price: Decimal,
    category: str = '',
    min_stock: Decimal = Decimal('0.00')
) -> StockItem:
    """
    Register a new stock item with a zero balance.

    Args:
        name: Item name
        unit: Unit of measure (kg, hộp, chai...)
        unit_price: Latest known unit price
        category: Optional category label
        min_stock: Reorder threshold

    Returns:
        Created StockItem instance
    """
    return StockItem.objects.create(
        name=name,
        unit=unit,
        unit_price=unit_price,
        category=category,
        min_stock=min_stock,
        current_stock=Decimal('0.00'),
    )


def get_item_by_id(*, item_id: UUID) -> StockItem:
    """
    Get a stock item by ID, active or not.

    Raises:
        StockItemNotFoundError: If item doesn't exist
    """
    try:
        return StockItem.objects.get(id=item_id)
    except StockItem.DoesNotExist:
        raise StockItemNotFoundError(f"Stock item with ID {item_id} not found")


@transaction.atomic
def update_item(
    *,
    item_id: UUID,
    name: Optional[str] = None,
    unit: Optional[str] = None,
    unit_price: Optional[Decimal] = None,
    category: Optional[str] = None,
    min_stock: Optional[Decimal] = None
) -> StockItem:
    """
    Update descriptive fields of a stock item.

    Raises:
        StockItemNotFoundError: If item doesn't exist
    """
    try:
        item = StockItem.objects.select_for_update().get(id=item_id)
    except StockItem.DoesNotExist:
        raise StockItemNotFoundError(f"Stock item with ID {item_id} not found")

    update_fields = []

    if name is not None:
        item.name = name
        update_fields.append('name')

    if unit is not None:
        item.unit = unit
        update_fields.append('unit')

    if unit_price is not None:
        item.unit_price = unit_price
        update_fields.append('unit_price')

    if category is not None:
        item.category = category
        update_fields.append('category')

    if min_stock is not None:
        item.min_stock = min_stock
        update_fields.append('min_stock')

    if update_fields:
        item.save(update_fields=update_fields)

    return item


@transaction.atomic
def delete_item(*, item_id: UUID) -> bool:
    """
    Remove a stock item.

    Items referenced by ledger entries are only deactivated so their
    history survives; unreferenced items are physically deleted.

    Returns:
        True if the item was deleted, False if it was deactivated

    Raises:
        StockItemNotFoundError: If item doesn't exist
    """
    try:
        item = StockItem.objects.select_for_update().get(id=item_id)
    except StockItem.DoesNotExist:
        raise StockItemNotFoundError(f"Stock item with ID {item_id} not found")

    if item.transactions.exists():
        item.is_active = False
        item.save(update_fields=['is_active'])
        logger.info("Stock item %s deactivated (has ledger entries)", item.id)
        return False

    item.delete()
    return True


def get_low_stock_items() -> QuerySet:
    """Active items whose balance is at or below their threshold."""
    return StockItem.objects.filter(
        is_active=True,
        current_stock__lte=F('min_stock')
    ).order_by('name')
