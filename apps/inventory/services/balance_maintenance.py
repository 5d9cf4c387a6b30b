"""
Balance maintenance service.

Keeps ``StockItem.current_stock`` equal to the signed sum of the item's
ledger entries while transactions are created, edited and deleted.

Every public operation runs inside a single database transaction and
mutates the balance with one ``UPDATE ... SET current_stock = current_stock
+ delta`` statement, so concurrent movements on the same item cannot lose
updates. Any failure rolls the whole operation back.
"""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Tuple
from uuid import UUID

from django.db import transaction
from django.db.models import F, Q, Sum
from django.db.models.functions import Coalesce

from apps.inventory.models import StockItem, StockTransaction, TransactionType

from .exceptions import (
    InvalidQuantityError,
    InvalidDirectionError,
    StockItemNotFoundError,
    InactiveStockItemError,
    StockTransactionNotFoundError,
    InvalidUnitPriceError,
)

logger = logging.getLogger(__name__)

# Marks an optional argument the caller did not pass (None is a valid value)
UNSET = object()

MONEY_PLACES = Decimal('0.01')


def _validate_quantity(quantity) -> Decimal:
    try:
        value = Decimal(str(quantity))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidQuantityError(f"Invalid quantity: {quantity!r}")

    if not value.is_finite() or value <= 0:
        raise InvalidQuantityError("Quantity must be greater than 0")

    # Ledger rows store two decimal places; the balance must move by the stored value
    if value.normalize().as_tuple().exponent < -2:
        raise InvalidQuantityError("Quantity must have at most 2 decimal places")

    return value


def _validate_unit_price(unit_price) -> Optional[Decimal]:
    if unit_price is None:
        return None

    try:
        value = Decimal(str(unit_price))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidUnitPriceError(f"Invalid unit price: {unit_price!r}")

    if not value.is_finite() or value < 0:
        raise InvalidUnitPriceError("Unit price must be 0 or greater")
    if value.normalize().as_tuple().exponent < -2:
        raise InvalidUnitPriceError("Unit price must have at most 2 decimal places")

    return value


def _validate_direction(direction) -> str:
    if direction not in TransactionType.values:
        raise InvalidDirectionError(
            f"Invalid direction: {direction!r}. Valid options: in, out"
        )
    return direction


def _opposite(direction: str) -> str:
    if direction == TransactionType.IN:
        return TransactionType.OUT
    return TransactionType.IN


def _compute_total_price(quantity: Decimal, unit_price: Optional[Decimal]) -> Optional[Decimal]:
    if unit_price is None:
        return None
    return (quantity * unit_price).quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)


def _get_movable_item(item_id: UUID) -> StockItem:
    """Return an item that may receive new movements."""
    try:
        item = StockItem.objects.get(id=item_id)
    except StockItem.DoesNotExist:
        raise StockItemNotFoundError(f"Stock item with ID {item_id} not found")

    if not item.is_active:
        raise InactiveStockItemError(f"Stock item '{item.name}' is deactivated")

    return item


def apply_movement(*, item_id: UUID, quantity: Decimal, direction: str) -> None:
    """
    Add ``quantity`` to the item balance for 'in', subtract it for 'out'.

    No lower bound is enforced; the balance may become negative.

    Raises:
        InvalidDirectionError: If direction is not 'in' or 'out'
        StockItemNotFoundError: If the item row does not exist
    """
    direction = _validate_direction(direction)
    delta = quantity if direction == TransactionType.IN else -quantity

    updated = StockItem.objects.filter(id=item_id).update(
        current_stock=F('current_stock') + delta
    )
    if not updated:
        raise StockItemNotFoundError(f"Stock item with ID {item_id} not found")

    logger.info("Stock item %s balance changed by %s", item_id, delta)


def reverse_movement(*, item_id: UUID, quantity: Decimal, direction: str) -> None:
    """Undo the effect of a previous movement on the item balance."""
    apply_movement(item_id=item_id, quantity=quantity, direction=_opposite(direction))


@transaction.atomic
def create_transaction(
    *,
    item_id: UUID,
    direction: str,
    quantity,
    transaction_date: date,
    unit_price=None,
    notes: str = ''
) -> StockTransaction:
    """
    Record a stock movement and apply it to the item balance.

    Args:
        item_id: UUID of the stock item
        direction: 'in' or 'out'
        quantity: Positive quantity
        transaction_date: Date of the movement
        unit_price: Optional unit price; total_price is derived from it
        notes: Free-text note

    Returns:
        Created StockTransaction (its item carries the refreshed balance)

    Raises:
        InvalidQuantityError: If quantity is not positive or finer than 0.01
        InvalidUnitPriceError: If unit_price is malformed or negative
        InvalidDirectionError: If direction is not 'in' or 'out'
        StockItemNotFoundError: If the item doesn't exist
        InactiveStockItemError: If the item is deactivated
    """
    quantity = _validate_quantity(quantity)
    direction = _validate_direction(direction)
    unit_price = _validate_unit_price(unit_price)
    item = _get_movable_item(item_id)

    stock_transaction = StockTransaction.objects.create(
        item=item,
        type=direction,
        quantity=quantity,
        unit_price=unit_price,
        total_price=_compute_total_price(quantity, unit_price),
        notes=notes or '',
        transaction_date=transaction_date,
    )

    apply_movement(item_id=item.id, quantity=quantity, direction=direction)

    item.refresh_from_db(fields=['current_stock'])
    return stock_transaction


@transaction.atomic
def update_transaction(
    *,
    transaction_id: UUID,
    item_id: Optional[UUID] = None,
    direction: Optional[str] = None,
    quantity=None,
    transaction_date: Optional[date] = None,
    unit_price=UNSET,
    notes: Optional[str] = None
) -> StockTransaction:
    """
    Edit a stock transaction, keeping balances consistent.

    The previous movement is reversed against the previous item, the
    changes are saved, and the resulting movement is applied afresh
    (possibly to a different item). For balances this is equivalent to
    deleting the old transaction and creating the new one.

    All inputs are validated before anything is written.

    Raises:
        StockTransactionNotFoundError: If the transaction doesn't exist
        InvalidQuantityError: If the new quantity is not positive or finer than 0.01
        InvalidUnitPriceError: If the new unit price is malformed or negative
        InvalidDirectionError: If the new direction is invalid
        StockItemNotFoundError: If the new item doesn't exist
        InactiveStockItemError: If reassigning to a deactivated item
    """
    try:
        stock_transaction = (
            StockTransaction.objects
            .select_for_update()
            .select_related('item')
            .get(id=transaction_id)
        )
    except StockTransaction.DoesNotExist:
        raise StockTransactionNotFoundError(
            f"Stock transaction with ID {transaction_id} not found"
        )

    new_quantity = stock_transaction.quantity if quantity is None else _validate_quantity(quantity)
    new_direction = stock_transaction.type if direction is None else _validate_direction(direction)
    if unit_price is not UNSET:
        unit_price = _validate_unit_price(unit_price)

    new_item = stock_transaction.item
    if item_id is not None and str(item_id) != str(stock_transaction.item_id):
        new_item = _get_movable_item(item_id)

    # Reverse what the transaction did before the edit
    reverse_movement(
        item_id=stock_transaction.item_id,
        quantity=stock_transaction.quantity,
        direction=stock_transaction.type,
    )

    stock_transaction.item = new_item
    stock_transaction.type = new_direction
    stock_transaction.quantity = new_quantity

    if unit_price is not UNSET:
        stock_transaction.unit_price = unit_price
    if transaction_date is not None:
        stock_transaction.transaction_date = transaction_date
    if notes is not None:
        stock_transaction.notes = notes

    stock_transaction.total_price = _compute_total_price(
        new_quantity, stock_transaction.unit_price
    )
    stock_transaction.save()

    apply_movement(item_id=new_item.id, quantity=new_quantity, direction=new_direction)

    new_item.refresh_from_db(fields=['current_stock'])
    return stock_transaction


@transaction.atomic
def delete_transaction(*, transaction_id: UUID) -> None:
    """
    Delete a stock transaction and reverse its effect on the item balance.

    Raises:
        StockTransactionNotFoundError: If the transaction doesn't exist
    """
    try:
        stock_transaction = (
            StockTransaction.objects
            .select_for_update()
            .get(id=transaction_id)
        )
    except StockTransaction.DoesNotExist:
        raise StockTransactionNotFoundError(
            f"Stock transaction with ID {transaction_id} not found"
        )

    reverse_movement(
        item_id=stock_transaction.item_id,
        quantity=stock_transaction.quantity,
        direction=stock_transaction.type,
    )
    stock_transaction.delete()


def ledger_balance(*, item_id: UUID) -> Decimal:
    """Signed sum of all ledger entries for an item (Σin − Σout)."""
    totals = StockTransaction.objects.filter(item_id=item_id).aggregate(
        total_in=Coalesce(Sum('quantity', filter=Q(type=TransactionType.IN)), Decimal('0.00')),
        total_out=Coalesce(Sum('quantity', filter=Q(type=TransactionType.OUT)), Decimal('0.00')),
    )
    return totals['total_in'] - totals['total_out']


@transaction.atomic
def rebuild_stock_balance(*, item_id: UUID) -> Tuple[Decimal, Decimal]:
    """
    Recompute an item's cached balance from its ledger.

    Returns:
        Tuple of (previous balance, rebuilt balance)

    Raises:
        StockItemNotFoundError: If the item doesn't exist
    """
    try:
        item = StockItem.objects.select_for_update().get(id=item_id)
    except StockItem.DoesNotExist:
        raise StockItemNotFoundError(f"Stock item with ID {item_id} not found")

    previous = item.current_stock
    rebuilt = ledger_balance(item_id=item.id)

    if previous != rebuilt:
        logger.warning(
            "Stock item %s balance drifted: cached %s, ledger %s",
            item.id, previous, rebuilt
        )
        item.current_stock = rebuilt
        item.save(update_fields=['current_stock'])

    return previous, rebuilt
