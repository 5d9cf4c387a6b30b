"""
Reserve expenditure management service.

Expenditures record money drawn from an allocation account. They never
change the account itself; reconciliation happens in the summaries.
"""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.reserves.models import ReserveExpenditure

from .allocation import validate_period
from .exceptions import InvalidAmountError, ExpenditureNotFoundError

logger = logging.getLogger(__name__)


def _validate_amount(amount) -> Decimal:
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAmountError(f"Invalid amount: {amount!r}")

    if not value.is_finite() or value <= 0:
        raise InvalidAmountError("Amount must be greater than 0")

    return value


def list_expenditures(*, year: Optional[int] = None, month: Optional[int] = None) -> QuerySet:
    """Expenditures in the period, newest first."""
    queryset = ReserveExpenditure.objects.all()

    if year is not None:
        validate_period(year, month)
        queryset = queryset.filter(expenditure_date__year=year)
        if month is not None:
            queryset = queryset.filter(expenditure_date__month=month)

    return queryset.order_by('-expenditure_date', '-created_at')


@transaction.atomic
def create_expenditure(
    *,
    name: str,
    source_type: str,
    amount,
    expenditure_date: date,
    notes: str = ''
) -> ReserveExpenditure:
    """
    Record an expenditure drawn from ``source_type``.

    Raises:
        InvalidAmountError: If amount is not positive
    """
    amount = _validate_amount(amount)

    expenditure = ReserveExpenditure.objects.create(
        name=name,
        source_type=source_type,
        amount=amount,
        expenditure_date=expenditure_date,
        notes=notes,
    )

    logger.info("Reserve expenditure %s: %s from %s", expenditure.id, amount, source_type)
    return expenditure


@transaction.atomic
def update_expenditure(
    *,
    expenditure_id: UUID,
    name: Optional[str] = None,
    source_type: Optional[str] = None,
    amount=None,
    expenditure_date: Optional[date] = None,
    notes: Optional[str] = None
) -> ReserveExpenditure:
    try:
        expenditure = ReserveExpenditure.objects.select_for_update().get(id=expenditure_id)
    except ReserveExpenditure.DoesNotExist:
        raise ExpenditureNotFoundError(f"Expenditure with ID {expenditure_id} not found")

    if amount is not None:
        expenditure.amount = _validate_amount(amount)
    if name is not None:
        expenditure.name = name
    if source_type is not None:
        expenditure.source_type = source_type
    if expenditure_date is not None:
        expenditure.expenditure_date = expenditure_date
    if notes is not None:
        expenditure.notes = notes

    expenditure.save()
    return expenditure


@transaction.atomic
def delete_expenditure(*, expenditure_id: UUID) -> None:
    deleted, _ = ReserveExpenditure.objects.filter(id=expenditure_id).delete()
    if not deleted:
        raise ExpenditureNotFoundError(f"Expenditure with ID {expenditure_id} not found")
    logger.info("Reserve expenditure %s deleted", expenditure_id)
