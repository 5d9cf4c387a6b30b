"""
Allocation account management service.

Handles the configurable set of reserve accounts that the allocation
calculator distributes net profit across.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.reserves.models import AllocationAccount

from .exceptions import (
    InvalidPercentageError,
    AllocationAccountNotFoundError,
    DuplicateAccountNameError,
)

logger = logging.getLogger(__name__)

# (name, description, percentage, include_in_reserve_total)
DEFAULT_ACCOUNTS = [
    ('reinvestment', 'Tái đầu tư', Decimal('25'), True),
    ('depreciation', 'Khấu hao', Decimal('15'), True),
    ('risk_reserve', 'Quỹ dự phòng rủi ro', Decimal('20'), True),
    ('staff_bonus', 'Thưởng nhân viên', Decimal('10'), True),
    ('dividends', 'Chia cổ tức', Decimal('20'), False),
    ('marketing', 'Marketing', Decimal('10'), False),
]


def _validate_percentage(percentage) -> Decimal:
    try:
        value = Decimal(str(percentage))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidPercentageError(f"Invalid percentage: {percentage!r}")

    if not value.is_finite() or value < 0 or value > 100:
        raise InvalidPercentageError("Percentage must be between 0 and 100")

    return value


def list_accounts(*, active_only: bool = False) -> QuerySet:
    queryset = AllocationAccount.objects.all()
    if active_only:
        queryset = queryset.filter(is_active=True)
    return queryset


def get_account_by_id(*, account_id: UUID) -> AllocationAccount:
    try:
        return AllocationAccount.objects.get(id=account_id)
    except AllocationAccount.DoesNotExist:
        raise AllocationAccountNotFoundError(f"Allocation account with ID {account_id} not found")


@transaction.atomic
def create_account(
    *,
    name: str,
    percentage,
    description: str = '',
    is_active: bool = True,
    include_in_reserve_total: bool = True
) -> AllocationAccount:
    """
    Create an allocation account.

    Raises:
        InvalidPercentageError: If percentage is outside 0-100
        DuplicateAccountNameError: If the name is already used
    """
    percentage = _validate_percentage(percentage)

    if AllocationAccount.objects.filter(name=name).exists():
        raise DuplicateAccountNameError(f"Allocation account '{name}' already exists")

    try:
        account = AllocationAccount.objects.create(
            name=name,
            description=description,
            percentage=percentage,
            is_active=is_active,
            include_in_reserve_total=include_in_reserve_total,
        )
    except IntegrityError:
        raise DuplicateAccountNameError(f"Allocation account '{name}' already exists")

    logger.info("Allocation account %s created (%s%%)", account.name, account.percentage)
    return account


@transaction.atomic
def update_account(
    *,
    account_id: UUID,
    name: Optional[str] = None,
    percentage=None,
    description: Optional[str] = None,
    is_active: Optional[bool] = None,
    include_in_reserve_total: Optional[bool] = None
) -> AllocationAccount:
    """
    Update an allocation account.

    Raises:
        AllocationAccountNotFoundError: If account doesn't exist
        InvalidPercentageError: If percentage is outside 0-100
        DuplicateAccountNameError: If the new name is already used
    """
    try:
        account = AllocationAccount.objects.select_for_update().get(id=account_id)
    except AllocationAccount.DoesNotExist:
        raise AllocationAccountNotFoundError(f"Allocation account with ID {account_id} not found")

    if percentage is not None:
        account.percentage = _validate_percentage(percentage)

    if name is not None and name != account.name:
        if AllocationAccount.objects.filter(name=name).exclude(id=account.id).exists():
            raise DuplicateAccountNameError(f"Allocation account '{name}' already exists")
        account.name = name

    if description is not None:
        account.description = description

    if is_active is not None:
        account.is_active = is_active

    if include_in_reserve_total is not None:
        account.include_in_reserve_total = include_in_reserve_total

    account.save()
    return account


@transaction.atomic
def delete_account(*, account_id: UUID) -> None:
    """
    Delete an allocation account.

    Past expenditures keep their ``source_type`` text and are not touched.
    """
    deleted, _ = AllocationAccount.objects.filter(id=account_id).delete()
    if not deleted:
        raise AllocationAccountNotFoundError(f"Allocation account with ID {account_id} not found")
    logger.info("Allocation account %s deleted", account_id)


@transaction.atomic
def seed_default_accounts() -> int:
    """
    Install the default account set, skipping names that already exist.

    Returns:
        Number of accounts created
    """
    created = 0
    for name, description, percentage, include_in_total in DEFAULT_ACCOUNTS:
        _, was_created = AllocationAccount.objects.get_or_create(
            name=name,
            defaults={
                'description': description,
                'percentage': percentage,
                'include_in_reserve_total': include_in_total,
            }
        )
        if was_created:
            created += 1
    return created
