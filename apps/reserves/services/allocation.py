"""
Allocation calculator.

Distributes monthly net profit (revenue minus expenses) across the
active allocation accounts by percentage.

All arithmetic is done on unrounded ``Decimal`` values; rounding to the
smallest currency unit happens once when the result is built, so the
year figure of an account is exactly the sum of its monthly shares.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from apps.bookkeeping.exceptions import InvalidPeriodError as BookkeepingPeriodError
from apps.bookkeeping.services import (
    RevenueService,
    ExpenseService,
    validate_period as validate_bookkeeping_period,
)
from apps.reserves.models import AllocationAccount

from .exceptions import InvalidPeriodError

logger = logging.getLogger(__name__)

MONEY_PLACES = Decimal('0.01')
ZERO = Decimal('0')
HUNDRED = Decimal('100')


def validate_period(year, month=None) -> None:
    """Bookkeeping period rules, raised as the reserves InvalidPeriodError."""
    try:
        validate_bookkeeping_period(year, month)
    except BookkeepingPeriodError as e:
        raise InvalidPeriodError(str(e)) from e


def money(value: Decimal) -> Decimal:
    return value.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)


def monthly_share(net_profit: Decimal, percentage) -> Decimal:
    """
    Share of one month's net profit for an account.

    Loss-making months allocate nothing rather than a negative amount.
    """
    if percentage is None:
        return ZERO
    share = Decimal(net_profit) * Decimal(percentage) / HUNDRED
    return max(ZERO, share)


def calculate_allocations(year: int, month: Optional[int] = None) -> dict:
    """
    Allocate net profit for a month, or for every month of a year.

    Args:
        year: Report year
        month: Report month (1-12), or None for the whole year

    Returns:
        dict with keys:
            year, month
            accounts: active accounts with their allocated amount
            by_account: {account name: allocated amount}
            total: sum over accounts included in the reserve total
            months: per-month revenue, expenses, net_profit and allocations

    Raises:
        InvalidPeriodError: If year or month is out of range
    """
    validate_period(year, month)

    months = [month] if month is not None else list(range(1, 13))
    revenues = RevenueService.revenue_by_month(year)
    expenses = ExpenseService.expenses_by_month(year)
    accounts = list(AllocationAccount.objects.filter(is_active=True).order_by('name'))

    totals = {account.id: ZERO for account in accounts}
    month_rows = []

    for m in months:
        revenue = revenues.get(m, ZERO)
        expense_total = expenses.get(m, ZERO)
        net_profit = revenue - expense_total

        allocations = {}
        for account in accounts:
            share = monthly_share(net_profit, account.percentage)
            totals[account.id] += share
            allocations[account.name] = money(share)

        month_rows.append({
            'month': m,
            'revenue': money(revenue),
            'expenses': money(expense_total),
            'net_profit': money(net_profit),
            'allocations': allocations,
        })

    reserve_total = sum(
        (totals[account.id] for account in accounts if account.include_in_reserve_total),
        ZERO
    )

    logger.debug(
        "Allocations for %s/%s over %d active account(s): total %s",
        month or '*', year, len(accounts), reserve_total
    )

    return {
        'year': year,
        'month': month,
        'accounts': [
            {
                'id': account.id,
                'name': account.name,
                'description': account.description,
                'percentage': account.percentage,
                'include_in_reserve_total': account.include_in_reserve_total,
                'amount': money(totals[account.id]),
            }
            for account in accounts
        ],
        'by_account': {account.name: money(totals[account.id]) for account in accounts},
        'total': money(reserve_total),
        'months': month_rows,
    }
