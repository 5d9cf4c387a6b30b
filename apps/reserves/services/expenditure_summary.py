"""
Expenditure aggregation.

Sums reserve expenditures per source account, and per month and source
account, for reconciliation against allocations.
"""

from collections import defaultdict
from decimal import Decimal
from typing import Optional

from .allocation import validate_period, money
from .expenditure_management import list_expenditures


def summarize_expenditures(year: int, month: Optional[int] = None) -> dict:
    """
    Aggregate the expenditures of a year or of one month.

    Returns:
        dict with keys:
            year, month
            total_expended: sum of every amount in scope
            by_account: {source_type: amount}
            monthly_expenditure: {month: {source_type: amount}}

    Raises:
        InvalidPeriodError: If year or month is out of range
    """
    validate_period(year, month)

    total = Decimal('0')
    by_account = defaultdict(Decimal)
    monthly = defaultdict(lambda: defaultdict(Decimal))

    rows = list_expenditures(year=year, month=month).values_list(
        'source_type', 'amount', 'expenditure_date'
    )
    for source_type, amount, expenditure_date in rows:
        total += amount
        by_account[source_type] += amount
        monthly[expenditure_date.month][source_type] += amount

    return {
        'year': year,
        'month': month,
        'total_expended': money(total),
        'by_account': {key: money(value) for key, value in sorted(by_account.items())},
        'monthly_expenditure': {
            m: {key: money(value) for key, value in sorted(sources.items())}
            for m, sources in sorted(monthly.items())
        },
    }
