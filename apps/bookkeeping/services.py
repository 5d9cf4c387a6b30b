"""
Bookkeeping Services Module
===========================

Business logic for the monthly revenue ledger and categorized expenses.
These figures are the inputs of the reserve allocation calculator: the
net profit of a month is its revenue minus the sum of its expenses.

Classes:
    RevenueService: Record and query monthly revenue.
    ExpenseService: Create, edit and delete expenses; aggregate per month.

Example:
    Recording a month of figures::

        from apps.bookkeeping.services import RevenueService, ExpenseService
        from decimal import Decimal, InvalidOperation

        RevenueService.upsert_revenue(year=2024, month=3, amount=Decimal('100000000'))
        ExpenseService.create_expense(
            name='Tiền thuê mặt bằng',
            category='fixed',
            amount=Decimal('60000000'),
            expense_date=date(2024, 3, 5),
        )

        RevenueService.revenue_by_month(2024)    # {3: Decimal('100000000.00')}
        ExpenseService.expenses_by_month(2024)   # {3: Decimal('60000000.00')}
"""

import logging
from decimal import Decimal, InvalidOperation

from django.db import transaction
from django.db.models import Sum

from .models import Revenue, Expense
from .exceptions import InvalidPeriodError, InvalidAmountError, ExpenseNotFoundError

logger = logging.getLogger(__name__)


def validate_period(year, month=None):
    """Raise InvalidPeriodError unless year/month describe a real period."""
    if not isinstance(year, int) or isinstance(year, bool) or year < 1:
        raise InvalidPeriodError(f"Invalid year: {year!r}")
    if month is not None:
        if not isinstance(month, int) or isinstance(month, bool) or not 1 <= month <= 12:
            raise InvalidPeriodError(f"Invalid month: {month!r}. Must be 1-12")


def validate_amount(amount):
    """Return amount as a Decimal; zero is allowed, negatives and sub-cent values are not."""
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAmountError(f"Invalid amount: {amount!r}")

    if not value.is_finite() or value < 0:
        raise InvalidAmountError("Amount must be 0 or greater")
    if value.normalize().as_tuple().exponent < -2:
        raise InvalidAmountError("Amount must have at most 2 decimal places")

    return value


class RevenueService:
    """Monthly revenue ledger; one row per (year, month)."""

    @staticmethod
    @transaction.atomic
    def upsert_revenue(*, year, month, amount):
        """
        Set the revenue of a month, creating the row if needed.

        Returns:
            tuple: (Revenue, created)
        """
        validate_period(year, month)
        amount = validate_amount(amount)

        revenue, created = Revenue.objects.update_or_create(
            year=year,
            month=month,
            defaults={'amount': amount},
        )

        logger.info(
            "Revenue %s for %02d/%d: %s",
            'recorded' if created else 'updated', month, year, amount
        )
        return revenue, created

    @staticmethod
    def list_revenues(*, year=None):
        queryset = Revenue.objects.all()
        if year is not None:
            validate_period(year)
            queryset = queryset.filter(year=year)
        return queryset

    @staticmethod
    def revenue_by_month(year):
        """
        Map month -> revenue for the given year.

        Months without a revenue row are absent from the result.
        """
        validate_period(year)
        rows = Revenue.objects.filter(year=year).values_list('month', 'amount')
        return {month: amount for month, amount in rows}


class ExpenseService:
    """Categorized expenses grouped by reporting period."""

    @staticmethod
    @transaction.atomic
    def create_expense(*, name, category, amount, expense_date, status=None,
                       notes='', year=None, month=None):
        """
        Record an expense.

        The reporting period defaults to the expense date's year and month.
        """
        year = year or expense_date.year
        month = month or expense_date.month
        validate_period(year, month)
        amount = validate_amount(amount)

        fields = {
            'name': name,
            'category': category,
            'amount': amount,
            'expense_date': expense_date,
            'notes': notes,
            'year': year,
            'month': month,
        }
        if status is not None:
            fields['status'] = status

        expense = Expense.objects.create(**fields)
        logger.info("Expense recorded: %s %s (%02d/%d)", expense.name, expense.amount, month, year)
        return expense

    @staticmethod
    def get_expense(expense_id):
        try:
            return Expense.objects.get(id=expense_id)
        except Expense.DoesNotExist:
            raise ExpenseNotFoundError(f"Expense with ID {expense_id} not found")

    @staticmethod
    @transaction.atomic
    def update_expense(*, expense_id, **changes):
        """
        Apply the given field changes to an expense.

        Changing ``expense_date`` without an explicit period moves the
        expense into the new date's month.
        """
        try:
            expense = Expense.objects.select_for_update().get(id=expense_id)
        except Expense.DoesNotExist:
            raise ExpenseNotFoundError(f"Expense with ID {expense_id} not found")

        if 'expense_date' in changes:
            changes.setdefault('year', changes['expense_date'].year)
            changes.setdefault('month', changes['expense_date'].month)

        validate_period(changes.get('year', expense.year), changes.get('month', expense.month))
        if 'amount' in changes:
            changes['amount'] = validate_amount(changes['amount'])

        for field, value in changes.items():
            setattr(expense, field, value)
        expense.save()

        return expense

    @staticmethod
    @transaction.atomic
    def delete_expense(*, expense_id):
        deleted, _ = Expense.objects.filter(id=expense_id).delete()
        if not deleted:
            raise ExpenseNotFoundError(f"Expense with ID {expense_id} not found")
        logger.info("Expense %s deleted", expense_id)

    @staticmethod
    def list_expenses(*, year=None, month=None, category=None):
        queryset = Expense.objects.all()
        if year is not None:
            validate_period(year, month)
            queryset = queryset.filter(year=year)
        if month is not None:
            queryset = queryset.filter(month=month)
        if category:
            queryset = queryset.filter(category=category)
        return queryset

    @staticmethod
    def expenses_by_month(year):
        """
        Map month -> total expenses for the given year.

        Every expense counts regardless of status. Months without
        expenses are absent from the result.
        """
        validate_period(year)
        rows = (
            Expense.objects
            .filter(year=year)
            .values('month')
            .annotate(total=Sum('amount'))
            .order_by('month')
        )
        return {row['month']: row['total'] or Decimal('0') for row in rows}
