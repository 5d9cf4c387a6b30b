import uuid
import pytest
from decimal import Decimal
from datetime import date
from apps.bookkeeping.models import Revenue, Expense
from apps.bookkeeping.services import RevenueService, ExpenseService
from apps.bookkeeping.exceptions import InvalidPeriodError, InvalidAmountError, ExpenseNotFoundError


@pytest.mark.django_db
class TestRevenueService:

    def test_upsert_creates(self):
        revenue, created = RevenueService.upsert_revenue(
            year=2024, month=5, amount=Decimal('8000000')
        )

        assert created is True
        assert revenue.amount == Decimal('8000000')

    def test_upsert_replaces_existing_month(self, march_revenue):
        revenue, created = RevenueService.upsert_revenue(
            year=2024, month=3, amount=Decimal('12000000')
        )

        assert created is False
        assert revenue.id == march_revenue.id
        assert Revenue.objects.count() == 1
        assert Revenue.objects.get().amount == Decimal('12000000')

    @pytest.mark.parametrize('year, month', [(2024, 0), (2024, 13), (0, 1)])
    def test_invalid_period(self, year, month):
        with pytest.raises(InvalidPeriodError):
            RevenueService.upsert_revenue(year=year, month=month, amount=Decimal('1'))

    @pytest.mark.parametrize('amount', [Decimal('-1'), 'abc', None, Decimal('0.005')])
    def test_invalid_amount_rejected(self, amount):
        with pytest.raises(InvalidAmountError):
            RevenueService.upsert_revenue(year=2024, month=5, amount=amount)

        assert Revenue.objects.count() == 0

    def test_invalid_amount_keeps_existing_month(self, march_revenue):
        with pytest.raises(InvalidAmountError):
            RevenueService.upsert_revenue(year=2024, month=3, amount=Decimal('-500'))

        march_revenue.refresh_from_db()
        assert march_revenue.amount == Decimal('10000000')

    def test_zero_revenue_allowed(self):
        revenue, _ = RevenueService.upsert_revenue(year=2024, month=5, amount='0')

        assert revenue.amount == Decimal('0')

    def test_revenue_by_month(self, march_revenue):
        Revenue.objects.create(year=2023, month=3, amount=Decimal('1'))

        assert RevenueService.revenue_by_month(2024) == {3: Decimal('10000000')}


@pytest.mark.django_db
class TestExpenseService:

    def test_period_derived_from_date(self):
        expense = ExpenseService.create_expense(
            name='Tiền điện',
            category='fixed',
            amount=Decimal('2500000'),
            expense_date=date(2024, 6, 30),
        )

        assert (expense.year, expense.month) == (2024, 6)
        assert expense.status == 'spent'

    def test_explicit_period_overrides_date(self):
        expense = ExpenseService.create_expense(
            name='Tiền điện tháng 6',
            category='fixed',
            amount=Decimal('2500000'),
            expense_date=date(2024, 7, 2),
            year=2024,
            month=6,
        )

        assert (expense.year, expense.month) == (2024, 6)

    def test_expenses_by_month_counts_drafts(self, march_expenses):
        assert ExpenseService.expenses_by_month(2024) == {3: Decimal('4000000')}

    def test_update_moves_expense_to_new_month(self, march_expenses):
        expense = march_expenses[0]

        ExpenseService.update_expense(expense_id=expense.id, expense_date=date(2024, 4, 1))

        expense.refresh_from_db()
        assert expense.month == 4
        assert ExpenseService.expenses_by_month(2024) == {
            3: Decimal('1000000'),
            4: Decimal('3000000'),
        }

    def test_update_missing(self, db):
        with pytest.raises(ExpenseNotFoundError):
            ExpenseService.update_expense(expense_id=uuid.uuid4(), name='x')

    def test_delete(self, march_expenses):
        ExpenseService.delete_expense(expense_id=march_expenses[1].id)

        assert Expense.objects.count() == 1

    def test_delete_missing(self, db):
        with pytest.raises(ExpenseNotFoundError):
            ExpenseService.delete_expense(expense_id=uuid.uuid4())

    def test_list_filters(self, march_expenses):
        assert ExpenseService.list_expenses(year=2024, month=3).count() == 2
        assert ExpenseService.list_expenses(year=2024, month=4).count() == 0
        assert ExpenseService.list_expenses(category='staff_salary').count() == 1

    @pytest.mark.parametrize('amount', [Decimal('-1'), 'abc', Decimal('1.001')])
    def test_create_invalid_amount(self, db, amount):
        with pytest.raises(InvalidAmountError):
            ExpenseService.create_expense(
                name='Tiền nước',
                category='fixed',
                amount=amount,
                expense_date=date(2024, 6, 1),
            )

        assert Expense.objects.count() == 0

    def test_update_negative_amount_rejected(self, march_expenses):
        expense = march_expenses[0]

        with pytest.raises(InvalidAmountError):
            ExpenseService.update_expense(expense_id=expense.id, amount=Decimal('-3000000'))

        expense.refresh_from_db()
        assert expense.amount == Decimal('3000000')
        assert ExpenseService.expenses_by_month(2024) == {3: Decimal('4000000')}
