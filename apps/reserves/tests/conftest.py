import pytest
from decimal import Decimal
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.bookkeeping.models import Revenue, Expense, ExpenseCategory
from apps.reserves.models import AllocationAccount, ReserveExpenditure


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def owner(db):
    return User.objects.create_user(
        phone='0901000003',
        password='TestPass123!',
        name='Chủ quán',
    )


@pytest.fixture
def owner_client(api_client, owner):
    """Return API client authenticated as the shop owner."""
    refresh = RefreshToken.for_user(owner)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


def _revenue(month, amount, year=2024):
    return Revenue.objects.create(year=year, month=month, amount=Decimal(amount))


def _expense(month, amount, year=2024):
    return Expense.objects.create(
        name=f'Chi phí tháng {month}',
        category=ExpenseCategory.FIXED,
        amount=Decimal(amount),
        expense_date=date(year, month, 15),
    )


@pytest.fixture
def profitable_march(db):
    """March 2024: revenue 10,000,000, expenses 4,000,000, net 6,000,000."""
    _revenue(3, '10000000')
    _expense(3, '4000000')


@pytest.fixture
def loss_april(db):
    """April 2024: revenue 1,000,000, expenses 3,000,000, net -2,000,000."""
    _revenue(4, '1000000')
    _expense(4, '3000000')


@pytest.fixture
def reinvestment(db):
    return AllocationAccount.objects.create(name='reinvestment', percentage=Decimal('25'))


@pytest.fixture
def dividends(db):
    """Account allocated to but kept out of the reserve total."""
    return AllocationAccount.objects.create(
        name='dividends',
        percentage=Decimal('20'),
        include_in_reserve_total=False,
    )


@pytest.fixture
def expenditures(db):
    """Three expenditures across two accounts and two months."""
    return [
        ReserveExpenditure.objects.create(
            name='Mua tủ lạnh',
            source_type='reinvestment',
            amount=Decimal('700000'),
            expenditure_date=date(2024, 3, 10),
        ),
        ReserveExpenditure.objects.create(
            name='In tờ rơi',
            source_type='marketing',
            amount=Decimal('150000.50'),
            expenditure_date=date(2024, 3, 20),
        ),
        ReserveExpenditure.objects.create(
            name='Thay quạt',
            source_type='reinvestment',
            amount=Decimal('300000'),
            expenditure_date=date(2024, 5, 2),
        ),
    ]
