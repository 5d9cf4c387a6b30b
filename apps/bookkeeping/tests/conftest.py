import pytest
from decimal import Decimal
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.bookkeeping.models import Revenue, Expense, ExpenseCategory, ExpenseStatus


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def accountant(db):
    return User.objects.create_user(
        phone='0901000002',
        password='TestPass123!',
        name='Kế toán',
    )


@pytest.fixture
def accountant_client(api_client, accountant):
    """Return API client authenticated as accountant."""
    refresh = RefreshToken.for_user(accountant)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def march_revenue(db):
    return Revenue.objects.create(year=2024, month=3, amount=Decimal('10000000'))


@pytest.fixture
def march_expenses(db):
    """Two March expenses totalling 4,000,000 (one of them a draft)."""
    return [
        Expense.objects.create(
            name='Lương tháng 3',
            category=ExpenseCategory.STAFF_SALARY,
            amount=Decimal('3000000'),
            expense_date=date(2024, 3, 28),
        ),
        Expense.objects.create(
            name='Sửa máy pha',
            category=ExpenseCategory.ADDITIONAL,
            amount=Decimal('1000000'),
            expense_date=date(2024, 3, 12),
            status=ExpenseStatus.DRAFT,
        ),
    ]
