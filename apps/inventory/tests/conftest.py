import pytest
from decimal import Decimal
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.inventory.models import StockItem, StockTransaction, TransactionType


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def stock_user(db):
    """Create and return a back-office user."""
    return User.objects.create_user(
        phone='0901000001',
        password='TestPass123!',
        name='Thủ kho',
    )


@pytest.fixture
def stock_client(api_client, stock_user):
    """Return API client authenticated as the stock user."""
    refresh = RefreshToken.for_user(stock_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def milk(db):
    """Stock item with an empty balance."""
    return StockItem.objects.create(
        name='Sữa tươi',
        category='Nguyên liệu',
        unit='hộp',
        unit_price=Decimal('32000'),
        min_stock=Decimal('10.00'),
    )


@pytest.fixture
def tea_leaves(db):
    """Second stock item with an empty balance."""
    return StockItem.objects.create(
        name='Trà ô long',
        category='Nguyên liệu',
        unit='kg',
        unit_price=Decimal('450000'),
        min_stock=Decimal('2.00'),
    )


@pytest.fixture
def inactive_item(db):
    return StockItem.objects.create(
        name='Ly nhựa cũ',
        unit='cái',
        unit_price=Decimal('500'),
        is_active=False,
    )


@pytest.fixture
def milk_intake(milk):
    """
    An 'in' movement of 50 on milk, recorded through the service so the
    balance matches the ledger (50).
    """
    from apps.inventory.services import create_transaction

    return create_transaction(
        item_id=milk.id,
        direction=TransactionType.IN,
        quantity=Decimal('50'),
        transaction_date=date(2024, 3, 1),
        unit_price=Decimal('30000'),
        notes='Nhập đầu tháng',
    )


@pytest.fixture
def raw_transaction(milk):
    """Ledger row written directly, bypassing the balance maintainer."""
    return StockTransaction.objects.create(
        item=milk,
        type=TransactionType.IN,
        quantity=Decimal('7.00'),
        transaction_date=date(2024, 2, 1),
    )
