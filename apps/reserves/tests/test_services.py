import uuid
import pytest
from decimal import Decimal
from datetime import date
from apps.bookkeeping.exceptions import InvalidPeriodError as BookkeepingPeriodError
from apps.bookkeeping.models import Revenue
from apps.bookkeeping.services import RevenueService
from apps.reserves.models import AllocationAccount, ReserveExpenditure
from apps.reserves.services import (
    DEFAULT_ACCOUNTS,
    create_account,
    update_account,
    delete_account,
    seed_default_accounts,
    calculate_allocations,
    monthly_share,
    list_expenditures,
    create_expenditure,
    update_expenditure,
    delete_expenditure,
    summarize_expenditures,
    InvalidPercentageError,
    InvalidPeriodError,
    InvalidAmountError,
    AllocationAccountNotFoundError,
    DuplicateAccountNameError,
    ExpenditureNotFoundError,
)


# =============================================================================
# Allocation calculator
# =============================================================================

class TestMonthlyShare:

    def test_profit_share(self):
        assert monthly_share(Decimal('6000000'), Decimal('25')) == Decimal('1500000')

    @pytest.mark.parametrize('net_profit', [Decimal('0'), Decimal('-2000000'), Decimal('-0.01')])
    def test_no_share_without_profit(self, net_profit):
        assert monthly_share(net_profit, Decimal('40')) == Decimal('0')

    def test_missing_percentage(self):
        assert monthly_share(Decimal('100'), None) == Decimal('0')

    def test_zero_percentage(self):
        assert monthly_share(Decimal('100'), Decimal('0')) == Decimal('0')


@pytest.mark.django_db
class TestCalculateAllocations:

    def test_profitable_month(self, profitable_march, reinvestment):
        result = calculate_allocations(2024, 3)

        assert result['by_account'] == {'reinvestment': Decimal('1500000.00')}
        assert result['total'] == Decimal('1500000.00')
        assert result['months'] == [{
            'month': 3,
            'revenue': Decimal('10000000.00'),
            'expenses': Decimal('4000000.00'),
            'net_profit': Decimal('6000000.00'),
            'allocations': {'reinvestment': Decimal('1500000.00')},
        }]

    def test_loss_month_allocates_zero(self, loss_april, reinvestment, dividends):
        result = calculate_allocations(2024, 4)

        assert result['months'][0]['net_profit'] == Decimal('-2000000.00')
        assert result['by_account'] == {
            'dividends': Decimal('0.00'),
            'reinvestment': Decimal('0.00'),
        }
        assert result['total'] == Decimal('0.00')

    def test_missing_revenue_counts_as_zero(self, reinvestment):
        result = calculate_allocations(2024, 7)

        assert result['months'][0]['revenue'] == Decimal('0.00')
        assert result['by_account']['reinvestment'] == Decimal('0.00')

    def test_year_equals_sum_of_months(self, profitable_march, loss_april, reinvestment):
        Revenue.objects.create(year=2024, month=9, amount=Decimal('3333333.33'))
        account = AllocationAccount.objects.create(name='staff_bonus', percentage=Decimal('7.25'))

        year = calculate_allocations(2024)
        monthly_total = sum(
            (calculate_allocations(2024, m)['by_account'][account.name] for m in range(1, 13)),
            Decimal('0')
        )

        assert len(year['months']) == 12
        # Each monthly figure is rounded on its own, so allow a cent per month
        assert abs(year['by_account'][account.name] - monthly_total) <= Decimal('0.12')
        assert year['by_account']['reinvestment'] == Decimal('1500000.00') + Decimal('833333.33')

    def test_year_sum_uses_unrounded_shares(self, db):
        """Twelve shares of 0.004 sum to 0.05 rather than 12 x 0.00."""
        account = AllocationAccount.objects.create(name='tiny', percentage=Decimal('0.4'))
        for month in range(1, 13):
            Revenue.objects.create(year=2024, month=month, amount=Decimal('1'))

        result = calculate_allocations(2024)

        assert result['months'][0]['allocations'][account.name] == Decimal('0.00')
        assert result['by_account'][account.name] == Decimal('0.05')

    def test_total_excludes_flagged_accounts(self, profitable_march, reinvestment, dividends):
        result = calculate_allocations(2024, 3)

        assert result['by_account']['dividends'] == Decimal('1200000.00')
        assert result['total'] == Decimal('1500000.00')

    def test_inactive_accounts_skipped(self, profitable_march, reinvestment):
        AllocationAccount.objects.create(name='old', percentage=Decimal('50'), is_active=False)

        result = calculate_allocations(2024, 3)

        assert 'old' not in result['by_account']
        assert [a['name'] for a in result['accounts']] == ['reinvestment']

    def test_percentages_need_not_sum_to_100(self, profitable_march):
        AllocationAccount.objects.create(name='a', percentage=Decimal('80'))
        AllocationAccount.objects.create(name='b', percentage=Decimal('80'))

        result = calculate_allocations(2024, 3)

        assert result['total'] == Decimal('9600000.00')

    @pytest.mark.parametrize('year, month', [(2024, 0), (2024, 13), (0, None), (True, None), (2024, '3')])
    def test_invalid_period(self, year, month):
        with pytest.raises(InvalidPeriodError):
            calculate_allocations(year, month)

    def test_period_rules_match_bookkeeping(self):
        """Reserves reports reject exactly the periods bookkeeping rejects."""
        with pytest.raises(BookkeepingPeriodError):
            RevenueService.upsert_revenue(year=2024, month=13, amount=Decimal('1'))
        with pytest.raises(InvalidPeriodError) as excinfo:
            summarize_expenditures(2024, 13)

        assert isinstance(excinfo.value.__cause__, BookkeepingPeriodError)


# =============================================================================
# Expenditures
# =============================================================================

@pytest.mark.django_db
class TestExpenditureSummary:

    def test_year_summary(self, expenditures):
        result = summarize_expenditures(2024)

        assert result['total_expended'] == Decimal('1150000.50')
        assert result['by_account'] == {
            'marketing': Decimal('150000.50'),
            'reinvestment': Decimal('1000000.00'),
        }
        assert result['monthly_expenditure'] == {
            3: {'marketing': Decimal('150000.50'), 'reinvestment': Decimal('700000.00')},
            5: {'reinvestment': Decimal('300000.00')},
        }

    def test_total_equals_sum_of_accounts(self, expenditures):
        result = summarize_expenditures(2024)

        assert result['total_expended'] == sum(result['by_account'].values())

    def test_month_summary(self, expenditures):
        result = summarize_expenditures(2024, 5)

        assert result['total_expended'] == Decimal('300000.00')
        assert list(result['monthly_expenditure']) == [5]

    def test_empty_period(self, db):
        result = summarize_expenditures(2030)

        assert result['total_expended'] == Decimal('0.00')
        assert result['by_account'] == {}
        assert result['monthly_expenditure'] == {}

    def test_invalid_month(self, db):
        with pytest.raises(InvalidPeriodError):
            summarize_expenditures(2024, 14)


@pytest.mark.django_db
class TestExpenditureManagement:

    def test_create(self, db):
        expenditure = create_expenditure(
            name='Sơn lại quán',
            source_type='reinvestment',
            amount=Decimal('2000000'),
            expenditure_date=date(2024, 6, 1),
        )

        assert expenditure.amount == Decimal('2000000')

    @pytest.mark.parametrize('amount', [Decimal('0'), Decimal('-1'), 'abc'])
    def test_create_invalid_amount(self, db, amount):
        with pytest.raises(InvalidAmountError):
            create_expenditure(
                name='x',
                source_type='reinvestment',
                amount=amount,
                expenditure_date=date(2024, 6, 1),
            )

        assert ReserveExpenditure.objects.count() == 0

    def test_list_newest_first(self, expenditures):
        names = [e.name for e in list_expenditures(year=2024)]

        assert names == ['Thay quạt', 'In tờ rơi', 'Mua tủ lạnh']

    def test_list_month(self, expenditures):
        assert list_expenditures(year=2024, month=3).count() == 2

    def test_update(self, expenditures):
        expenditure = update_expenditure(
            expenditure_id=expenditures[0].id,
            amount=Decimal('650000'),
            source_type='depreciation',
        )

        assert expenditure.amount == Decimal('650000')
        assert expenditure.source_type == 'depreciation'

    def test_update_missing(self, db):
        with pytest.raises(ExpenditureNotFoundError):
            update_expenditure(expenditure_id=uuid.uuid4(), name='x')

    def test_delete(self, expenditures):
        delete_expenditure(expenditure_id=expenditures[0].id)

        assert ReserveExpenditure.objects.count() == 2

    def test_delete_missing(self, db):
        with pytest.raises(ExpenditureNotFoundError):
            delete_expenditure(expenditure_id=uuid.uuid4())


# =============================================================================
# Allocation accounts
# =============================================================================

@pytest.mark.django_db
class TestAccountManagement:

    def test_create(self, db):
        account = create_account(name='marketing', percentage='10', include_in_reserve_total=False)

        assert account.percentage == Decimal('10')
        assert account.include_in_reserve_total is False

    @pytest.mark.parametrize('percentage', ['-1', '100.01', 'abc'])
    def test_invalid_percentage(self, db, percentage):
        with pytest.raises(InvalidPercentageError):
            create_account(name='x', percentage=percentage)

    def test_boundaries_allowed(self, db):
        create_account(name='none', percentage='0')
        create_account(name='all', percentage='100')

        assert AllocationAccount.objects.count() == 2

    def test_duplicate_name(self, reinvestment):
        with pytest.raises(DuplicateAccountNameError):
            create_account(name='reinvestment', percentage='5')

    def test_update(self, reinvestment):
        account = update_account(account_id=reinvestment.id, percentage='30', is_active=False)

        assert account.percentage == Decimal('30')
        assert account.is_active is False

    def test_rename_to_taken_name(self, reinvestment, dividends):
        with pytest.raises(DuplicateAccountNameError):
            update_account(account_id=dividends.id, name='reinvestment')

    def test_update_missing(self, db):
        with pytest.raises(AllocationAccountNotFoundError):
            update_account(account_id=uuid.uuid4(), percentage='1')

    def test_delete_keeps_expenditures(self, reinvestment, expenditures):
        delete_account(account_id=reinvestment.id)

        assert ReserveExpenditure.objects.filter(source_type='reinvestment').count() == 2

    def test_seed_default_accounts(self, db):
        assert seed_default_accounts() == len(DEFAULT_ACCOUNTS)
        assert seed_default_accounts() == 0

        excluded = set(
            AllocationAccount.objects
            .filter(include_in_reserve_total=False)
            .values_list('name', flat=True)
        )
        assert excluded == {'dividends', 'marketing'}
