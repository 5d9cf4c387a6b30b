from rest_framework import serializers
from decimal import Decimal
from .models import AllocationAccount, ReserveExpenditure


class AllocationAccountSerializer(serializers.ModelSerializer):
    """Serializer for AllocationAccount model."""

    class Meta:
        model = AllocationAccount
        fields = [
            'id',
            'name',
            'description',
            'percentage',
            'is_active',
            'include_in_reserve_total',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class AllocationAccountInputSerializer(serializers.Serializer):
    """Input for creating or editing an allocation account."""

    name = serializers.CharField(max_length=100)
    description = serializers.CharField(required=False, allow_blank=True)
    percentage = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        min_value=Decimal('0'),
        max_value=Decimal('100')
    )
    is_active = serializers.BooleanField(required=False)
    include_in_reserve_total = serializers.BooleanField(required=False)


class ReserveExpenditureSerializer(serializers.ModelSerializer):
    """Serializer for ReserveExpenditure model."""

    class Meta:
        model = ReserveExpenditure
        fields = [
            'id',
            'name',
            'source_type',
            'amount',
            'expenditure_date',
            'notes',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']


class ReserveExpenditureInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    source_type = serializers.CharField(max_length=100)
    amount = serializers.DecimalField(
        max_digits=15,
        decimal_places=2,
        min_value=Decimal('0.01')
    )
    expenditure_date = serializers.DateField()
    notes = serializers.CharField(required=False, allow_blank=True)


# ============================================================================
# Input Serializers (for query parameters)
# ============================================================================

class ExpenditureFilterSerializer(serializers.Serializer):
    """Validates query parameters for the expenditure list."""

    year = serializers.IntegerField(required=False, min_value=1)
    month = serializers.IntegerField(required=False, min_value=1, max_value=12)

    def validate(self, attrs):
        if 'month' in attrs and 'year' not in attrs:
            raise serializers.ValidationError({'year': 'Year is required when filtering by month.'})
        return attrs


class ReportPeriodSerializer(serializers.Serializer):
    """Validates the year/month of a summary report."""

    year = serializers.IntegerField(min_value=1)
    month = serializers.IntegerField(required=False, min_value=1, max_value=12)


# ============================================================================
# Response Serializers
# ============================================================================

def _money_field():
    return serializers.DecimalField(max_digits=15, decimal_places=2)


class AllocatedAccountSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    description = serializers.CharField()
    percentage = serializers.DecimalField(max_digits=5, decimal_places=2)
    include_in_reserve_total = serializers.BooleanField()
    amount = _money_field()


class MonthlyAllocationSerializer(serializers.Serializer):
    month = serializers.IntegerField()
    revenue = _money_field()
    expenses = _money_field()
    net_profit = _money_field()
    allocations = serializers.DictField(child=_money_field())


class AllocationSummarySerializer(serializers.Serializer):
    """Net profit allocation for a month or a year."""

    year = serializers.IntegerField()
    month = serializers.IntegerField(allow_null=True)
    accounts = AllocatedAccountSerializer(many=True)
    by_account = serializers.DictField(child=_money_field())
    total = _money_field()
    months = MonthlyAllocationSerializer(many=True)


class ExpenditureSummarySerializer(serializers.Serializer):
    """Expenditure totals per source account and per month."""

    year = serializers.IntegerField()
    month = serializers.IntegerField(allow_null=True)
    total_expended = _money_field()
    by_account = serializers.DictField(child=_money_field())
    monthly_expenditure = serializers.DictField(
        child=serializers.DictField(child=_money_field())
    )
