from rest_framework import serializers
from decimal import Decimal
from .models import Revenue, Expense, ExpenseCategory, ExpenseStatus


class RevenueSerializer(serializers.ModelSerializer):
    """Serializer for monthly revenue (also used as upsert input)."""

    month = serializers.IntegerField(min_value=1, max_value=12)
    year = serializers.IntegerField(min_value=1)
    amount = serializers.DecimalField(
        max_digits=15,
        decimal_places=2,
        min_value=Decimal('0')
    )

    class Meta:
        model = Revenue
        fields = ['id', 'year', 'month', 'amount', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']
        # Upsert semantics replace the unique-together check
        validators = []


class ExpenseSerializer(serializers.ModelSerializer):
    """Serializer for Expense model."""

    category_display = serializers.CharField(source='get_category_display', read_only=True)
    status_display = serializers.CharField(source='get_status_display', read_only=True)

    class Meta:
        model = Expense
        fields = [
            'id',
            'name',
            'category',
            'category_display',
            'amount',
            'expense_date',
            'status',
            'status_display',
            'notes',
            'year',
            'month',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']


class ExpenseInputSerializer(serializers.Serializer):
    """Input for creating or editing an expense."""

    name = serializers.CharField(max_length=200)
    category = serializers.ChoiceField(choices=ExpenseCategory.choices)
    amount = serializers.DecimalField(
        max_digits=15,
        decimal_places=2,
        min_value=Decimal('0')
    )
    expense_date = serializers.DateField()
    status = serializers.ChoiceField(choices=ExpenseStatus.choices, required=False)
    notes = serializers.CharField(required=False, allow_blank=True)
    year = serializers.IntegerField(required=False, min_value=1)
    month = serializers.IntegerField(required=False, min_value=1, max_value=12)


# ============================================================================
# Input Serializers (for query parameters)
# ============================================================================

class PeriodFilterSerializer(serializers.Serializer):
    """Validates the year/month query parameters of list endpoints."""

    year = serializers.IntegerField(required=False, min_value=1)
    month = serializers.IntegerField(required=False, min_value=1, max_value=12)

    def validate(self, attrs):
        if 'month' in attrs and 'year' not in attrs:
            raise serializers.ValidationError({'year': 'Year is required when filtering by month.'})
        return attrs


class ExpenseFilterSerializer(PeriodFilterSerializer):
    category = serializers.ChoiceField(choices=ExpenseCategory.choices, required=False)
