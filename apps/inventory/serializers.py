from decimal import Decimal
from rest_framework import serializers
from .models import StockItem, StockTransaction, TransactionType


# =============================================================================
# Input Serializers
# =============================================================================

class StockTransactionFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for stock transaction filtering.

    Query Parameters:
        type (str): 'in' or 'out'
        item (UUID): Filter by stock item
        date_from (date): Transactions from this date
        date_to (date): Transactions up to this date
    """

    type = serializers.ChoiceField(choices=TransactionType.choices, required=False)
    item = serializers.UUIDField(required=False)
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)

    def validate(self, attrs):
        """Validate date range."""
        date_from = attrs.get('date_from')
        date_to = attrs.get('date_to')

        if date_from and date_to and date_from > date_to:
            raise serializers.ValidationError({
                'date_to': 'End date must be after start date'
            })

        return attrs


class StockItemInputSerializer(serializers.Serializer):
    """Validate stock item create/update payloads."""

    name = serializers.CharField(max_length=200)
    unit = serializers.CharField(max_length=50)
    unit_price = serializers.DecimalField(
        max_digits=12, decimal_places=0, min_value=Decimal('0')
    )
    category = serializers.CharField(max_length=100, required=False, allow_blank=True)
    min_stock = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal('0'), required=False
    )


class StockTransactionCreateSerializer(serializers.Serializer):
    """Validate a new stock movement."""

    item = serializers.UUIDField()
    type = serializers.ChoiceField(choices=TransactionType.choices)
    quantity = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal('0.01')
    )
    unit_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal('0'),
        required=False, allow_null=True
    )
    transaction_date = serializers.DateField()
    notes = serializers.CharField(required=False, allow_blank=True)


class StockTransactionUpdateSerializer(StockTransactionCreateSerializer):
    """Validate a (partial) edit of a stock movement."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            field.required = False


# =============================================================================
# Output Serializers
# =============================================================================

class StockItemSerializer(serializers.ModelSerializer):
    """Stock item with its cached balance."""

    is_low_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = StockItem
        fields = [
            'id',
            'name',
            'category',
            'unit',
            'unit_price',
            'current_stock',
            'min_stock',
            'is_low_stock',
            'is_active',
            'created_at',
        ]
        read_only_fields = fields


class StockTransactionSerializer(serializers.ModelSerializer):
    """Ledger entry with the item's name and current balance."""

    item_name = serializers.CharField(source='item.name', read_only=True)
    item_unit = serializers.CharField(source='item.unit', read_only=True)
    item_current_stock = serializers.DecimalField(
        source='item.current_stock', max_digits=10, decimal_places=2, read_only=True
    )

    class Meta:
        model = StockTransaction
        fields = [
            'id',
            'item',
            'item_name',
            'item_unit',
            'item_current_stock',
            'type',
            'quantity',
            'unit_price',
            'total_price',
            'notes',
            'transaction_date',
            'created_at',
        ]
        read_only_fields = fields


class PriceHistoryEntrySerializer(serializers.Serializer):
    """One priced movement in an item's price history."""

    date = serializers.DateField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    type = serializers.CharField()
    quantity = serializers.DecimalField(max_digits=10, decimal_places=2)
    notes = serializers.CharField(allow_blank=True)
