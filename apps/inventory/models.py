from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class TransactionType(models.TextChoices):
    IN = 'in', 'Nhập kho'
    OUT = 'out', 'Xuất kho'


class StockItem(models.Model):
    """Inventory item with a cached running balance."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=200)
    category = models.CharField(max_length=100, blank=True)
    unit = models.CharField(max_length=50)
    unit_price = models.DecimalField(
        max_digits=12,
        decimal_places=0,
        validators=[MinValueValidator(Decimal('0'))]
    )

    # Derived from the ledger; only the balance maintainer writes it
    current_stock = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00')
    )
    min_stock = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0'))]
    )

    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'stock_items'
        indexes = [
            models.Index(fields=['is_active', 'name'], name='stock_item_active_name_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.current_stock} {self.unit})"

    @property
    def is_low_stock(self):
        """True when the balance has reached the reorder threshold."""
        return self.current_stock <= self.min_stock


class StockTransaction(models.Model):
    """Single in/out movement against a stock item."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    item = models.ForeignKey(
        StockItem,
        on_delete=models.PROTECT,
        related_name='transactions'
    )
    type = models.CharField(max_length=3, choices=TransactionType.choices)
    quantity = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )

    # Pricing (optional)
    unit_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True
    )
    total_price = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        null=True,
        blank=True
    )

    notes = models.TextField(blank=True)
    transaction_date = models.DateField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'stock_transactions'
        indexes = [
            models.Index(fields=['item', 'transaction_date'], name='stock_txn_item_date_idx'),
            models.Index(fields=['type', 'transaction_date'], name='stock_txn_type_date_idx'),
        ]
        ordering = ['-transaction_date', '-created_at']

    def __str__(self):
        return f"{self.get_type_display()} {self.quantity} - {self.item.name}"

    @property
    def signed_quantity(self):
        """Quantity with the sign it contributes to the item balance."""
        if self.type == TransactionType.IN:
            return self.quantity
        return -self.quantity
