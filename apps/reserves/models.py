from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid


class AllocationAccount(models.Model):
    """
    Named reserve bucket receiving a percentage of monthly net profit.

    Percentages are not required to sum to 100; that is left to the operator.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True)
    percentage = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))]
    )
    is_active = models.BooleanField(default=True)

    # Accounts like dividends are allocated but left out of the reserve rollup
    include_in_reserve_total = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'allocation_accounts'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.percentage}%)"


class ReserveExpenditure(models.Model):
    """Money actually spent out of an allocation account."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)

    # Account name the money was drawn from
    source_type = models.CharField(max_length=100)
    amount = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    expenditure_date = models.DateField()
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'reserve_expenditures'
        indexes = [
            models.Index(fields=['expenditure_date'], name='reserve_exp_date_idx'),
            models.Index(fields=['source_type', 'expenditure_date'], name='reserve_exp_source_date_idx'),
        ]
        ordering = ['-expenditure_date', '-created_at']

    def __str__(self):
        return f"{self.name} - {self.amount} ({self.source_type})"
