from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid


class ExpenseCategory(models.TextChoices):
    STAFF_SALARY = 'staff_salary', 'Lương nhân viên'
    INGREDIENTS = 'ingredients', 'Nguyên liệu'
    FIXED = 'fixed', 'Chi phí cố định'
    ADDITIONAL = 'additional', 'Chi phí phát sinh'


class ExpenseStatus(models.TextChoices):
    SPENT = 'spent', 'Đã chi'
    DRAFT = 'draft', 'Nháp'


class Revenue(models.Model):
    """Revenue total for one calendar month."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    year = models.PositiveIntegerField()
    month = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(12)]
    )
    amount = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'revenues'
        constraints = [
            models.UniqueConstraint(fields=['year', 'month'], name='unique_revenue_period'),
        ]
        ordering = ['year', 'month']

    def __str__(self):
        return f"{self.month:02d}/{self.year}: {self.amount}"


class Expense(models.Model):
    """Categorized expense; year and month are denormalized from the date."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    category = models.CharField(max_length=20, choices=ExpenseCategory.choices)
    amount = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )
    expense_date = models.DateField()
    status = models.CharField(
        max_length=10,
        choices=ExpenseStatus.choices,
        default=ExpenseStatus.SPENT
    )
    notes = models.TextField(blank=True)

    year = models.PositiveIntegerField()
    month = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(12)]
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'expenses'
        indexes = [
            models.Index(fields=['year', 'month'], name='expense_period_idx'),
        ]
        ordering = ['-expense_date', '-created_at']

    def __str__(self):
        return f"{self.name} - {self.amount} ({self.get_category_display()})"

    def save(self, *args, **kwargs):
        """Fill the reporting period from the expense date when missing."""
        if self.expense_date and not self.year:
            self.year = self.expense_date.year
        if self.expense_date and not self.month:
            self.month = self.expense_date.month
        super().save(*args, **kwargs)
