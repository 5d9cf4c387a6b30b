from django.contrib import admin
from .models import Revenue, Expense


@admin.register(Revenue)
class RevenueAdmin(admin.ModelAdmin):
    list_display = ['year', 'month', 'amount', 'updated_at']
    list_filter = ['year']
    ordering = ['-year', '-month']


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    """Expenses grouped by reporting period."""

    list_display = ['name', 'category', 'amount', 'expense_date', 'status', 'year', 'month']
    list_filter = ['category', 'status', 'year', 'month']
    search_fields = ['name', 'notes']
    date_hierarchy = 'expense_date'
    readonly_fields = ['created_at']
