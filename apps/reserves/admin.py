from django.contrib import admin
from .models import AllocationAccount, ReserveExpenditure


@admin.register(AllocationAccount)
class AllocationAccountAdmin(admin.ModelAdmin):
    list_display = ['name', 'percentage', 'is_active', 'include_in_reserve_total', 'updated_at']
    list_filter = ['is_active', 'include_in_reserve_total']
    list_editable = ['percentage', 'is_active']
    search_fields = ['name', 'description']


@admin.register(ReserveExpenditure)
class ReserveExpenditureAdmin(admin.ModelAdmin):
    """Expenditures drawn from allocation accounts."""

    list_display = ['name', 'source_type', 'amount', 'expenditure_date']
    list_filter = ['source_type']
    search_fields = ['name', 'notes']
    date_hierarchy = 'expenditure_date'
    readonly_fields = ['created_at']
