# ==========================================
# apps/inventory/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import StockItem, StockTransaction


class StockTransactionInline(admin.TabularInline):
    """Read-only ledger entries within an item."""
    model = StockTransaction
    extra = 0
    fields = ['transaction_date', 'type', 'quantity', 'unit_price', 'total_price', 'notes']
    readonly_fields = fields
    ordering = ['-transaction_date']

    def has_add_permission(self, request, obj=None):
        """Movements must go through the API so balances stay consistent."""
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(StockItem)
class StockItemAdmin(admin.ModelAdmin):
    """Admin interface for stock items."""

    list_display = [
        'name',
        'category',
        'unit',
        'unit_price',
        'current_stock',
        'min_stock',
        'stock_badge',
        'is_active',
    ]
    list_filter = ['is_active', 'category']
    search_fields = ['name', 'category']
    readonly_fields = ['current_stock', 'created_at']
    inlines = [StockTransactionInline]
    ordering = ['name']

    def stock_badge(self, obj):
        """Display stock level as colored badge."""
        if obj.current_stock <= 0:
            bg, label = '#B85C5C', 'Hết hàng'
        elif obj.is_low_stock:
            bg, label = '#E5A93C', 'Sắp hết'
        else:
            bg, label = '#6B8E5E', 'Còn hàng'
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, label
        )
    stock_badge.short_description = 'Status'


@admin.register(StockTransaction)
class StockTransactionAdmin(admin.ModelAdmin):
    """Read-only admin for the stock ledger."""

    list_display = ['transaction_date', 'item', 'type', 'quantity', 'unit_price', 'total_price']
    list_filter = ['type', 'transaction_date']
    search_fields = ['item__name', 'notes']
    date_hierarchy = 'transaction_date'
    ordering = ['-transaction_date', '-created_at']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
