"""
Django Admin configuration for the purchases app.
Stored purchases are immutable, so the admin only lists and shows them.
"""

from django.contrib import admin

from apps.purchases.infrastructure.persistence.models import PurchaseTransactionRecord


@admin.register(PurchaseTransactionRecord)
class PurchaseTransactionRecordAdmin(admin.ModelAdmin):
    """Read-only admin interface for stored purchase transactions."""

    list_display = ('description', 'transaction_date', 'amount_usd', 'created_at')
    list_filter = ('transaction_date',)
    search_fields = ('description',)
    readonly_fields = ('id', 'description', 'transaction_date', 'amount_usd', 'created_at', 'updated_at')
    date_hierarchy = 'transaction_date'
    ordering = ('-transaction_date', '-created_at')

    fieldsets = (
        ('Purchase', {
            'fields': ('description', 'transaction_date', 'amount_usd')
        }),
        ('Metadata', {
            'fields': ('id', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
