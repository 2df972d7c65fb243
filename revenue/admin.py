from django.contrib import admin

from .models import RevenueStream


@admin.register(RevenueStream)
class RevenueStreamAdmin(admin.ModelAdmin):
    list_display = ['artist', 'source', 'platform', 'amount', 'currency', 'date', 'status', 'is_recurring']
    list_filter = ['source', 'status', 'currency', 'is_recurring', 'date']
    search_fields = ['platform', 'description', 'artist__stage_name', 'contract_id']
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['artist', 'created_by']
    date_hierarchy = 'date'
