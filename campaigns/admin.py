from django.contrib import admin

from .models import MarketingCampaign


@admin.register(MarketingCampaign)
class MarketingCampaignAdmin(admin.ModelAdmin):
    list_display = [
        'name',
        'artist',
        'type',
        'status',
        'budget',
        'spent_amount',
        'start_date',
        'end_date',
    ]
    list_filter = ['status', 'type', 'created_at']
    search_fields = ['name', 'description', 'artist__stage_name']
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['artist', 'created_by']

    fieldsets = (
        ('Campaign Information', {
            'fields': ('name', 'description', 'type', 'status', 'platforms')
        }),
        ('Relationships', {
            'fields': ('artist', 'created_by')
        }),
        ('Budget', {
            'fields': ('budget', 'spent_amount')
        }),
        ('Schedule', {
            'fields': ('start_date', 'end_date')
        }),
        ('Targeting & Results', {
            'fields': ('target_audience', 'goals', 'metrics', 'assets'),
            'classes': ('collapse',)
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
