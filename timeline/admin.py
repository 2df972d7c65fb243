from django.contrib import admin

from .models import ActivityTimeline


@admin.register(ActivityTimeline)
class ActivityTimelineAdmin(admin.ModelAdmin):
    list_display = ['action', 'artist', 'type', 'status', 'priority', 'is_public', 'created_at']
    list_filter = ['type', 'status', 'priority', 'is_public']
    search_fields = ['action', 'description', 'artist__stage_name']
    readonly_fields = ['updated_at']
    raw_id_fields = ['artist', 'created_by']
