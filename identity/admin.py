from django.contrib import admin

from .models import Artist


@admin.register(Artist)
class ArtistAdmin(admin.ModelAdmin):
    list_display = ['stage_name', 'user', 'genre', 'total_followers', 'total_revenue', 'is_verified']
    list_filter = ['genre', 'is_verified']
    search_fields = ['stage_name', 'user__email', 'location']
    raw_id_fields = ['user']
    readonly_fields = ['created_at', 'updated_at']
