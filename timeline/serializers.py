from rest_framework import serializers

from identity.serializers import ArtistSummarySerializer
from .models import ActivityTimeline


class ActivityTimelineSerializer(serializers.ModelSerializer):
    artist_detail = ArtistSummarySerializer(source='artist', read_only=True)
    created_by_name = serializers.SerializerMethodField()
    time_ago = serializers.SerializerMethodField()
    icon = serializers.CharField(read_only=True)
    type_label = serializers.CharField(read_only=True)
    status_color = serializers.CharField(read_only=True)
    priority_color = serializers.CharField(read_only=True)

    class Meta:
        model = ActivityTimeline
        fields = [
            'id', 'artist', 'artist_detail', 'created_by', 'created_by_name',
            'type', 'type_label', 'icon', 'action', 'description', 'metadata',
            'related_entity_type', 'related_entity_id',
            'priority', 'priority_color', 'status', 'status_color', 'is_public',
            'time_ago', 'created_at', 'updated_at',
        ]
        read_only_fields = ['created_by', 'created_at', 'updated_at']

    def get_created_by_name(self, obj):
        return obj.created_by.full_name if obj.created_by else None

    def get_time_ago(self, obj):
        return obj.time_ago()

    def validate_artist(self, value):
        if self.instance is not None and value != self.instance.artist:
            raise serializers.ValidationError("Activity cannot be moved to another artist.")
        return value
