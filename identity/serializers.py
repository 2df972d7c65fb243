from rest_framework import serializers

from .models import HANDLE_FIELDS, Artist, strip_handle


class ArtistSerializer(serializers.ModelSerializer):
    """Serializer for Artist profiles."""
    owner_email = serializers.EmailField(source='user.email', read_only=True)
    social_links = serializers.ReadOnlyField()
    formatted_followers = serializers.ReadOnlyField()
    formatted_revenue = serializers.ReadOnlyField()

    class Meta:
        model = Artist
        fields = [
            'id', 'user', 'owner_email', 'stage_name', 'bio', 'genre',
            'website', 'avatar', 'banner',
            'spotify_id', 'apple_id', 'youtube_id', 'facebook_id',
            'instagram_handle', 'tiktok_handle', 'twitter_handle',
            'location', 'founded_year', 'is_verified',
            'total_followers', 'total_streams', 'total_revenue', 'monthly_listeners',
            'social_links', 'formatted_followers', 'formatted_revenue',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['user', 'is_verified', 'created_at', 'updated_at']

    def to_internal_value(self, data):
        # Handles are validated without their leading '@'
        if hasattr(data, 'copy'):
            data = data.copy()
            for field in HANDLE_FIELDS:
                if field in data and isinstance(data[field], str):
                    data[field] = strip_handle(data[field])
        return super().to_internal_value(data)


class ArtistSummarySerializer(serializers.ModelSerializer):
    """Lightweight serializer for nesting an artist in other resources."""

    class Meta:
        model = Artist
        fields = ['id', 'stage_name', 'avatar']
