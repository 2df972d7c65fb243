from rest_framework import serializers

from identity.serializers import ArtistSummarySerializer
from .models import MarketingCampaign


class MarketingCampaignSerializer(serializers.ModelSerializer):
    """Serializer for marketing campaigns, with derived budget fields."""
    artist_detail = ArtistSummarySerializer(source='artist', read_only=True)
    created_by_name = serializers.SerializerMethodField()
    type_display = serializers.CharField(source='get_type_display', read_only=True)
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    remaining_budget = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    budget_usage_percentage = serializers.FloatField(read_only=True)
    duration_days = serializers.IntegerField(read_only=True)

    class Meta:
        model = MarketingCampaign
        fields = [
            'id', 'artist', 'artist_detail', 'created_by', 'created_by_name',
            'name', 'description', 'type', 'type_display', 'status', 'status_display',
            'platforms', 'budget', 'spent_amount', 'remaining_budget', 'budget_usage_percentage',
            'target_audience', 'start_date', 'end_date', 'duration_days',
            'goals', 'metrics', 'assets',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['created_by', 'created_at', 'updated_at']

    def get_created_by_name(self, obj):
        return obj.created_by.get_full_name() if obj.created_by else None

    def validate_platforms(self, value):
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise serializers.ValidationError("Platforms must be a list of strings.")
        return value

    def validate_assets(self, value):
        if not isinstance(value, list):
            raise serializers.ValidationError("Assets must be a list of URLs.")
        url_field = serializers.URLField()
        for item in value:
            url_field.run_validation(item)
        return value

    def validate_artist(self, value):
        if self.instance is not None and value != self.instance.artist:
            raise serializers.ValidationError("A campaign cannot be moved to another artist.")
        return value

    def validate(self, attrs):
        start_date = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        end_date = attrs.get('end_date', getattr(self.instance, 'end_date', None))
        if start_date and end_date and end_date <= start_date:
            raise serializers.ValidationError({'end_date': "End date must be after start date"})
        return attrs
