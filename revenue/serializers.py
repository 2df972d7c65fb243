from decimal import Decimal

from rest_framework import serializers

from identity.serializers import ArtistSummarySerializer
from .models import CURRENCY_SYMBOLS, RevenueStream


class RevenueStreamSerializer(serializers.ModelSerializer):
    """Serializer for revenue streams, with display helpers."""
    artist_detail = ArtistSummarySerializer(source='artist', read_only=True)
    currency = serializers.CharField(max_length=3, required=False, default='EUR')
    source_label = serializers.CharField(read_only=True)
    formatted_amount = serializers.CharField(read_only=True)
    is_overdue = serializers.SerializerMethodField()
    net_amount = serializers.SerializerMethodField()

    class Meta:
        model = RevenueStream
        fields = [
            'id', 'artist', 'artist_detail', 'created_by',
            'source', 'source_label', 'platform', 'amount', 'currency', 'formatted_amount',
            'date', 'description', 'metadata',
            'is_recurring', 'recurring_period', 'contract_id', 'taxable',
            'status', 'payout_date', 'is_overdue', 'net_amount',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['created_by', 'created_at', 'updated_at']

    def get_is_overdue(self, obj):
        return obj.is_overdue()

    def get_net_amount(self, obj):
        return str(obj.net_amount().quantize(Decimal('0.01')))

    def validate_currency(self, value):
        value = value.upper()
        if value not in CURRENCY_SYMBOLS:
            raise serializers.ValidationError(f"Unsupported currency '{value}'.")
        return value

    def validate_artist(self, value):
        if self.instance is not None and value != self.instance.artist:
            raise serializers.ValidationError("Revenue cannot be moved to another artist.")
        return value

    def validate(self, attrs):
        is_recurring = attrs.get('is_recurring', getattr(self.instance, 'is_recurring', False))
        recurring_period = attrs.get('recurring_period', getattr(self.instance, 'recurring_period', None))
        if is_recurring and not recurring_period:
            raise serializers.ValidationError(
                {'recurring_period': "Recurring period must be specified for recurring revenue"}
            )
        if not is_recurring and recurring_period:
            raise serializers.ValidationError(
                {'recurring_period': "Recurring period should not be set for non-recurring revenue"}
            )
        return attrs
