import django_filters

from .models import MarketingCampaign


class MarketingCampaignFilter(django_filters.FilterSet):
    """
    Filter for campaigns with support for:
    - Status and type filtering
    - Artist filtering
    - Date range filtering
    """

    status = django_filters.MultipleChoiceFilter(
        choices=MarketingCampaign.STATUS_CHOICES,
        help_text="Filter by status (can specify multiple)"
    )

    type = django_filters.MultipleChoiceFilter(
        choices=MarketingCampaign.TYPE_CHOICES,
        help_text="Filter by campaign type (can specify multiple)"
    )

    artist = django_filters.NumberFilter(
        field_name='artist__id',
        help_text="Filter by artist ID"
    )

    starts_after = django_filters.DateTimeFilter(
        field_name='start_date',
        lookup_expr='gte',
        help_text="Filter campaigns starting after this date"
    )

    starts_before = django_filters.DateTimeFilter(
        field_name='start_date',
        lookup_expr='lte',
        help_text="Filter campaigns starting before this date"
    )

    created_after = django_filters.DateTimeFilter(
        field_name='created_at',
        lookup_expr='gte',
        help_text="Filter campaigns created after this date"
    )

    class Meta:
        model = MarketingCampaign
        fields = ['status', 'type', 'artist', 'starts_after', 'starts_before', 'created_after']
