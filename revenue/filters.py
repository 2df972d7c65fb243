import django_filters

from .models import RevenueStream


class RevenueStreamFilter(django_filters.FilterSet):
    """
    Filter revenue by source, status, artist and date range.
    """

    source = django_filters.MultipleChoiceFilter(choices=RevenueStream.SOURCE_CHOICES)
    status = django_filters.MultipleChoiceFilter(choices=RevenueStream.STATUS_CHOICES)
    artist = django_filters.NumberFilter(field_name='artist__id')
    date_from = django_filters.DateFilter(field_name='date', lookup_expr='gte')
    date_to = django_filters.DateFilter(field_name='date', lookup_expr='lte')
    min_amount = django_filters.NumberFilter(field_name='amount', lookup_expr='gte')

    class Meta:
        model = RevenueStream
        fields = ['source', 'status', 'artist', 'currency', 'is_recurring', 'date_from', 'date_to', 'min_amount']
