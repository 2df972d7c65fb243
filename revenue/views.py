import logging
from decimal import Decimal

from django.db.models import Count, Sum
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated

from api.formatting import format_currency
from api.responses import success_response
from api.roles import Permissions
from api.viewsets import BaseViewSet
from .filters import RevenueStreamFilter
from .models import RevenueStream
from .permissions import RevenuePermission
from .serializers import RevenueStreamSerializer

logger = logging.getLogger(__name__)


class RevenueStreamViewSet(BaseViewSet):
    """
    ViewSet for revenue stream CRUD operations.

    Only rows of artists on which the user holds financial:view are
    visible; every action requires the matching financial permission on
    the row's artist.
    """
    queryset = RevenueStream.objects.all()
    serializer_class = RevenueStreamSerializer
    permission_classes = [IsAuthenticated, RevenuePermission]
    visibility_permission = Permissions.FINANCIAL_VIEW
    filterset_class = RevenueStreamFilter
    search_fields = ['platform', 'description', 'artist__stage_name']
    ordering_fields = ['date', 'amount', 'created_at', 'status']
    ordering = ['-date', '-created_at']
    select_related_fields = ['artist', 'created_by']

    def perform_create(self, serializer):
        stream = serializer.save(created_by=self.request.user)
        logger.info(f"Revenue {stream.id} ({stream.amount} {stream.currency}) recorded for artist {stream.artist_id}")

    @action(detail=False, methods=['get'])
    def summary(self, request):
        """
        Totals over the filtered, visible revenue.

        Cancelled rows are left out of the total. Amounts are summed as
        recorded, without currency conversion.
        """
        queryset = self.filter_queryset(self.get_queryset()).exclude(status='cancelled')

        total = queryset.aggregate(total=Sum('amount'))['total'] or Decimal('0')
        by_source = [
            {
                'source': row['source'],
                'label': dict(RevenueStream.SOURCE_CHOICES).get(row['source'], row['source']),
                'total': str(row['total']),
                'count': row['count'],
            }
            for row in queryset.values('source').annotate(total=Sum('amount'), count=Count('id')).order_by('-total')
        ]
        by_status = {
            row['status']: str(row['total'])
            for row in queryset.values('status').annotate(total=Sum('amount')).order_by('status')
        }

        return success_response(
            {
                'total': str(total),
                'formattedTotal': format_currency(total),
                'count': queryset.count(),
                'bySource': by_source,
                'byStatus': by_status,
            },
            'Revenue summary retrieved successfully',
        )
