import logging

from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated

from api.responses import success_response
from api.roles import Permissions
from api.viewsets import BaseViewSet
from .filters import MarketingCampaignFilter
from .models import MarketingCampaign
from .permissions import CampaignPermission
from .serializers import MarketingCampaignSerializer

logger = logging.getLogger(__name__)


class MarketingCampaignViewSet(BaseViewSet):
    """
    ViewSet for marketing campaign CRUD operations.

    Only campaigns of artists on which the user holds marketing:view are
    visible; writes need the marketing permissions on the campaign's artist.
    """
    queryset = MarketingCampaign.objects.all()
    serializer_class = MarketingCampaignSerializer
    permission_classes = [IsAuthenticated, CampaignPermission]
    visibility_permission = Permissions.MARKETING_VIEW
    filterset_class = MarketingCampaignFilter
    search_fields = ['name', 'description', 'artist__stage_name']
    ordering_fields = ['created_at', 'start_date', 'end_date', 'budget', 'spent_amount', 'name', 'status']
    ordering = ['-created_at']
    select_related_fields = ['artist', 'created_by']

    def perform_update(self, serializer):
        campaign = serializer.save()
        if campaign.complete_if_ended():
            campaign.save(update_fields=['status', 'updated_at'])
            logger.info(f"Campaign {campaign.id} auto-completed on update (end date {campaign.end_date})")

    @action(detail=True, methods=['get'])
    def performance(self, request, pk=None):
        """
        Score the campaign's metrics against its goals.

        Returns: {score, details, status}
        """
        campaign = self.get_object()
        return success_response(
            campaign.calculate_performance(),
            'Campaign performance calculated successfully',
        )
