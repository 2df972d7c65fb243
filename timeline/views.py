from rest_framework.permissions import IsAuthenticated

from api.roles import Permissions
from api.viewsets import BaseViewSet
from .models import ActivityTimeline
from .permissions import ActivityPermission
from .serializers import ActivityTimelineSerializer


class ActivityTimelineViewSet(BaseViewSet):
    """
    ViewSet for an artist's activity feed, newest first.
    """
    queryset = ActivityTimeline.objects.all()
    serializer_class = ActivityTimelineSerializer
    permission_classes = [IsAuthenticated, ActivityPermission]
    visibility_permission = Permissions.ARTIST_VIEW
    filterset_fields = ['artist', 'type', 'status', 'priority', 'is_public']
    search_fields = ['action', 'description']
    ordering_fields = ['created_at', 'priority', 'type']
    ordering = ['-created_at']
    select_related_fields = ['artist', 'created_by']
