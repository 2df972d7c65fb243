import logging

from rest_framework.permissions import IsAuthenticated

from api.roles import Permissions
from api.viewsets import BaseViewSet
from .models import Artist
from .permissions import ArtistPermission
from .serializers import ArtistSerializer

logger = logging.getLogger(__name__)


class ArtistViewSet(BaseViewSet):
    """
    ViewSet for Artist CRUD operations.

    Admins see every artist; other users see artists they own or hold an
    active team membership on.
    """
    queryset = Artist.objects.all()
    serializer_class = ArtistSerializer
    permission_classes = [IsAuthenticated, ArtistPermission]
    visibility_permission = Permissions.ARTIST_VIEW
    artist_lookup = 'id'
    select_related_fields = ['user']
    filterset_fields = ['genre', 'is_verified']
    search_fields = ['stage_name', 'genre', 'location']
    ordering_fields = ['stage_name', 'total_followers', 'total_revenue', 'created_at']
    ordering = ['stage_name']

    def perform_create(self, serializer):
        artist = serializer.save(user=self.request.user)
        logger.info(f"Artist '{artist.stage_name}' created by {self.request.user.email}")
