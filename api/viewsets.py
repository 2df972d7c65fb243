"""
Base ViewSet with automatic artist-team queryset filtering.

Provides clean separation of concerns:
- Queryset filtering: "what rows exist" (data visibility)
- Permission classes: "who may act" (authorization)

DRF only calls has_object_permission() through get_object(); detail
actions must fetch rows with self.get_object().
"""
from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .permissions import artist_ids_with_permission, is_admin_user
from .responses import success_body

ACTION_MESSAGES = {
    'list': '{name} retrieved successfully',
    'retrieve': '{name} retrieved successfully',
    'create': '{name} created successfully',
    'update': '{name} updated successfully',
    'partial_update': '{name} updated successfully',
}


def is_enveloped(data):
    return isinstance(data, dict) and 'success' in data and 'meta' in data


class BaseViewSet(viewsets.ModelViewSet):
    """
    Base ViewSet with automatic artist-team queryset filtering.

    Configuration attributes (override in subclass):
    - visibility_permission: permission the user must hold on a row's
      artist for the row to exist for them (e.g. 'financial:view')
    - artist_lookup: lookup from the row to its artist id (default: 'artist_id')
    - select_related_fields: List of fields for select_related optimization
    - prefetch_related_fields: List of fields for prefetch_related optimization

    Example usage:
        class CampaignViewSet(BaseViewSet):
            queryset = MarketingCampaign.objects.all()
            permission_classes = [IsAuthenticated, CampaignPermission]
            visibility_permission = Permissions.MARKETING_VIEW
            select_related_fields = ['artist', 'created_by']
    """

    permission_classes = [IsAuthenticated]
    visibility_permission = None
    artist_lookup = 'artist_id'
    select_related_fields = []
    prefetch_related_fields = []

    def get_queryset(self):
        """
        Restrict rows to artists on which the user holds visibility_permission.

        Each artist is checked against the user's membership on that artist
        alone; a permission held on one artist never exposes another's rows.

        Returns:
            QuerySet: rows visible to the requesting user
        """
        queryset = super().get_queryset()
        user = self.request.user

        if self.select_related_fields:
            queryset = queryset.select_related(*self.select_related_fields)
        if self.prefetch_related_fields:
            queryset = queryset.prefetch_related(*self.prefetch_related_fields)

        if not user or not user.is_authenticated:
            return queryset.none()

        # Admins always see everything
        if is_admin_user(user):
            return queryset

        if self.visibility_permission is None:
            raise NotImplementedError(f"{self.__class__.__name__} must set visibility_permission")

        artist_ids = artist_ids_with_permission(user, self.visibility_permission)
        if not artist_ids:
            return queryset.none()
        return queryset.filter(**{f'{self.artist_lookup}__in': artist_ids})

    def perform_create(self, serializer):
        serializer.save(created_by=self.request.user)

    def success_message(self):
        model = self.queryset.model if self.queryset is not None else None
        if model is None:
            name = 'Data'
        elif self.action == 'list':
            name = str(model._meta.verbose_name_plural)
        else:
            name = str(model._meta.verbose_name)
        return ACTION_MESSAGES.get(self.action, 'Operation completed successfully').format(name=name)

    def finalize_response(self, request, response, *args, **kwargs):
        """
        Wrap successful payloads in the success envelope.

        Error responses are already enveloped by the exception handler and
        204 responses carry no body.
        """
        if (
            isinstance(response, Response)
            and response.status_code < 400
            and response.status_code != status.HTTP_204_NO_CONTENT
            and not is_enveloped(response.data)
        ):
            response.data = success_body(response.data, self.success_message())
        return super().finalize_response(request, response, *args, **kwargs)
