"""
Permission classes for artist profiles.
"""
from api.permissions import ArtistResourcePermission, is_admin_user
from api.roles import Permissions


class ArtistPermission(ArtistResourcePermission):
    """
    Artist permissions.

    Any authenticated user may create their own artist profile; reads need
    artist:view and writes artist:edit on that artist. Deleting an artist
    is reserved to administrators.
    """
    artist_field = 'id'
    action_permissions = {
        'list': Permissions.ARTIST_VIEW,
        'retrieve': Permissions.ARTIST_VIEW,
        'update': Permissions.ARTIST_EDIT,
        'partial_update': Permissions.ARTIST_EDIT,
        'destroy': Permissions.ARTIST_DELETE,
    }

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        if view.action == 'create':
            return True
        if view.action == 'list':
            # The queryset only contains reachable artists
            return True
        return super().has_permission(request, view)

    def has_object_permission(self, request, view, obj):
        if view.action == 'destroy':
            return is_admin_user(request.user)
        return super().has_object_permission(request, view, obj)
