"""
Custom permissions for campaign access.

Uses the artist-scoped permission classes from api.permissions.
"""
from api.permissions import ArtistResourcePermission
from api.roles import Permissions


class CampaignPermission(ArtistResourcePermission):
    """
    Campaign-level permissions checked against the campaign's artist.

    Object-level permission is enforced via:
    1. get_queryset() filtering (data visibility)
    2. has_object_permission() check (authorization)
    """
    action_permissions = {
        'list': Permissions.MARKETING_VIEW,
        'retrieve': Permissions.MARKETING_VIEW,
        'performance': Permissions.MARKETING_VIEW,
        'create': Permissions.MARKETING_CREATE,
        'update': Permissions.MARKETING_EDIT,
        'partial_update': Permissions.MARKETING_EDIT,
        'destroy': Permissions.MARKETING_DELETE,
    }
