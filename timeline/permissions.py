from api.permissions import ArtistResourcePermission
from api.roles import Permissions


class ActivityPermission(ArtistResourcePermission):
    """
    Reading the feed needs artist:view; writing entries needs artist:edit.
    """
    action_permissions = {
        'list': Permissions.ARTIST_VIEW,
        'retrieve': Permissions.ARTIST_VIEW,
        'create': Permissions.ARTIST_EDIT,
        'update': Permissions.ARTIST_EDIT,
        'partial_update': Permissions.ARTIST_EDIT,
        'destroy': Permissions.ARTIST_EDIT,
    }
