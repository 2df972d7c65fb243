"""
Permission classes for API endpoints.

Access is decided per artist: a user's active team memberships (plus an
implicit 'artist' membership on the artist they own) are resolved through
api.roles.has_permission. Users whose profile role is admin bypass
membership checks.

- artist_ids_with_permission: artists on which a permission is held, used
  for queryset visibility and dashboard scopes
- ArtistResourcePermission: maps viewset actions to permission strings and
  checks them against the row's artist
"""
import logging
from collections import namedtuple

from rest_framework import permissions

from .roles import UserRole, has_permission, membership_grants
from .security import log_unauthorized_access

logger = logging.getLogger(__name__)

OwnerMembership = namedtuple('OwnerMembership', ['artist_id', 'role', 'permissions'])


def is_admin_user(user):
    if not user or not user.is_authenticated:
        return False
    profile = getattr(user, 'profile', None)
    return bool(profile and profile.is_admin)


def get_memberships(user):
    """
    Return the memberships that grant `user` anything, cached on the user.

    Active TeamMembership rows, plus an 'artist' role entry for the artist
    the user owns when no explicit membership on it exists.
    """
    cached = getattr(user, '_artist_memberships', None)
    if cached is not None:
        return cached

    from .models import TeamMembership
    from identity.models import Artist

    memberships = list(
        TeamMembership.objects.filter(user=user, is_active=True).only('artist_id', 'role', 'permissions')
    )
    member_of = {m.artist_id for m in memberships}

    owned = Artist.objects.filter(user=user).values_list('id', flat=True)
    for artist_id in owned:
        if artist_id not in member_of:
            memberships.append(OwnerMembership(artist_id, UserRole.ARTIST, {}))

    user._artist_memberships = memberships
    return memberships


def user_has_permission(user, permission, artist_id=None):
    """
    Check `permission` for `user`, optionally scoped to one artist.
    """
    if not user or not user.is_authenticated:
        return False
    if is_admin_user(user):
        return True
    return has_permission(get_memberships(user), permission, artist_id)


def accessible_artist_ids(user):
    """
    Return the ids of every artist `user` may see.

    Admins see every artist; everyone else sees the artists they own or
    hold an active membership on.
    """
    from identity.models import Artist

    if is_admin_user(user):
        return list(Artist.objects.order_by('id').values_list('id', flat=True))
    return sorted({m.artist_id for m in get_memberships(user)})


def artist_ids_with_permission(user, permission):
    """
    Return the ids of the artists on which `user` holds `permission`.

    Each membership is judged on its own artist; admins get every artist.
    """
    if is_admin_user(user):
        return accessible_artist_ids(user)
    return sorted({
        m.artist_id for m in get_memberships(user)
        if membership_grants(m, permission)
    })


class ArtistResourcePermission(permissions.BasePermission):
    """
    Object-level permission for rows owned by an artist.

    Subclasses set `action_permissions`, a map from viewset action to the
    permission string that action needs, and optionally `artist_field`,
    the attribute holding the row's artist id (default 'artist_id').

    - create: permission checked against the artist in the request body
    - other actions: any membership granting the permission lets the
      request through; the object check then scopes it to the row's artist
    """

    action_permissions = {}
    artist_field = 'artist_id'
    body_artist_field = 'artist'

    def get_required_permission(self, view):
        action = getattr(view, 'action', None)
        if action in self.action_permissions:
            return self.action_permissions[action]
        raise NotImplementedError(
            f"{self.__class__.__name__} has no permission mapped for action '{action}'"
        )

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        if is_admin_user(user):
            return True

        permission = self.get_required_permission(view)

        if getattr(view, 'action', None) == 'create':
            artist_id = request.data.get(self.body_artist_field)
            if artist_id in (None, ''):
                # Let the serializer report the missing artist
                return True
            allowed = user_has_permission(user, permission, artist_id)
        else:
            allowed = user_has_permission(user, permission)

        if not allowed:
            logger.info(f"{user.email} lacks {permission} for {view.__class__.__name__}.{view.action}")
            log_unauthorized_access(request)
        return allowed

    def has_object_permission(self, request, view, obj):
        user = request.user
        if is_admin_user(user):
            return True

        permission = self.get_required_permission(view)
        allowed = user_has_permission(user, permission, getattr(obj, self.artist_field))
        if not allowed:
            log_unauthorized_access(request)
        return allowed
