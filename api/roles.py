"""
Role and permission resolution for artist teams.

Roles are a closed set. The role -> permission table is written as an
explicit branch per role so adding a role without granting it anything
stays visible in review, and unknown role strings grant nothing.

Permission checks are driven by team memberships: a membership binds a
user to an artist with a role and an optional map of custom permissions.
"""
from django.db import models


class UserRole(models.TextChoices):
    ARTIST = 'artist', 'Artist'
    MARKETING_MANAGER = 'marketing_manager', 'Marketing Manager'
    TOUR_MANAGER = 'tour_manager', 'Tour Manager'
    ALBUM_MANAGER = 'album_manager', 'Album Manager'
    FINANCIAL_MANAGER = 'financial_manager', 'Financial Manager'
    PRESS_OFFICER = 'press_officer', 'Press Officer'
    ADMIN = 'admin', 'Administrator'


class Permissions:
    """Permission strings granted to roles and memberships."""

    ARTIST_VIEW = 'artist:view'
    ARTIST_EDIT = 'artist:edit'
    ARTIST_DELETE = 'artist:delete'

    MARKETING_VIEW = 'marketing:view'
    MARKETING_CREATE = 'marketing:create'
    MARKETING_EDIT = 'marketing:edit'
    MARKETING_DELETE = 'marketing:delete'

    TOUR_VIEW = 'tour:view'
    TOUR_CREATE = 'tour:create'
    TOUR_EDIT = 'tour:edit'
    TOUR_DELETE = 'tour:delete'

    ALBUM_VIEW = 'album:view'
    ALBUM_CREATE = 'album:create'
    ALBUM_EDIT = 'album:edit'
    ALBUM_DELETE = 'album:delete'

    FINANCIAL_VIEW = 'financial:view'
    FINANCIAL_CREATE = 'financial:create'
    FINANCIAL_EDIT = 'financial:edit'
    FINANCIAL_DELETE = 'financial:delete'
    FINANCIAL_APPROVE = 'financial:approve'

    PRESS_VIEW = 'press:view'
    PRESS_CREATE = 'press:create'
    PRESS_EDIT = 'press:edit'
    PRESS_DELETE = 'press:delete'

    TEAM_VIEW = 'team:view'
    TEAM_INVITE = 'team:invite'
    TEAM_EDIT_ROLES = 'team:edit_roles'
    TEAM_REMOVE_MEMBERS = 'team:remove_members'

    ADMIN_ALL = 'admin:all'


P = Permissions


def role_permissions(role):
    """
    Return the frozenset of permissions a role grants by default.

    Accepts a UserRole member or its string value. Unknown roles grant
    nothing rather than raising.
    """
    if role == UserRole.ARTIST:
        return frozenset({
            P.ARTIST_VIEW, P.ARTIST_EDIT,
            P.MARKETING_VIEW, P.TOUR_VIEW, P.ALBUM_VIEW,
            P.FINANCIAL_VIEW, P.PRESS_VIEW,
            P.TEAM_VIEW, P.TEAM_INVITE, P.TEAM_EDIT_ROLES, P.TEAM_REMOVE_MEMBERS,
        })
    elif role == UserRole.MARKETING_MANAGER:
        return frozenset({
            P.ARTIST_VIEW,
            P.MARKETING_VIEW, P.MARKETING_CREATE, P.MARKETING_EDIT, P.MARKETING_DELETE,
            P.PRESS_VIEW, P.TEAM_VIEW,
        })
    elif role == UserRole.TOUR_MANAGER:
        return frozenset({
            P.ARTIST_VIEW,
            P.TOUR_VIEW, P.TOUR_CREATE, P.TOUR_EDIT, P.TOUR_DELETE,
            P.FINANCIAL_VIEW, P.TEAM_VIEW,
        })
    elif role == UserRole.ALBUM_MANAGER:
        return frozenset({
            P.ARTIST_VIEW,
            P.ALBUM_VIEW, P.ALBUM_CREATE, P.ALBUM_EDIT, P.ALBUM_DELETE,
            P.FINANCIAL_VIEW, P.TEAM_VIEW,
        })
    elif role == UserRole.FINANCIAL_MANAGER:
        return frozenset({
            P.ARTIST_VIEW,
            P.FINANCIAL_VIEW, P.FINANCIAL_CREATE, P.FINANCIAL_EDIT,
            P.FINANCIAL_DELETE, P.FINANCIAL_APPROVE,
            P.TEAM_VIEW,
        })
    elif role == UserRole.PRESS_OFFICER:
        return frozenset({
            P.ARTIST_VIEW,
            P.PRESS_VIEW, P.PRESS_CREATE, P.PRESS_EDIT, P.PRESS_DELETE,
            P.MARKETING_VIEW, P.TEAM_VIEW,
        })
    elif role == UserRole.ADMIN:
        return frozenset({P.ADMIN_ALL})
    return frozenset()


def membership_grants(membership, permission):
    """
    Check a single membership against a permission.

    A membership grants the permission when its role does, when its custom
    permission map contains the permission as a key, or when its role holds
    the admin wildcard.
    """
    granted = role_permissions(getattr(membership, 'role', None))
    custom = getattr(membership, 'permissions', None) or {}

    return (
        permission in granted
        or permission in custom
        or P.ADMIN_ALL in granted
    )


def has_permission(memberships, permission, artist_id=None):
    """
    Decide whether a set of team memberships grants `permission`.

    Without an artist scope, any membership may grant it. With a scope,
    only the membership on that artist is consulted; a user with no
    membership on the artist is denied whatever they hold elsewhere.
    Never raises.

    Args:
        memberships: iterable of objects with `artist_id`, `role` and
            `permissions` attributes (TeamMembership rows or equivalents)
        permission: permission string, e.g. 'marketing:edit'
        artist_id: optional artist scope

    Returns:
        bool
    """
    memberships = list(memberships or [])

    if artist_id is None or artist_id == '':
        return any(membership_grants(m, permission) for m in memberships)

    scoped = next(
        (m for m in memberships if str(getattr(m, 'artist_id', None)) == str(artist_id)),
        None,
    )
    if scoped is None:
        return False

    return membership_grants(scoped, permission)
