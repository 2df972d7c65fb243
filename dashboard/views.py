"""
Dashboard endpoints: role metrics, activity feed, quick actions and the
current user's profile with the artists they can reach.

`artistId` is either an artist id or 'all'. Every endpoint reads data
under one permission: metric cards under the permission their role's
cards read (financial:view for financial cards, marketing:view for
marketing cards, artist:view otherwise), the activity feed under
artist:view. 'all' covers the artists on which the user holds that
permission; an explicit id must grant it.
"""
import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from api.exceptions import ResourceNotFound, TeamAccessDenied, UnprocessableEntity
from api.permissions import accessible_artist_ids, artist_ids_with_permission, user_has_permission
from api.responses import ErrorCode, error_response, success_response
from api.roles import Permissions, UserRole
from api.security import log_unauthorized_access
from identity.models import Artist
from .quick_actions import quick_actions_for
from .services.activity import recent_activities
from .services.metrics import build_metrics

logger = logging.getLogger(__name__)

DEFAULT_ACTIVITY_LIMIT = 10
MAX_ACTIVITY_LIMIT = 100

METRICS_PERMISSIONS = {
    UserRole.FINANCIAL_MANAGER: Permissions.FINANCIAL_VIEW,
    UserRole.MARKETING_MANAGER: Permissions.MARKETING_VIEW,
}


def user_role(user):
    profile = getattr(user, 'profile', None)
    return profile.role if profile else UserRole.ARTIST


def metrics_permission(role):
    return METRICS_PERMISSIONS.get(role, Permissions.ARTIST_VIEW)


def resolve_artist_scope(request, permission):
    """
    Return (artistId as requested, list of artist ids to aggregate over).

    Raises 422 for a malformed id, 404 for an unknown artist and 403 when
    the user lacks `permission` on the requested artist.
    """
    requested = request.query_params.get('artistId') or 'all'
    if requested == 'all':
        return requested, artist_ids_with_permission(request.user, permission)

    try:
        artist_id = int(requested)
    except ValueError:
        raise UnprocessableEntity({'artistId': ["Must be an artist id or 'all'."]})

    if not Artist.objects.filter(pk=artist_id).exists():
        raise ResourceNotFound('Artist not found')

    if not user_has_permission(request.user, permission, artist_id):
        log_unauthorized_access(request)
        raise TeamAccessDenied()

    return requested, [artist_id]


def parse_limit(raw):
    if raw in (None, ''):
        return DEFAULT_ACTIVITY_LIMIT
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        raise UnprocessableEntity({'limit': ["Must be an integer."]})
    if not 1 <= limit <= MAX_ACTIVITY_LIMIT:
        raise UnprocessableEntity({'limit': [f"Must be between 1 and {MAX_ACTIVITY_LIMIT}."]})
    return limit


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard_metrics(request):
    """
    GET /api/v1/dashboard/metrics?artistId=<id|all>

    Returns: {metrics: [4 cards], artistId, role}
    """
    role = user_role(request.user)
    requested, artist_ids = resolve_artist_scope(request, metrics_permission(role))

    try:
        metrics = build_metrics(role, artist_ids)
    except Exception as e:
        logger.error(f"Error fetching dashboard metrics: {e}", exc_info=True)
        return error_response(
            'Failed to fetch dashboard metrics',
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code=ErrorCode.INTERNAL_SERVER_ERROR,
            error=str(e),
        )

    return success_response(
        {'metrics': metrics, 'artistId': requested, 'role': role},
        'Dashboard metrics retrieved successfully',
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard_activities(request):
    """
    GET /api/v1/dashboard/activities?artistId=<id|all>&limit=<1..100>
    """
    limit = parse_limit(request.query_params.get('limit'))
    _, artist_ids = resolve_artist_scope(request, Permissions.ARTIST_VIEW)

    try:
        activities = recent_activities(artist_ids, limit)
    except Exception as e:
        logger.error(f"Error fetching recent activities: {e}", exc_info=True)
        return error_response(
            'Failed to fetch recent activities',
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code=ErrorCode.INTERNAL_SERVER_ERROR,
            error=str(e),
        )

    return success_response(activities, 'Recent activities retrieved successfully')


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def quick_actions(request):
    """GET /api/v1/dashboard/quick-actions"""
    return success_response(
        quick_actions_for(user_role(request.user)),
        'Quick actions retrieved successfully',
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_profile(request):
    """
    GET /api/v1/dashboard/user-profile

    Returns: {id, firstName, lastName, email, role, artistsAccess: [{id, name, avatar}]}
    """
    user = request.user
    artists = Artist.objects.filter(id__in=accessible_artist_ids(user)).order_by('stage_name')

    return success_response(
        {
            'id': user.id,
            'firstName': user.first_name,
            'lastName': user.last_name,
            'email': user.email,
            'role': user_role(user),
            'artistsAccess': [
                {'id': artist.id, 'name': artist.stage_name, 'avatar': artist.avatar or None}
                for artist in artists
            ],
        },
        'User profile retrieved successfully',
    )
