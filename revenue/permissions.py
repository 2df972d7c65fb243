from api.permissions import ArtistResourcePermission
from api.roles import Permissions


class RevenuePermission(ArtistResourcePermission):
    """
    Revenue streams need the financial permissions on their artist.
    """
    action_permissions = {
        'list': Permissions.FINANCIAL_VIEW,
        'retrieve': Permissions.FINANCIAL_VIEW,
        'summary': Permissions.FINANCIAL_VIEW,
        'create': Permissions.FINANCIAL_CREATE,
        'update': Permissions.FINANCIAL_EDIT,
        'partial_update': Permissions.FINANCIAL_EDIT,
        'destroy': Permissions.FINANCIAL_DELETE,
    }
