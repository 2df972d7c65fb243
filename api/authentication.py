from django.contrib.auth import get_user_model
from rest_framework import authentication, exceptions

from .security import log_unauthorized_access
from .tokens import extract_bearer_token, token_generator

User = get_user_model()


class JWTAuthentication(authentication.BaseAuthentication):
    """
    Authenticate requests carrying 'Authorization: Bearer <access token>'.

    Requests without a bearer header are left anonymous so permission
    classes decide; a header with a bad token fails with 401.
    """

    keyword = 'Bearer'

    def authenticate(self, request):
        header = request.META.get('HTTP_AUTHORIZATION')
        if not header:
            return None

        token = extract_bearer_token(header)
        if token is None:
            log_unauthorized_access(request)
            raise exceptions.AuthenticationFailed('No authentication token provided')

        payload = token_generator.verify_access_token(token)
        if payload is None:
            log_unauthorized_access(request)
            raise exceptions.AuthenticationFailed('Invalid or expired token')

        try:
            user = User.objects.select_related('profile').get(pk=payload['userId'])
        except User.DoesNotExist:
            user = None

        if user is None or not user.is_active:
            log_unauthorized_access(request)
            raise exceptions.AuthenticationFailed('User not found or inactive')

        return (user, payload)

    def authenticate_header(self, request):
        return f'{self.keyword} realm="api"'
