import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import F
from django.http import JsonResponse
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views.decorators.http import require_http_methods
from django_ratelimit.decorators import ratelimit
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView

from .exceptions import InvalidCredentials, ResourceAlreadyExists, Unauthorized
from .models import UserProfile
from .responses import ErrorCode, error_body, success_response
from .security import log_login_attempt, log_token_refresh
from .serializers import LoginSerializer, RefreshTokenSerializer, RegisterSerializer, UserSerializer
from .tokens import token_generator

logger = logging.getLogger(__name__)

User = get_user_model()

auth_ratelimit = ratelimit(key='ip', rate=settings.AUTH_RATE_LIMIT, method='POST', block=True)


def auth_response(user, message, status_code=status.HTTP_200_OK):
    """
    Build the auth envelope: user and token pair at the top level and in data.
    """
    payload = {'user': UserSerializer(user).data}
    payload.update(token_generator.make_token_pair(user))
    return success_response(payload, message, status_code=status_code, **payload)


@method_decorator(auth_ratelimit, name='post')
class LoginView(APIView):
    """
    POST /api/v1/auth/login

    Unknown email and wrong password produce the same 401 body.
    """
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = serializer.validated_data['email']
        password = serializer.validated_data['password']

        user = User.objects.select_related('profile').filter(email__iexact=email).first()
        if user is None:
            # Run the hasher anyway so response time does not reveal unknown emails
            User().set_password(password)
            log_login_attempt(request, email, False)
            raise InvalidCredentials()

        if not user.is_active or not user.check_password(password):
            log_login_attempt(request, email, False)
            raise InvalidCredentials()

        user.last_login_at = timezone.now()
        user.save(update_fields=['last_login_at', 'updated_at'])
        log_login_attempt(request, email, True)

        return auth_response(user, 'Login successful')


@method_decorator(auth_ratelimit, name='post')
class RegisterView(APIView):
    """
    POST /api/v1/auth/register

    Emails are compared case-insensitively; a duplicate returns 409.
    """
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = serializer.validated_data['email']
        if User.objects.filter(email__iexact=email).exists():
            raise ResourceAlreadyExists('An account with this email already exists')

        with transaction.atomic():
            user = serializer.save()

        logger.info(f"Registered user {user.email} with role {user.profile.role}")
        return auth_response(user, 'Account created successfully', status_code=status.HTTP_201_CREATED)


class RefreshTokenView(APIView):
    """
    POST /api/v1/auth/refresh

    Exchanges a refresh token for a new token pair. Tokens issued before
    the user's last logout carry a stale version and are rejected.
    """
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RefreshTokenSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        payload = token_generator.verify_refresh_token(serializer.validated_data['refreshToken'])
        if payload is None:
            raise Unauthorized('Invalid or expired refresh token')

        user = User.objects.select_related('profile').filter(pk=payload['userId'], is_active=True).first()
        if user is None:
            raise Unauthorized('User not found or inactive')

        if payload.get('tokenVersion') != user.profile.token_version:
            raise Unauthorized('Refresh token has been revoked')

        log_token_refresh(request, user.pk)
        return auth_response(user, 'Token refreshed successfully')


class CurrentUserView(APIView):
    """
    GET /api/v1/auth/me
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return success_response(
            {'user': UserSerializer(request.user).data},
            'User retrieved successfully',
        )


class LogoutView(APIView):
    """
    POST /api/v1/auth/logout

    Bumps the profile token_version, revoking outstanding refresh tokens.
    Access tokens stay valid until they expire.
    """
    permission_classes = [IsAuthenticated]

    def post(self, request):
        UserProfile.objects.filter(user=request.user).update(token_version=F('token_version') + 1)
        logger.info(f"User {request.user.email} logged out")
        return success_response(None, 'Logged out successfully')


@require_http_methods(["GET"])
def health(request):
    """
    Liveness probe. Unauthenticated and outside the API envelope.
    """
    return JsonResponse({
        'status': 'OK',
        'timestamp': timezone.now().isoformat(),
        'environment': settings.DJANGO_ENV,
        'version': settings.APP_VERSION,
    })


def not_found(request, exception=None):
    """handler404: enveloped 404 for any unmatched route."""
    body = error_body('Endpoint not found', code=ErrorCode.RESOURCE_NOT_FOUND)
    body['path'] = request.path
    return JsonResponse(body, status=404)


def server_error(request):
    """handler500: enveloped 500 for errors raised outside DRF views."""
    return JsonResponse(
        error_body('Internal server error', code=ErrorCode.INTERNAL_SERVER_ERROR),
        status=500,
    )
