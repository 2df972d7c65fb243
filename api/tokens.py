"""
JWT access and refresh tokens.

Access tokens carry the user id and email; refresh tokens carry the user id
and the profile's token_version so a logout can revoke every refresh token
issued before it.
"""
import logging
import re
from datetime import datetime, timedelta, timezone

import jwt
from django.conf import settings
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

logger = logging.getLogger(__name__)

DEFAULT_EXPIRY_SECONDS = 900

EXPIRY_PATTERN = re.compile(r'^(\d+)([smhd])$')

UNIT_SECONDS = {
    's': 1,
    'm': 60,
    'h': 60 * 60,
    'd': 60 * 60 * 24,
}

ACCESS = 'access'
REFRESH = 'refresh'


def expiry_in_seconds(expiry):
    """
    Convert an expiry string such as '15m', '24h' or '7d' to seconds.

    Anything that does not match `<int><s|m|h|d>` falls back to 900 seconds.
    """
    match = EXPIRY_PATTERN.match(str(expiry or ''))
    if not match:
        return DEFAULT_EXPIRY_SECONDS
    value, unit = match.groups()
    return int(value) * UNIT_SECONDS[unit]


class JWTTokenGenerator:
    """
    Issues and verifies HS256 tokens signed with settings.JWT_SECRET.
    """

    algorithm = 'HS256'

    @property
    def secret(self):
        return settings.JWT_SECRET

    @property
    def issuer(self):
        return settings.JWT_ISSUER

    def _encode(self, payload, expiry):
        now = datetime.now(timezone.utc)
        claims = dict(payload)
        claims.update({
            'iat': now,
            'exp': now + timedelta(seconds=expiry_in_seconds(expiry)),
            'iss': self.issuer,
        })
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def _decode(self, token, token_type):
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={'require': ['exp', 'iat', 'iss', 'userId']},
            )
        except ExpiredSignatureError as e:
            logger.debug(f"{token_type} token expired: {e}")
            return None
        except InvalidTokenError as e:
            logger.warning(f"Invalid {token_type} token: {e}")
            return None

        if payload.get('type') != token_type:
            logger.warning(f"Token type mismatch: expected {token_type}, got {payload.get('type')}")
            return None
        return payload

    def make_access_token(self, user):
        return self._encode(
            {'userId': user.pk, 'email': user.email, 'type': ACCESS},
            settings.JWT_ACCESS_EXPIRY,
        )

    def make_refresh_token(self, user, token_version=0):
        return self._encode(
            {'userId': user.pk, 'tokenVersion': token_version, 'type': REFRESH},
            settings.JWT_REFRESH_EXPIRY,
        )

    def make_token_pair(self, user):
        """
        Return {'token', 'refreshToken', 'expiresIn'} for a user.

        expiresIn is the access-token lifetime in seconds.
        """
        profile = getattr(user, 'profile', None)
        token_version = profile.token_version if profile else 0
        return {
            'token': self.make_access_token(user),
            'refreshToken': self.make_refresh_token(user, token_version),
            'expiresIn': expiry_in_seconds(settings.JWT_ACCESS_EXPIRY),
        }

    def verify_access_token(self, token):
        """Return the decoded payload, or None when the token is invalid or expired."""
        return self._decode(token, ACCESS)

    def verify_refresh_token(self, token):
        return self._decode(token, REFRESH)


def extract_bearer_token(header):
    """Return the token from an 'Authorization: Bearer <token>' header value, or None."""
    if not header:
        return None
    parts = header.split(' ')
    if len(parts) != 2 or parts[0] != 'Bearer' or not parts[1]:
        return None
    return parts[1]


token_generator = JWTTokenGenerator()
