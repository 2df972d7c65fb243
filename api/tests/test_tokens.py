"""
Tests for JWT issuing and verification.

Tests cover:
- Expiry string parsing and the 900 second fallback
- Access/refresh round trip and token type separation
- Expired, tampered and foreign-issuer tokens
- Bearer header extraction
"""
from datetime import datetime, timedelta, timezone

import jwt
from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings

from api.tokens import expiry_in_seconds, extract_bearer_token, token_generator

User = get_user_model()


class ExpiryParsingTestCase(TestCase):

    def test_units(self):
        self.assertEqual(expiry_in_seconds('30s'), 30)
        self.assertEqual(expiry_in_seconds('15m'), 900)
        self.assertEqual(expiry_in_seconds('24h'), 86400)
        self.assertEqual(expiry_in_seconds('7d'), 604800)

    def test_unparseable_falls_back_to_fifteen_minutes(self):
        for value in ('', None, '10', 'h', '1w', '1.5h', '-5m'):
            self.assertEqual(expiry_in_seconds(value), 900, value)


class TokenRoundTripTestCase(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(
            email='marie@example.com', password='Password1', first_name='Marie', last_name='Dubois'
        )

    def test_access_token_round_trip(self):
        payload = token_generator.verify_access_token(token_generator.make_access_token(self.user))

        self.assertEqual(payload['userId'], self.user.pk)
        self.assertEqual(payload['email'], 'marie@example.com')
        self.assertEqual(payload['type'], 'access')
        self.assertEqual(payload['iss'], 'artisthub-api')

    def test_refresh_token_carries_token_version(self):
        self.user.profile.token_version = 3
        self.user.profile.save()

        pair = token_generator.make_token_pair(self.user)
        payload = token_generator.verify_refresh_token(pair['refreshToken'])

        self.assertEqual(payload['tokenVersion'], 3)

    @override_settings(JWT_ACCESS_EXPIRY='2h')
    def test_token_pair_expires_in_seconds(self):
        self.assertEqual(token_generator.make_token_pair(self.user)['expiresIn'], 7200)

    def test_token_types_are_not_interchangeable(self):
        pair = token_generator.make_token_pair(self.user)

        self.assertIsNone(token_generator.verify_access_token(pair['refreshToken']))
        self.assertIsNone(token_generator.verify_refresh_token(pair['token']))

    def test_expired_token_is_rejected(self):
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        token = jwt.encode(
            {'userId': self.user.pk, 'type': 'access', 'iat': past, 'exp': past + timedelta(minutes=5),
             'iss': 'artisthub-api'},
            'artisthub-dev-secret-key-change-me',
            algorithm='HS256',
        )
        with override_settings(JWT_SECRET='artisthub-dev-secret-key-change-me'):
            self.assertIsNone(token_generator.verify_access_token(token))

    def test_wrong_secret_is_rejected(self):
        token = token_generator.make_access_token(self.user)
        with override_settings(JWT_SECRET='another-secret'):
            self.assertIsNone(token_generator.verify_access_token(token))

    def test_foreign_issuer_is_rejected(self):
        token = token_generator.make_access_token(self.user)
        with override_settings(JWT_ISSUER='someone-else'):
            self.assertIsNone(token_generator.verify_access_token(token))

    def test_garbage_is_rejected(self):
        self.assertIsNone(token_generator.verify_access_token('not.a.token'))


class BearerHeaderTestCase(TestCase):

    def test_extracts_token(self):
        self.assertEqual(extract_bearer_token('Bearer abc.def'), 'abc.def')

    def test_rejects_other_schemes_and_shapes(self):
        for header in (None, '', 'Bearer', 'Token abc', 'Bearer a b', 'bearer abc'):
            self.assertIsNone(extract_bearer_token(header), header)
