"""
Tests for the API transport.

Tests cover:
- Bearer header management and URL building
- Envelope unwrapping and 204 handling
- ApiError on HTTP errors, success=false, non-JSON bodies and transport failures
- login/logout token handling
"""
from unittest.mock import Mock

import requests
from django.test import SimpleTestCase

from client import ApiError, ArtistHubClient


def fake_response(status_code=200, body=None, reason='OK'):
    response = Mock(status_code=status_code, reason=reason)
    if body is None:
        response.json.side_effect = ValueError('No JSON')
    else:
        response.json.return_value = body
    return response


class ArtistHubClientTestCase(SimpleTestCase):

    def setUp(self):
        self.session = Mock()
        self.session.headers = {}
        self.api = ArtistHubClient('http://api.test/', token='abc', session=self.session)

    def test_sets_headers(self):
        self.assertEqual(self.session.headers['Authorization'], 'Bearer abc')
        self.assertEqual(self.session.headers['Content-Type'], 'application/json')

        self.api.set_token(None)
        self.assertNotIn('Authorization', self.session.headers)

    def test_get_returns_data(self):
        self.session.request.return_value = fake_response(body={'success': True, 'data': [{'id': 1}]})

        data = self.api.get('/artists', params={'genre': 'House'})

        self.assertEqual(data, [{'id': 1}])
        self.session.request.assert_called_once_with(
            'GET', 'http://api.test/api/v1/artists', params={'genre': 'House'}, json=None, timeout=10,
        )

    def test_no_content(self):
        self.session.request.return_value = fake_response(status_code=204)

        self.assertEqual(self.api.request('DELETE', 'artists/1'), {'success': True, 'data': None})

    def test_error_envelope_raises(self):
        self.session.request.return_value = fake_response(
            status_code=403,
            body={'success': False, 'error': 'Access to this artist is denied', 'code': 'TEAM_ACCESS_DENIED',
                  'message': 'Access to this artist is denied'},
            reason='Forbidden',
        )

        with self.assertRaises(ApiError) as ctx:
            self.api.get('dashboard/metrics', params={'artistId': 2})

        self.assertEqual(ctx.exception.status_code, 403)
        self.assertEqual(ctx.exception.code, 'TEAM_ACCESS_DENIED')
        self.assertEqual(ctx.exception.message, 'Access to this artist is denied')

    def test_success_false_on_200_raises(self):
        self.session.request.return_value = fake_response(body={'success': False, 'message': 'Nope'})

        with self.assertRaises(ApiError):
            self.api.get('artists')

    def test_non_json_body_raises(self):
        self.session.request.return_value = fake_response(status_code=502, reason='Bad Gateway')

        with self.assertRaises(ApiError) as ctx:
            self.api.get('artists')
        self.assertEqual(ctx.exception.status_code, 502)

    def test_transport_error_raises(self):
        self.session.request.side_effect = requests.ConnectionError('refused')

        with self.assertRaises(ApiError) as ctx:
            self.api.get('artists')
        self.assertIsNone(ctx.exception.status_code)

    def test_login_and_logout(self):
        self.session.request.return_value = fake_response(
            body={'success': True, 'data': {}, 'token': 'new-token', 'refreshToken': 'r'}
        )
        self.api.login('sarah@example.com', 'password123')
        self.assertEqual(self.session.headers['Authorization'], 'Bearer new-token')

        self.session.request.return_value = fake_response(body={'success': True, 'data': None})
        self.api.logout()
        self.assertNotIn('Authorization', self.session.headers)
