"""
HTTP transport for the ArtistHub API.

Wraps a requests session: prefixes paths with /api/v1, sends the bearer
token and unwraps the response envelope.
"""
import logging
from typing import Any, Dict, Optional

import requests

from .exceptions import ApiError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class ArtistHubClient:
    """
    Thin API client.

    Args:
        base_url: Server root, e.g. 'http://localhost:8000'
        token: Access token sent as 'Authorization: Bearer <token>'
        timeout: Per-request timeout in seconds
        session: Optional requests.Session (tests pass a mock)
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = base_url.rstrip('/') + '/api/v1'
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'Content-Type': 'application/json'})
        self.token = None
        if token:
            self.set_token(token)

    def set_token(self, token: Optional[str]):
        self.token = token
        if token:
            self.session.headers['Authorization'] = f'Bearer {token}'
        else:
            self.session.headers.pop('Authorization', None)

    def request(self, method: str, path: str, params: Optional[Dict] = None, json: Any = None) -> Dict:
        """
        Send a request and return the decoded envelope.

        Raises:
            ApiError: on transport failure, a non-JSON body, or success=false
        """
        url = f"{self.api_url}/{path.lstrip('/')}"
        try:
            response = self.session.request(method, url, params=params, json=json, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise ApiError(f"Request to {url} failed: {e}") from e

        if response.status_code == 204:
            return {'success': True, 'data': None}

        try:
            body = response.json()
        except ValueError:
            raise ApiError(
                f"Unexpected non-JSON response from {url}",
                status_code=response.status_code,
            )

        if response.status_code >= 400 or not body.get('success', False):
            raise ApiError(
                body.get('message') or body.get('error') or response.reason or 'Request failed',
                status_code=response.status_code,
                code=body.get('code'),
                payload=body,
            )
        return body

    def get(self, path: str, params: Optional[Dict] = None) -> Any:
        return self.request('GET', path, params=params).get('data')

    def post(self, path: str, json: Any = None) -> Dict:
        return self.request('POST', path, json=json)

    def login(self, email: str, password: str) -> Dict:
        """Log in and keep the returned access token for later calls."""
        body = self.post('auth/login', {'email': email, 'password': password})
        self.set_token(body.get('token'))
        return body

    def refresh(self, refresh_token: str) -> Dict:
        body = self.post('auth/refresh', {'refreshToken': refresh_token})
        self.set_token(body.get('token'))
        return body

    def logout(self):
        self.post('auth/logout')
        self.set_token(None)

    def artists(self, **params) -> Any:
        return self.get('artists', params=params or None)

    def artist(self, artist_id) -> Any:
        return self.get(f'artists/{artist_id}')
