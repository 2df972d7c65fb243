"""
Python client for the ArtistHub API.
"""
from .dashboard import DashboardClient
from .exceptions import ApiError
from .http import ArtistHubClient

__all__ = ['ArtistHubClient', 'DashboardClient', 'ApiError']
