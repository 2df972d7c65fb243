"""
Dashboard data layer.

Each dashboard resource has its own freshness window, background refetch
interval and retry budget:

    resource        stale after   refetch every   attempts after the first
    metrics         5 min         2 min           3
    activities      2 min         1 min           3
    quick_actions   10 min        -               2
    user_profile    15 min        -               3

A cached value is served without a request while it is younger than both
its stale window and its refetch interval. Older values are revalidated;
if revalidation fails the old value is still returned. With nothing
cached, the fetch is retried with exponential backoff and the last error
is raised.

Callers that poll can call refresh_due() on a timer: it refetches every
loaded resource whose refetch interval has elapsed.
"""
import logging
import time
from collections import namedtuple
from typing import Any, Callable, Dict, List, Optional

from .cache import SWRCache
from .exceptions import ApiError
from .http import ArtistHubClient

logger = logging.getLogger(__name__)

ResourcePolicy = namedtuple('ResourcePolicy', ['stale_after', 'retries', 'refetch_interval'])

POLICIES = {
    'metrics': ResourcePolicy(stale_after=5 * 60, retries=3, refetch_interval=2 * 60),
    'activities': ResourcePolicy(stale_after=2 * 60, retries=3, refetch_interval=60),
    'quick_actions': ResourcePolicy(stale_after=10 * 60, retries=2, refetch_interval=None),
    'user_profile': ResourcePolicy(stale_after=15 * 60, retries=3, refetch_interval=None),
}

MAX_RETRY_DELAY = 30.0


def retry_delay(attempt: int) -> float:
    """Seconds to wait before retry number `attempt` (0-based): 1, 2, 4, ... capped at 30."""
    return min(1.0 * 2 ** attempt, MAX_RETRY_DELAY)


def fresh_for(policy: ResourcePolicy) -> float:
    """Seconds a cached value is served without revalidation."""
    if policy.refetch_interval is None:
        return policy.stale_after
    return min(policy.stale_after, policy.refetch_interval)


class DashboardClient:
    """
    Cached access to the /dashboard endpoints.

    Args:
        api: ArtistHubClient used for requests
        clock: monotonic time source for cache freshness
        sleep: called with the backoff delay between attempts
    """

    def __init__(
        self,
        api: ArtistHubClient,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.api = api
        self.cache = SWRCache(clock=clock)
        self.sleep = sleep
        self._requests = {}

    def _fetch_with_retry(self, resource: str, path: str, params: Optional[Dict]) -> Any:
        retries = POLICIES[resource].retries
        for attempt in range(retries + 1):
            try:
                return self.api.get(path, params=params)
            except ApiError as e:
                if attempt == retries:
                    logger.error(f"Fetching {resource} failed after {retries + 1} attempts: {e}")
                    raise
                delay = retry_delay(attempt)
                logger.warning(f"Fetching {resource} failed ({e}); retrying in {delay:.0f}s")
                self.sleep(delay)

    def _load(self, resource: str, path: str, params: Optional[Dict] = None) -> Any:
        key = (resource, tuple(sorted((params or {}).items())))
        self._requests[key] = (resource, path, params)
        entry = self.cache.get(key)

        if self.cache.is_fresh(entry, fresh_for(POLICIES[resource])):
            return entry.value

        try:
            value = self._fetch_with_retry(resource, path, params)
        except ApiError:
            if entry is not None:
                logger.warning(f"Serving stale {resource} after failed revalidation")
                return entry.value
            raise

        self.cache.set(key, value)
        return value

    def refresh_due(self) -> List[str]:
        """
        Refetch loaded resources whose refetch interval has elapsed.

        A failed refetch keeps the cached value. Returns the names of the
        resources that were refreshed.
        """
        refreshed = []
        for key, (resource, path, params) in list(self._requests.items()):
            interval = POLICIES[resource].refetch_interval
            if interval is None or self.cache.is_fresh(self.cache.get(key), interval):
                continue
            try:
                value = self._fetch_with_retry(resource, path, params)
            except ApiError as e:
                logger.warning(f"Background refetch of {resource} failed: {e}")
                continue
            self.cache.set(key, value)
            refreshed.append(resource)
        return refreshed

    def metrics(self, artist_id='all') -> Any:
        return self._load('metrics', 'dashboard/metrics', {'artistId': artist_id})

    def activities(self, artist_id='all', limit: int = 10) -> Any:
        return self._load('activities', 'dashboard/activities', {'artistId': artist_id, 'limit': limit})

    def quick_actions(self) -> Any:
        return self._load('quick_actions', 'dashboard/quick-actions')

    def user_profile(self) -> Any:
        return self._load('user_profile', 'dashboard/user-profile')

    def dashboard_data(self, artist_id='all') -> Dict[str, Any]:
        """Load all four dashboard resources for `artist_id`."""
        return {
            'metrics': self.metrics(artist_id),
            'activities': self.activities(artist_id),
            'quickActions': self.quick_actions(),
            'userProfile': self.user_profile(),
        }

    def invalidate(self, resource: Optional[str] = None):
        self.cache.invalidate(resource)
