"""
Stale-while-revalidate cache for client-side resources.

An entry is fresh for `stale_after` seconds after it was stored. Fresh
entries are served as is; stale entries are served when revalidation
fails; missing entries must be fetched.
"""
import time
from collections import namedtuple

CacheEntry = namedtuple('CacheEntry', ['value', 'stored_at'])


class SWRCache:

    def __init__(self, clock=time.monotonic):
        self.clock = clock
        self._entries = {}

    def get(self, key):
        return self._entries.get(key)

    def set(self, key, value):
        self._entries[key] = CacheEntry(value, self.clock())

    def is_fresh(self, entry, stale_after):
        return entry is not None and self.clock() - entry.stored_at < stale_after

    def invalidate(self, prefix=None):
        """Drop every entry, or only those whose key starts with `prefix`."""
        if prefix is None:
            self._entries.clear()
            return
        for key in [k for k in self._entries if k[0] == prefix]:
            del self._entries[key]
