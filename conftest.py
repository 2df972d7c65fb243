import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def fast_hashing_and_clean_cache(settings):
    """Cheap bcrypt rounds and fresh rate-limit counters for every test."""
    settings.BCRYPT_ROUNDS = 4
    cache.clear()
    yield
    cache.clear()
