# conftest.py
import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def clear_throttle_cache():
    """Throttle history lives in the cache; start every test with a clean slate."""
    cache.clear()
    yield
    cache.clear()
