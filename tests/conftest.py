"""Pytest configuration and fixtures for keyed-cache tests."""

import logging

import pytest

from keyed_cache.application.services.keyed_cache import KeyedCache, reset_keyed_cache
from keyed_cache.config.settings import CacheSettings, get_cache_settings
from keyed_cache.infrastructure.repositories.memory_store import MemoryStore


@pytest.fixture(autouse=True)
def reset_process_cache():
    """Drop process-wide cache and settings between tests."""
    reset_keyed_cache()
    get_cache_settings.cache_clear()
    yield
    reset_keyed_cache()
    get_cache_settings.cache_clear()


@pytest.fixture
def cache_settings():
    """Default cache settings."""
    return CacheSettings()


@pytest.fixture
def memory_store():
    """Empty memory store."""
    return MemoryStore()


@pytest.fixture
def cache(memory_store, cache_settings):
    """Keyed cache backed by a fresh store."""
    return KeyedCache(store=memory_store, settings=cache_settings)


@pytest.fixture
def debug_logs(caplog):
    """Capture keyed_cache records down to DEBUG."""
    caplog.set_level(logging.DEBUG, logger="keyed_cache")
    return caplog
