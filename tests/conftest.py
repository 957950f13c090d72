# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides sample CSV data, a preloaded directory context and an API client
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("STARTUP_CSV_URL", "https://example.test/startups.csv")
os.environ.setdefault("PRELOAD_ON_STARTUP", "false")
os.environ.setdefault("MOCK_ACTION_DELAY_SECONDS", "0")
os.environ.setdefault("CSV_FETCH_BACKOFF_SECONDS", "0")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import asyncio

import pytest
from fastapi.testclient import TestClient

from core.services.context import DirectoryContext
from core.services.csv_parser import parse_startup_csv
from core.services.startup_cache import StartupCache
from tests.fakes import SAMPLE_CSV, StaticLoader


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def sample_csv() -> str:
    """CSV text with four startups (line 4 is blank, so ids are 1, 2, 3, 5)."""
    return SAMPLE_CSV


@pytest.fixture
def sample_startups(sample_csv):
    """The sample CSV parsed into Startup records."""
    return parse_startup_csv(sample_csv)


@pytest.fixture
def loader(sample_csv) -> StaticLoader:
    return StaticLoader(sample_csv)


@pytest.fixture
def context(loader) -> DirectoryContext:
    """A directory context backed by the sample CSV, with no simulated latency."""
    return DirectoryContext(
        cache=StartupCache(loader=loader),
        action_delay_seconds=0,
    )


@pytest.fixture
def loaded_context(context) -> DirectoryContext:
    """Same as `context`, with the cache already loaded."""
    asyncio.run(context.cache.ensure_loaded())
    return context


@pytest.fixture
def client(context) -> TestClient:
    """API client wired to the test context."""
    from app.main import create_app

    return TestClient(create_app(context=context))
