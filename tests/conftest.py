"""
Root pytest configuration and fixtures for the Incapsula client.

Provides common fixtures and test utilities for the test suite.
"""

import os
from pathlib import Path
import sys

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

BASE = "https://api.test.incapsula"


@pytest.fixture
def api_id():
    return "foo"


@pytest.fixture
def api_key():
    return "bar"


@pytest.fixture
def base_url():
    return BASE


@pytest.fixture
def config(api_id, api_key, base_url):
    from incapsula import Config

    return Config(api_id=api_id, api_key=api_key, base_url=base_url)


@pytest.fixture
def http(config):
    from incapsula._http import HTTPClient

    return HTTPClient(config, timeout=5)


@pytest.fixture
def offline_http(api_id, api_key):
    """Client whose base URL has no scheme, so requests fails before sending."""
    from incapsula import Config
    from incapsula._http import HTTPClient

    return HTTPClient(Config(api_id=api_id, api_key=api_key, base_url="badness.incapsula.com"))


@pytest.fixture(autouse=True)
def clean_environment():
    """Clean environment variables before each test."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("INCAPSULA_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)

