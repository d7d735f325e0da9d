"""Pytest configuration and fixtures."""

import pytest
import pytest_asyncio
import respx

from github_insights.config import Config, set_config
from github_insights.services.github_rest_client import GitHubRestClient

API_URL = "https://api.github.com"


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset global state before each test."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def test_config():
    """Create a test configuration."""
    config = Config(github_token=None, github_api_url=API_URL)
    set_config(config)
    return config


@pytest.fixture
def mock_github_api():
    """Mock GitHub API responses."""
    with respx.mock(base_url=API_URL, assert_all_called=False) as respx_mock:
        yield respx_mock


@pytest_asyncio.fixture
async def rest_client(test_config):
    """REST client bound to the test configuration."""
    client = GitHubRestClient(config=test_config)
    yield client
    await client.close()
