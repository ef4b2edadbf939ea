
import json
import os
import re

import pytest

from toon_client.const import API_BASE_URL


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: end-to-end tests against a stubbed API")


@pytest.fixture
def fixtures_dir():
    """Return the path to the JSON response fixtures."""
    return os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def load_fixture_json(fixtures_dir):
    """Factory to load a fixture JSON by file name."""
    def _load(name):
        with open(os.path.join(fixtures_dir, name), "r") as f:
            return json.load(f)
    return _load


@pytest.fixture
def endpoint_url():
    """Factory for a regex matching an endpoint URL with any query string."""
    def _pattern(endpoint):
        return re.compile(rf"^{re.escape(API_BASE_URL + endpoint)}(\?.*)?$")
    return _pattern


@pytest.fixture
def requested_urls():
    """Factory listing URLs requested through aioresponses, in order.

    With an endpoint given, only URLs whose path ends with it are returned.
    """
    def _urls(mocked, endpoint=None):
        urls = [url for (method, url), calls in mocked.requests.items() for _ in calls]
        if endpoint is None:
            return urls
        return [url for url in urls if url.path.endswith("/" + endpoint)]
    return _urls
