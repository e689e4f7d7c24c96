"""Shared fixtures: a temporary config.toml and a canned CHPL server."""

from unittest import mock

import pytest
import requests
import structlog

from chpl_api import ChplApiWrapper


BASE_URL = "https://chpl.test/rest"

CONFIG_TOML = f"""
[chpl]
chplApiUrlBegin = "{BASE_URL}"
apiKey = "config-key"
statusApi = "/status"
educationTypesApi = "/data/education_types"
practiceTypeNamesApi = "/data/practice_types"
searchApi = "/search/v2?certificationEditions=2015"
detailsApi = "/listings/{{}}/details"

[http]
timeout = 5

[logging]
level = "DEBUG"
"""

STATUS_URL = f"{BASE_URL}/status"
EDUCATION_TYPES_URL = f"{BASE_URL}/data/education_types"
PRACTICE_TYPES_URL = f"{BASE_URL}/data/practice_types"
SEARCH_URL = f"{BASE_URL}/search/v2?certificationEditions=2015"


def details_url(listing_id) -> str:
    return f"{BASE_URL}/listings/{listing_id}/details"


class FakeResponse:
    """Just enough of requests.Response for the client."""

    def __init__(self, payload=None, status_code: int = 200, reason: str = "OK", text=None):
        self.payload = payload
        self.status_code = status_code
        self.reason = reason
        self.text = text

    def json(self):
        if self.text is not None:
            raise ValueError(f"Expecting value: {self.text[:20]!r}")
        return self.payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error: {self.reason}")


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    monkeypatch.setenv("CHPL_API_KEY", "test-key")
    ChplApiWrapper.reset_instance()
    yield
    ChplApiWrapper.reset_instance()
    structlog.reset_defaults()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(CONFIG_TOML)
    return path


@pytest.fixture
def api(config_file) -> ChplApiWrapper:
    return ChplApiWrapper(config_file)


@pytest.fixture
def routes() -> dict:
    """URL -> FakeResponse (or exception) served by the patched requests.get."""
    return {}


@pytest.fixture
def http_get(routes):
    def serve(url, headers=None, timeout=None):
        response = routes.get(url)
        if response is None:
            raise requests.ConnectionError(f"No route to {url}")
        if isinstance(response, Exception):
            raise response
        return response

    with mock.patch("chpl_api.client.requests.get", side_effect=serve) as patched:
        yield patched
