"""HTTP client for the CHPL API."""

import requests

from .auth import ApiKeyProvider
from .logger import get_logger
from .result import Result


log = get_logger(__name__)


class ChplClient:
    """Blocking HTTP GET client; every call returns a Result."""

    def __init__(self, key_provider: ApiKeyProvider, timeout: float = 30.0):
        self.key_provider = key_provider
        self.timeout = timeout

    def _get_headers(self, authenticated: bool) -> dict:
        """Build request headers."""
        headers = {"Accept": "application/json"}
        if authenticated:
            headers.update(self.key_provider.get_auth_header())
        return headers

    def _send(self, url: str, authenticated: bool) -> Result[requests.Response]:
        log.debug("chpl.request", url=url, authenticated=authenticated)
        try:
            response = requests.get(
                url, headers=self._get_headers(authenticated), timeout=self.timeout
            )
        except requests.RequestException as e:
            log.error("chpl.request_failed", url=url, error=str(e))
            return Result.failure(f"GET {url} failed: {e}")
        log.debug("chpl.response", url=url, status=response.status_code)
        return Result.success(response, response.reason or "")

    def get_reason(self, url: str) -> Result[str]:
        """GET without auth and return the HTTP reason phrase.

        Any HTTP response counts as a success, including 4xx/5xx; only a
        transport failure is an error.
        """
        return self._send(url, authenticated=False).map(lambda r: r.reason or "")

    def get_json(self, url: str, authenticated: bool = True) -> Result:
        """
        Make a GET request and parse the JSON body.

        Args:
            url: Full endpoint URL
            authenticated: Send the API-Key header

        Returns:
            Result holding the decoded JSON document
        """
        sent = self._send(url, authenticated)
        if not sent.ok:
            return sent

        response = sent.value
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            log.error(
                "chpl.http_error", url=url, status=response.status_code, error=str(e)
            )
            return Result.failure(str(e), sent.reason)

        try:
            data = response.json()
        except ValueError as e:
            log.error("chpl.invalid_json", url=url, error=str(e))
            return Result.failure(f"Invalid JSON from {url}: {e}", sent.reason)
        return Result.success(data, sent.reason)
