"""Connection handling for Toon API."""

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import aiohttp

from .const import API_BASE_URL, DEFAULT_TIMEOUT
from .exceptions import (
    ToonAuthError,
    ToonConnectionError,
    ToonDecodeError,
    ToonError,
    ToonNotFoundError,
    ToonServerError,
)
from .utils import mask_params, mask_pii

_LOGGER = logging.getLogger(__name__)


def _raise_for_status(status: int, body: str) -> None:
    """Raise a specific ToonError if status >= 400."""
    if status < 400:
        return

    error_message = body.strip()[:200] or f"HTTP {status}"
    _LOGGER.error("API Error %s: %s", status, mask_pii(error_message))

    if status == 401:
        raise ToonAuthError(f"Unauthorized: {error_message}", status)

    if status == 403:
        raise ToonAuthError(f"Forbidden: {error_message}", status)

    if status == 404:
        raise ToonNotFoundError(f"Not Found: {error_message}", status)

    if status >= 500:
        raise ToonServerError(f"Server Error {status}: {error_message}", status)

    raise ToonError(f"Unknown Error {status}: {error_message}", status)


class ToonConnector:
    """Handles raw HTTP connections to the Toon API.

    Every call is a single GET against the base URL plus an endpoint
    suffix, with the session identifiers passed as query parameters.
    """

    def __init__(
        self,
        websession: aiohttp.ClientSession,
        base_url: str = API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.websession = websession
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    def _prepare_url(self, endpoint: str) -> str:
        """Ensure URL is absolute."""
        if endpoint.startswith("http"):
            return endpoint
        return f"{self.base_url}{endpoint.lstrip('/')}"

    async def get_text(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> str:
        """GET the endpoint and return the raw body."""
        return await self._request(self._prepare_url(endpoint), params or {})

    async def get_json(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """GET the endpoint and decode the body as a JSON object."""
        body = await self.get_text(endpoint, params)
        try:
            data = json.loads(body)
        except ValueError as e:
            raise ToonDecodeError(f"Invalid JSON from {endpoint}: {e}") from e

        if not isinstance(data, dict):
            raise ToonDecodeError(f"Expected a JSON object from {endpoint}, got {type(data).__name__}")
        return data

    async def _request(self, url: str, params: Dict[str, Any]) -> str:
        """
        Central request logic.
        Handles execution and delegates error checking.
        """
        query = {key: str(value) for key, value in params.items()}
        try:
            masked = "&".join(f"{k}={v}" for k, v in mask_params(query).items())
            _LOGGER.debug("Request: GET %s?%s", url, masked)
            async with self.websession.get(url, params=query, timeout=self.timeout) as resp:
                body = await resp.text()
                _LOGGER.debug("Response Status: %s", resp.status)
                _LOGGER.debug("Response Headers: %s", dict(resp.headers))
                _LOGGER.debug(mask_pii(f"Response Body: {body}"))

                _raise_for_status(resp.status, body)
                return body

        except ToonError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            # Wrap low-level network errors.
            raise ToonConnectionError(f"Network error: {e}") from e
