"""JSON-over-HTTP transport for the norikra API."""

import logging
from typing import Any

import httpx

from norikra_client.error import ClientError, ServerError, TransportError

logger = logging.getLogger(__name__)


class RPC:
    """Calls norikra API methods as ``POST {base_url}/api/{method}``.

    Parameters are sent as a JSON object; the decoded JSON body is returned.
    4xx answers raise ClientError, 5xx answers raise ServerError, and any
    failure to talk to the server raises TransportError.
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def call(self, method: str, **params: Any) -> Any:
        url = f"/api/{method}"
        logger.debug("POST %s %s", url, sorted(params))
        try:
            response = self._client.post(url, json=params)
        except httpx.TransportError as e:
            server = str(self._client.base_url).rstrip("/")
            raise TransportError(str(e) or type(e).__name__, url=server) from e

        if response.status_code >= 500:
            raise ServerError(_error_message(response))
        if response.status_code >= 400:
            raise ClientError(_error_message(response))

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ServerError(f"invalid response to {method}: {e}") from e

    def close(self) -> None:
        self._client.close()


def _error_message(response: httpx.Response) -> str:
    """Extract a human readable message from an error response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("message", "error"):
            if body.get(key):
                return str(body[key])
    return response.text.strip() or f"HTTP {response.status_code}"
