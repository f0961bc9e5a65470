"""HTTP transport for BinaryLane API calls."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from blcli.constants import USER_AGENT
from blcli.errors import APIError, AuthError, RequestError
from blcli.log import get_logger

logger = get_logger("http")


def _error_message(response: httpx.Response) -> tuple[str, str | None]:
    """Pull the API's `message` and request id out of an error body."""

    fallback = response.reason_phrase or "request failed"
    try:
        decoded = response.json()
    except ValueError:
        return fallback, None
    if not isinstance(decoded, dict):
        return fallback, None

    message = decoded.get("message") or decoded.get("title") or fallback
    request_id = decoded.get("request_id") or response.headers.get("x-request-id")
    return str(message), str(request_id) if request_id else None


class BinaryLaneTransport:
    """Async transport issuing single, authenticated JSON requests.

    There is no retry: every call reaches the network at most once.
    """

    def __init__(
        self,
        *,
        base_url: str,
        access_token: str | None,
        timeout: float,
        verify_tls: bool,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._access_token = access_token
        self._owns_http_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout),
            verify=verify_tls,
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._client.aclose()

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str | int | float | bool] | None = None,
        json_data: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        if not self._access_token:
            raise AuthError("an access token is required; pass --access-token or run 'bl configure'")

        method_upper = method.upper()
        headers: dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
            "Authorization": f"Bearer {self._access_token}",
        }
        if json_data is not None:
            headers["Content-Type"] = "application/json"

        logger.debug("%s %s params=%s", method_upper, path, dict(params) if params else {})
        try:
            response = await self._client.request(
                method_upper,
                path,
                params=params,
                json=json_data,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise RequestError(f"{method_upper} {path} failed: {exc}") from exc

        logger.debug("%s %s -> %d", method_upper, path, response.status_code)
        if response.status_code >= 400:
            message, request_id = _error_message(response)
            raise APIError(
                status_code=response.status_code,
                message=message,
                body=response.text.strip() or None,
                request_id=request_id,
            )

        if response.status_code == 204 or not response.text.strip():
            return {}

        try:
            decoded = response.json()
        except ValueError as exc:
            raise RequestError("response was not valid JSON") from exc

        if not isinstance(decoded, dict):
            raise RequestError("response payload must be a JSON object")

        return decoded
