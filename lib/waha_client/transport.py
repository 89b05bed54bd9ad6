from __future__ import annotations

from typing import Any, Mapping

import httpx

from .config_types import ClientConfig
from .errors import (
    AuthenticationError,
    ClientError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
)

USER_AGENT = "waha-client/0.1.0"
JSON_CONTENT_TYPE = "application/json"
_SUCCESS_CODES = (200, 201, 204)


def _decode_body(r: httpx.Response) -> Any:
    if not r.content:
        return None
    content_type = r.headers.get("content-type", "").lower()
    if "json" in content_type:
        try:
            return r.json()
        except ValueError:
            return r.text
    if content_type.startswith("text/"):
        return r.text
    return r.content


def _remote_message(data: Any, default: str) -> str:
    if isinstance(data, dict):
        message = data.get("message")
        if message:
            return str(message)
    return default


def handle_response(r: httpx.Response) -> Any:
    """Map a gateway response to its decoded body or raise the matching error."""
    status = r.status_code
    details = r.text[:1000] if r.content else None

    if status == 401:
        raise AuthenticationError(status, "Authentication failed. Please check your API key.", details)
    if status == 404:
        raise NotFoundError(status, "Resource not found", details)
    if status == 429:
        raise RateLimitError(status, "Rate limit exceeded. Please try again later.", details)

    data = _decode_body(r)
    if status >= 500:
        msg = _remote_message(data, "Server error")
        raise ServerError(status, f"{msg} (Status: {status})", details)
    if status in _SUCCESS_CODES:
        return data
    if status >= 400:
        msg = _remote_message(data, "Unknown error")
        raise ClientError(status, f"{msg} (Status: {status})", details)
    return data


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.AsyncBaseTransport | None = None):
        self._cfg = cfg
        headers = {
            "User-Agent": USER_AGENT,
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_CONTENT_TYPE,
        }
        if cfg.api_key:
            headers["X-Api-Key"] = cfg.api_key

        self._client = httpx.AsyncClient(
            base_url=cfg.base_url,
            timeout=cfg.timeout_s,
            headers=headers,
            follow_redirects=True,
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
            self,
            method: str,
            path: str,
            *,
            params: Mapping[str, Any] | None = None,
            json_body: Any | None = None,
            headers: Mapping[str, str] | None = None,
    ) -> Any:
        try:
            r = await self._client.request(
                method.upper(),
                path,
                params=params or None,
                json=json_body,
                headers=headers,
            )
        except httpx.RequestError as e:
            raise TransportError(f"Request failed: {e}") from e
        return handle_response(r)
