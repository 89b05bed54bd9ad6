from __future__ import annotations

from typing import Any

from .transport import JSON_CONTENT_TYPE, Transport

IMAGE_ACCEPT = "image/png"


class SessionsApi:
    """Sessions: WhatsApp accounts connected to the gateway."""

    def __init__(self, transport: Transport):
        self._t = transport

    async def list(self, *, all_sessions: bool = False) -> Any:
        params: dict[str, Any] = {}
        if all_sessions:
            params["all"] = True
        return await self._t.request("GET", "/api/sessions", params=params)

    async def get(self, session: str) -> Any:
        return await self._t.request("GET", f"/api/sessions/{session}")

    async def create(
            self,
            *,
            name: str | None = None,
            config: dict[str, Any] | None = None,
            start: bool = True,
    ) -> Any:
        body: dict[str, Any] = {}
        if name:
            body["name"] = name
        if config:
            body["config"] = config
        if not start:
            body["start"] = False
        return await self._t.request("POST", "/api/sessions", json_body=body)

    async def update(self, session: str, config: dict[str, Any]) -> Any:
        # the gateway expects the full config, not a patch
        body = {"name": session, "config": config}
        return await self._t.request("PUT", f"/api/sessions/{session}", json_body=body)

    async def start(self, session: str) -> Any:
        return await self._t.request("POST", f"/api/sessions/{session}/start")

    async def stop(self, session: str) -> Any:
        return await self._t.request("POST", f"/api/sessions/{session}/stop")

    async def restart(self, session: str) -> Any:
        return await self._t.request("POST", f"/api/sessions/{session}/restart")

    async def logout(self, session: str) -> Any:
        return await self._t.request("POST", f"/api/sessions/{session}/logout")

    async def delete(self, session: str) -> Any:
        return await self._t.request("DELETE", f"/api/sessions/{session}")

    async def get_me(self, session: str) -> Any:
        """Account bound to the session, or None while it is not authenticated."""
        return await self._t.request("GET", f"/api/sessions/{session}/me")

    async def get_qr(self, session: str, *, format: str = "image", accept_json: bool = False) -> Any:
        """QR code for pairing.

        ``format="image"`` returns PNG bytes, or ``{"mimetype", "data"}`` with
        base64 data when ``accept_json`` is set. ``format="raw"`` always
        returns JSON ``{"value": ...}``.
        """
        as_json = accept_json or format == "raw"
        return await self._t.request(
            "GET",
            f"/api/{session}/auth/qr",
            params={"format": format},
            headers={"Accept": JSON_CONTENT_TYPE if as_json else IMAGE_ACCEPT},
        )

    async def request_code(self, session: str, phone_number: str) -> Any:
        body = {"phoneNumber": phone_number}
        return await self._t.request("POST", f"/api/{session}/auth/request-code", json_body=body)

    async def get_screenshot(self, session: str, *, accept_json: bool = False) -> Any:
        return await self._t.request(
            "GET",
            "/api/screenshot",
            params={"session": session},
            headers={"Accept": JSON_CONTENT_TYPE if accept_json else IMAGE_ACCEPT},
        )
