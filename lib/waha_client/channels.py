from __future__ import annotations

from typing import Any

from .transport import Transport


class ChannelsApi:
    """WhatsApp channels (newsletters)."""

    def __init__(self, transport: Transport):
        self._t = transport

    async def list(self, session: str) -> Any:
        return await self._t.request("GET", f"/api/{session}/channels")

    async def get(self, session: str, channel_id: str) -> Any:
        return await self._t.request("GET", f"/api/{session}/channels/{channel_id}")

    async def create(self, session: str, name: str, *, description: str | None = None) -> Any:
        body: dict[str, Any] = {"name": name}
        if description:
            body["description"] = description
        return await self._t.request("POST", f"/api/{session}/channels", json_body=body)

    async def delete(self, session: str, channel_id: str) -> Any:
        return await self._t.request("DELETE", f"/api/{session}/channels/{channel_id}")

    async def get_messages(self, session: str, channel_id: str, *, limit: int | None = None) -> Any:
        # channel messages are served by the chats endpoint
        params: dict[str, Any] = {}
        if limit is not None:
            params["limit"] = int(limit)
        return await self._t.request("GET", f"/api/{session}/chats/{channel_id}/messages", params=params)
