from __future__ import annotations

from typing import Any

from .transport import Transport


class ChatsApi:
    def __init__(self, transport: Transport):
        self._t = transport

    async def list(self, session: str, *, limit: int | None = None, offset: int | None = None) -> Any:
        params: dict[str, Any] = {}
        if limit is not None:
            params["limit"] = int(limit)
        if offset is not None:
            params["offset"] = int(offset)
        return await self._t.request("GET", f"/api/{session}/chats", params=params)

    async def get_overview(self, session: str) -> Any:
        return await self._t.request("GET", f"/api/{session}/chats/overview")

    async def get_picture(self, session: str, chat_id: str, *, refresh: bool = False) -> Any:
        params: dict[str, Any] = {}
        if refresh:
            params["refresh"] = True
        return await self._t.request("GET", f"/api/{session}/chats/{chat_id}/picture", params=params)

    async def unread(self, session: str, chat_id: str) -> Any:
        return await self._t.request("POST", f"/api/{session}/chats/{chat_id}/unread")

    async def archive(self, session: str, chat_id: str) -> Any:
        return await self._t.request("POST", f"/api/{session}/chats/{chat_id}/archive")

    async def unarchive(self, session: str, chat_id: str) -> Any:
        return await self._t.request("POST", f"/api/{session}/chats/{chat_id}/unarchive")

    async def delete(self, session: str, chat_id: str) -> Any:
        return await self._t.request("DELETE", f"/api/{session}/chats/{chat_id}")

    async def read_messages(self, session: str, chat_id: str, *, message_ids: list[str] | None = None) -> Any:
        body: dict[str, Any] = {}
        if message_ids is not None:
            body["messageIds"] = message_ids
        return await self._t.request("POST", f"/api/{session}/chats/{chat_id}/messages/read", json_body=body)

    async def get_messages(
            self,
            session: str,
            chat_id: str,
            *,
            limit: int | None = None,
            download_media: bool = False,
    ) -> Any:
        params: dict[str, Any] = {}
        if limit is not None:
            params["limit"] = int(limit)
        if download_media:
            params["downloadMedia"] = True
        return await self._t.request("GET", f"/api/{session}/chats/{chat_id}/messages", params=params)

    async def get_message(self, session: str, chat_id: str, message_id: str, *, download_media: bool = False) -> Any:
        params: dict[str, Any] = {}
        if download_media:
            params["downloadMedia"] = True
        return await self._t.request(
            "GET",
            f"/api/{session}/chats/{chat_id}/messages/{message_id}",
            params=params,
        )
