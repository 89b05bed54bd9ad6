from __future__ import annotations

from typing import Any

from .transport import Transport


class ContactsApi:
    def __init__(self, transport: Transport):
        self._t = transport

    async def list_all(
            self,
            session: str,
            *,
            limit: int | None = None,
            offset: int | None = None,
            sort_by: str | None = None,
            sort_order: str | None = None,
    ) -> Any:
        params: dict[str, Any] = {"session": session}
        if limit is not None:
            params["limit"] = int(limit)
        if offset is not None:
            params["offset"] = int(offset)
        if sort_by:
            params["sortBy"] = sort_by
        if sort_order:
            params["sortOrder"] = sort_order
        return await self._t.request("GET", "/api/contacts/all", params=params)

    async def get(self, session: str, contact_id: str) -> Any:
        params = {"session": session, "contactId": contact_id}
        return await self._t.request("GET", "/api/contacts", params=params)

    async def update(self, session: str, chat_id: str, first_name: str, last_name: str) -> Any:
        body = {"firstName": first_name, "lastName": last_name}
        return await self._t.request("PUT", f"/api/{session}/contacts/{chat_id}", json_body=body)

    async def check_exists(self, session: str, phone: str) -> Any:
        params = {"session": session, "phone": phone}
        return await self._t.request("GET", "/api/contacts/check-exists", params=params)

    async def get_about(self, session: str, contact_id: str) -> Any:
        params = {"session": session, "contactId": contact_id}
        return await self._t.request("GET", "/api/contacts/about", params=params)

    async def get_profile_picture(self, session: str, contact_id: str, *, refresh: bool = False) -> Any:
        params: dict[str, Any] = {"session": session, "contactId": contact_id}
        if refresh:
            params["refresh"] = True
        return await self._t.request("GET", "/api/contacts/profile-picture", params=params)

    async def block(self, session: str, chat_id: str) -> Any:
        body = {"session": session, "chatId": chat_id}
        return await self._t.request("POST", "/api/contacts/block", json_body=body)

    async def unblock(self, session: str, chat_id: str) -> Any:
        body = {"session": session, "chatId": chat_id}
        return await self._t.request("POST", "/api/contacts/unblock", json_body=body)
