from __future__ import annotations

from typing import Any

from .transport import Transport


class GroupsApi:
    def __init__(self, transport: Transport):
        self._t = transport

    async def list(self, session: str) -> Any:
        return await self._t.request("GET", f"/api/{session}/groups")

    async def get_count(self, session: str) -> Any:
        return await self._t.request("GET", f"/api/{session}/groups/count")

    async def get(self, session: str, group_id: str) -> Any:
        return await self._t.request("GET", f"/api/{session}/groups/{group_id}")

    async def create(self, session: str, subject: str, *, participants: list[Any] | None = None) -> Any:
        body: dict[str, Any] = {"subject": subject}
        if participants is not None:
            body["participants"] = participants
        return await self._t.request("POST", f"/api/{session}/groups", json_body=body)

    async def leave(self, session: str, group_id: str) -> Any:
        return await self._t.request("POST", f"/api/{session}/groups/{group_id}/leave")

    async def update_subject(self, session: str, group_id: str, subject: str) -> Any:
        body = {"subject": subject}
        return await self._t.request("PUT", f"/api/{session}/groups/{group_id}/subject", json_body=body)

    async def update_description(self, session: str, group_id: str, description: str) -> Any:
        body = {"description": description}
        return await self._t.request("PUT", f"/api/{session}/groups/{group_id}/description", json_body=body)

    async def get_invite_code(self, session: str, group_id: str) -> Any:
        return await self._t.request("GET", f"/api/{session}/groups/{group_id}/invite-code")

    async def revoke_invite_code(self, session: str, group_id: str) -> Any:
        return await self._t.request("POST", f"/api/{session}/groups/{group_id}/invite-code/revoke")

    async def get_picture(self, session: str, group_id: str, *, refresh: bool = False) -> Any:
        params: dict[str, Any] = {}
        if refresh:
            params["refresh"] = True
        return await self._t.request("GET", f"/api/{session}/groups/{group_id}/picture", params=params)

    async def get_participants(self, session: str, group_id: str) -> Any:
        return await self._t.request("GET", f"/api/{session}/groups/{group_id}/participants")

    async def add_participants(self, session: str, group_id: str, participants: list[Any]) -> Any:
        return await self._participants_action(session, group_id, "participants/add", participants)

    async def remove_participants(self, session: str, group_id: str, participants: list[Any]) -> Any:
        return await self._participants_action(session, group_id, "participants/remove", participants)

    async def promote_admin(self, session: str, group_id: str, participants: list[Any]) -> Any:
        return await self._participants_action(session, group_id, "admin/promote", participants)

    async def demote_admin(self, session: str, group_id: str, participants: list[Any]) -> Any:
        return await self._participants_action(session, group_id, "admin/demote", participants)

    async def _participants_action(self, session: str, group_id: str, action: str, participants: list[Any]) -> Any:
        body = {"participants": participants}
        return await self._t.request("POST", f"/api/{session}/groups/{group_id}/{action}", json_body=body)
