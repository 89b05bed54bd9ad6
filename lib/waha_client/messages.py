from __future__ import annotations

from typing import Any

from .media import (
    FILE_MIMETYPE,
    IMAGE_MIMETYPE,
    VIDEO_MIMETYPE,
    VOICE_MIMETYPE,
    FileInput,
    file_payload,
)
from .transport import Transport


class MessagesApi:
    """Sending and managing messages."""

    def __init__(self, transport: Transport):
        self._t = transport

    async def send_text(
            self,
            session: str,
            chat_id: str,
            text: str,
            *,
            reply_to: str | None = None,
            mentions: list[str] | None = None,
            link_preview: bool = True,
            link_preview_high_quality: bool = False,
    ) -> Any:
        body: dict[str, Any] = {"session": session, "chatId": chat_id, "text": text}
        if reply_to:
            body["reply_to"] = reply_to
        if mentions is not None:
            body["mentions"] = mentions
        if not link_preview:
            body["linkPreview"] = False
        if link_preview_high_quality:
            body["linkPreviewHighQuality"] = True
        return await self._t.request("POST", "/api/sendText", json_body=body)

    async def send_seen(
            self,
            session: str,
            chat_id: str,
            *,
            message_ids: list[str] | None = None,
            participant: str | None = None,
    ) -> Any:
        body: dict[str, Any] = {"session": session, "chatId": chat_id}
        if message_ids is not None:
            body["messageIds"] = message_ids
        if participant:
            body["participant"] = participant
        return await self._t.request("POST", "/api/sendSeen", json_body=body)

    async def send_image(self, session: str, chat_id: str, file: FileInput, *, caption: str | None = None) -> Any:
        body: dict[str, Any] = {
            "session": session,
            "chatId": chat_id,
            "file": file_payload(file, IMAGE_MIMETYPE),
        }
        if caption:
            body["caption"] = caption
        return await self._t.request("POST", "/api/sendImage", json_body=body)

    async def send_video(
            self,
            session: str,
            chat_id: str,
            file: FileInput,
            *,
            caption: str | None = None,
            as_note: bool = False,
            convert: bool = False,
    ) -> Any:
        body: dict[str, Any] = {
            "session": session,
            "chatId": chat_id,
            "file": file_payload(file, VIDEO_MIMETYPE),
        }
        if caption:
            body["caption"] = caption
        if as_note:
            body["asNote"] = True
        if convert:
            body["convert"] = True
        return await self._t.request("POST", "/api/sendVideo", json_body=body)

    async def send_voice(self, session: str, chat_id: str, file: FileInput, *, convert: bool = False) -> Any:
        body: dict[str, Any] = {
            "session": session,
            "chatId": chat_id,
            "file": file_payload(file, VOICE_MIMETYPE, force_mimetype=True),
        }
        if convert:
            body["convert"] = True
        return await self._t.request("POST", "/api/sendVoice", json_body=body)

    async def send_file(self, session: str, chat_id: str, file: FileInput, *, caption: str | None = None) -> Any:
        body: dict[str, Any] = {
            "session": session,
            "chatId": chat_id,
            "file": file_payload(file, FILE_MIMETYPE),
        }
        if caption:
            body["caption"] = caption
        return await self._t.request("POST", "/api/sendFile", json_body=body)

    async def send_location(
            self,
            session: str,
            chat_id: str,
            latitude: float,
            longitude: float,
            *,
            title: str | None = None,
    ) -> Any:
        body: dict[str, Any] = {
            "session": session,
            "chatId": chat_id,
            "latitude": latitude,
            "longitude": longitude,
        }
        if title:
            body["title"] = title
        return await self._t.request("POST", "/api/sendLocation", json_body=body)

    async def send_contact(self, session: str, chat_id: str, contacts: list[dict[str, Any]]) -> Any:
        body = {"session": session, "chatId": chat_id, "contacts": contacts}
        return await self._t.request("POST", "/api/sendContactVcard", json_body=body)

    async def send_poll(self, session: str, chat_id: str, poll: dict[str, Any]) -> Any:
        body = {"session": session, "chatId": chat_id, "poll": poll}
        return await self._t.request("POST", "/api/sendPoll", json_body=body)

    async def forward(self, session: str, chat_id: str, message_id: str) -> Any:
        body = {"session": session, "chatId": chat_id, "messageId": message_id}
        return await self._t.request("POST", "/api/forwardMessage", json_body=body)

    async def add_reaction(self, session: str, message_id: str, reaction: str) -> Any:
        # an empty reaction removes the existing one
        body = {"session": session, "messageId": message_id, "reaction": reaction}
        return await self._t.request("PUT", "/api/reaction", json_body=body)

    async def star(self, session: str, chat_id: str, message_id: str, *, star: bool = True) -> Any:
        body = {"session": session, "chatId": chat_id, "messageId": message_id, "star": bool(star)}
        return await self._t.request("PUT", "/api/star", json_body=body)

    async def edit(self, session: str, chat_id: str, message_id: str, text: str, *, link_preview: bool = True) -> Any:
        body: dict[str, Any] = {"text": text}
        if not link_preview:
            body["linkPreview"] = False
        return await self._t.request("PUT", f"/api/{session}/chats/{chat_id}/messages/{message_id}", json_body=body)

    async def delete(self, session: str, chat_id: str, message_id: str) -> Any:
        return await self._t.request("DELETE", f"/api/{session}/chats/{chat_id}/messages/{message_id}")

    async def pin(self, session: str, chat_id: str, message_id: str) -> Any:
        return await self._t.request("POST", f"/api/{session}/chats/{chat_id}/messages/{message_id}/pin")

    async def unpin(self, session: str, chat_id: str, message_id: str) -> Any:
        return await self._t.request("POST", f"/api/{session}/chats/{chat_id}/messages/{message_id}/unpin")
