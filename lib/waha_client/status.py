from __future__ import annotations

from typing import Any

from .media import IMAGE_MIMETYPE, VIDEO_MIMETYPE, VOICE_MIMETYPE, FileInput, file_payload
from .transport import Transport


class StatusApi:
    """Status updates (stories) posted from a session."""

    def __init__(self, transport: Transport):
        self._t = transport

    async def send_text(self, session: str, text: str) -> Any:
        return await self._t.request("POST", f"/api/{session}/status/text", json_body={"text": text})

    async def send_image(self, session: str, file: FileInput, *, caption: str | None = None) -> Any:
        body: dict[str, Any] = {"file": file_payload(file, IMAGE_MIMETYPE)}
        if caption:
            body["caption"] = caption
        return await self._t.request("POST", f"/api/{session}/status/image", json_body=body)

    async def send_voice(self, session: str, file: FileInput) -> Any:
        body = {"file": file_payload(file, VOICE_MIMETYPE, force_mimetype=True)}
        return await self._t.request("POST", f"/api/{session}/status/voice", json_body=body)

    async def send_video(self, session: str, file: FileInput, *, caption: str | None = None) -> Any:
        body: dict[str, Any] = {"file": file_payload(file, VIDEO_MIMETYPE)}
        if caption:
            body["caption"] = caption
        return await self._t.request("POST", f"/api/{session}/status/video", json_body=body)

    async def delete(self, session: str, message_id: str) -> Any:
        body = {"messageId": message_id}
        return await self._t.request("POST", f"/api/{session}/status/delete", json_body=body)

    async def get_new_message_id(self, session: str) -> Any:
        return await self._t.request("GET", f"/api/{session}/status/new-message-id")
