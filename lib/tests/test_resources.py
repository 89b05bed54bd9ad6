from __future__ import annotations

import base64
import json

import httpx
import pytest

from waha_client import ClientConfig, WahaClient


class _Recorder:
    def __init__(self, response: httpx.Response | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._response = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._response or httpx.Response(200, json={"ok": True})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content) if self.last.content else None


@pytest.fixture
def recorder() -> _Recorder:
    return _Recorder()


@pytest.fixture
def client(recorder):
    return WahaClient(ClientConfig(base_url="http://waha.test"), transport=httpx.MockTransport(recorder))


@pytest.mark.asyncio
async def test_sessions_list_omits_all_by_default(client, recorder) -> None:
    await client.sessions.list()
    assert recorder.last.url.path == "/api/sessions"
    assert recorder.last.url.query == b""

    await client.sessions.list(all_sessions=True)
    assert recorder.last.url.params["all"] == "true"


@pytest.mark.asyncio
async def test_sessions_create_sparse_body(client, recorder) -> None:
    await client.sessions.create()
    assert recorder.last_json() == {}

    await client.sessions.create(name="work", config={"proxy": None}, start=False)
    assert recorder.last.method == "POST"
    assert recorder.last_json() == {"name": "work", "config": {"proxy": None}, "start": False}


@pytest.mark.asyncio
async def test_sessions_update_sends_full_config(client, recorder) -> None:
    await client.sessions.update("work", {"webhooks": []})
    assert recorder.last.method == "PUT"
    assert recorder.last.url.path == "/api/sessions/work"
    assert recorder.last_json() == {"name": "work", "config": {"webhooks": []}}


@pytest.mark.asyncio
@pytest.mark.parametrize("action", ["start", "stop", "restart", "logout"])
async def test_sessions_lifecycle_actions(client, recorder, action) -> None:
    await getattr(client.sessions, action)("default")
    assert recorder.last.method == "POST"
    assert recorder.last.url.path == f"/api/sessions/default/{action}"


@pytest.mark.asyncio
async def test_sessions_qr_accept_header(client, recorder) -> None:
    await client.sessions.get_qr("default")
    assert recorder.last.url.path == "/api/default/auth/qr"
    assert recorder.last.url.params["format"] == "image"
    assert recorder.last.headers["Accept"] == "image/png"

    await client.sessions.get_qr("default", accept_json=True)
    assert recorder.last.headers["Accept"] == "application/json"

    await client.sessions.get_qr("default", format="raw")
    assert recorder.last.url.params["format"] == "raw"
    assert recorder.last.headers["Accept"] == "application/json"


@pytest.mark.asyncio
async def test_sessions_screenshot_returns_bytes() -> None:
    png = b"\x89PNG\r\n\x1a\nrest"
    recorder = _Recorder(httpx.Response(200, content=png, headers={"content-type": "image/png"}))
    async with WahaClient(ClientConfig(base_url="http://waha.test"), transport=httpx.MockTransport(recorder)) as c:
        data = await c.sessions.get_screenshot("default")

    assert data == png
    assert recorder.last.url.params["session"] == "default"


@pytest.mark.asyncio
async def test_send_text_optional_fields(client, recorder) -> None:
    await client.messages.send_text("default", "123@c.us", "hi")
    assert recorder.last.url.path == "/api/sendText"
    assert recorder.last_json() == {"session": "default", "chatId": "123@c.us", "text": "hi"}

    await client.messages.send_text(
        "default",
        "123@c.us",
        "hi",
        reply_to="msg-1",
        mentions=["456@c.us"],
        link_preview=False,
        link_preview_high_quality=True,
    )
    assert recorder.last_json() == {
        "session": "default",
        "chatId": "123@c.us",
        "text": "hi",
        "reply_to": "msg-1",
        "mentions": ["456@c.us"],
        "linkPreview": False,
        "linkPreviewHighQuality": True,
    }


@pytest.mark.asyncio
async def test_send_image_from_path_base64(client, recorder, tmp_path) -> None:
    raw = bytes(range(256)) * 3
    path = tmp_path / "photo.png"
    path.write_bytes(raw)

    await client.messages.send_image("default", "123@c.us", str(path), caption="look")

    body = recorder.last_json()
    assert body["file"]["data"] == base64.b64encode(raw).decode("ascii")
    assert "\n" not in body["file"]["data"]
    assert body["file"]["mimetype"] == "image/png"
    assert body["file"]["filename"] == "photo.png"
    assert body["caption"] == "look"


@pytest.mark.asyncio
async def test_send_file_unknown_extension_falls_back(client, recorder, tmp_path) -> None:
    path = tmp_path / "blob.zzzunknown"
    path.write_bytes(b"abc")

    await client.messages.send_file("default", "123@c.us", path)

    assert recorder.last_json()["file"] == {
        "mimetype": "application/octet-stream",
        "filename": "blob.zzzunknown",
        "data": "YWJj",
    }


@pytest.mark.asyncio
async def test_send_voice_forces_opus_mimetype(client, recorder, tmp_path) -> None:
    path = tmp_path / "note.mp3"
    path.write_bytes(b"voice")

    await client.messages.send_voice("default", "123@c.us", path, convert=True)

    body = recorder.last_json()
    assert body["file"]["mimetype"] == "audio/ogg; codecs=opus"
    assert body["convert"] is True


@pytest.mark.asyncio
async def test_send_video_payload_passthrough(client, recorder) -> None:
    payload = {"url": "https://cdn.test/v.mp4", "mimetype": "video/mp4"}

    await client.messages.send_video("default", "123@c.us", payload, as_note=True)

    body = recorder.last_json()
    assert body["file"] == payload
    assert body["asNote"] is True
    assert "convert" not in body


@pytest.mark.asyncio
async def test_missing_file_raises(client, tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        await client.messages.send_image("default", "123@c.us", str(tmp_path / "missing.jpg"))


@pytest.mark.asyncio
async def test_message_edit_and_delete_paths(client, recorder) -> None:
    await client.messages.edit("default", "123@c.us", "msg-1", "fixed", link_preview=False)
    assert recorder.last.method == "PUT"
    assert recorder.last.url.path == "/api/default/chats/123@c.us/messages/msg-1"
    assert recorder.last_json() == {"text": "fixed", "linkPreview": False}

    await client.messages.delete("default", "123@c.us", "msg-1")
    assert recorder.last.method == "DELETE"

    await client.messages.pin("default", "123@c.us", "msg-1")
    assert recorder.last.url.path.endswith("/messages/msg-1/pin")


@pytest.mark.asyncio
async def test_reaction_and_star(client, recorder) -> None:
    await client.messages.add_reaction("default", "msg-1", "👍")
    assert recorder.last.method == "PUT"
    assert recorder.last.url.path == "/api/reaction"
    assert recorder.last_json() == {"session": "default", "messageId": "msg-1", "reaction": "👍"}

    await client.messages.star("default", "123@c.us", "msg-1", star=False)
    assert recorder.last_json()["star"] is False


@pytest.mark.asyncio
async def test_chats_list_params(client, recorder) -> None:
    await client.chats.list("default")
    assert recorder.last.url.query == b""

    await client.chats.list("default", limit=10, offset=20)
    assert dict(recorder.last.url.params) == {"limit": "10", "offset": "20"}


@pytest.mark.asyncio
async def test_chats_get_messages_download_media(client, recorder) -> None:
    await client.chats.get_messages("default", "123@c.us", limit=5, download_media=True)
    assert recorder.last.url.path == "/api/default/chats/123@c.us/messages"
    assert dict(recorder.last.url.params) == {"limit": "5", "downloadMedia": "true"}


@pytest.mark.asyncio
async def test_chats_read_messages_body(client, recorder) -> None:
    await client.chats.read_messages("default", "123@c.us")
    assert recorder.last_json() == {}

    await client.chats.read_messages("default", "123@c.us", message_ids=["a", "b"])
    assert recorder.last_json() == {"messageIds": ["a", "b"]}


@pytest.mark.asyncio
async def test_contacts_query_params(client, recorder) -> None:
    await client.contacts.list_all("default", limit=3, sort_by="name")
    assert recorder.last.url.path == "/api/contacts/all"
    assert dict(recorder.last.url.params) == {"session": "default", "limit": "3", "sortBy": "name"}

    await client.contacts.check_exists("default", "1234567890")
    assert recorder.last.url.path == "/api/contacts/check-exists"
    assert dict(recorder.last.url.params) == {"session": "default", "phone": "1234567890"}

    await client.contacts.get_profile_picture("default", "123@c.us", refresh=True)
    assert recorder.last.url.params["refresh"] == "true"


@pytest.mark.asyncio
async def test_contacts_block_body(client, recorder) -> None:
    await client.contacts.block("default", "123@c.us")
    assert recorder.last.url.path == "/api/contacts/block"
    assert recorder.last_json() == {"session": "default", "chatId": "123@c.us"}


@pytest.mark.asyncio
async def test_groups_participant_actions(client, recorder) -> None:
    members = ["1@c.us", "2@c.us"]
    await client.groups.add_participants("default", "g1@g.us", members)
    assert recorder.last.url.path == "/api/default/groups/g1@g.us/participants/add"
    assert recorder.last_json() == {"participants": members}

    await client.groups.demote_admin("default", "g1@g.us", members)
    assert recorder.last.url.path == "/api/default/groups/g1@g.us/admin/demote"


@pytest.mark.asyncio
async def test_groups_create(client, recorder) -> None:
    await client.groups.create("default", "Team")
    assert recorder.last_json() == {"subject": "Team"}

    await client.groups.create("default", "Team", participants=["1@c.us"])
    assert recorder.last_json() == {"subject": "Team", "participants": ["1@c.us"]}


@pytest.mark.asyncio
async def test_status_image_without_session_in_body(client, recorder, tmp_path) -> None:
    path = tmp_path / "story.jpg"
    path.write_bytes(b"jpeg")

    await client.status.send_image("default", path)

    assert recorder.last.url.path == "/api/default/status/image"
    assert recorder.last_json() == {
        "file": {"mimetype": "image/jpeg", "filename": "story.jpg", "data": "anBlZw=="},
    }


@pytest.mark.asyncio
async def test_channels_messages_use_chats_route(client, recorder) -> None:
    await client.channels.get_messages("default", "123@newsletter", limit=2)
    assert recorder.last.url.path == "/api/default/chats/123@newsletter/messages"
    assert recorder.last.url.params["limit"] == "2"

    await client.channels.create("default", "News")
    assert recorder.last_json() == {"name": "News"}
