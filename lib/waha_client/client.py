from __future__ import annotations

from typing import Any, Mapping

import httpx

from .channels import ChannelsApi
from .chats import ChatsApi
from .config_types import ClientConfig
from .contacts import ContactsApi
from .groups import GroupsApi
from .messages import MessagesApi
from .profile import ProfileApi
from .sessions import SessionsApi
from .status import StatusApi
from .transport import Transport


class WahaClient:
    """Async client for a WAHA (WhatsApp HTTP API) gateway.

    Usage::

        async with WahaClient(ClientConfig("http://localhost:3000", api_key="secret")) as client:
            await client.messages.send_text("default", "1234567890@c.us", "Hello")

    Resource groups share one :class:`Transport`; every method performs a
    single request and returns the decoded response body.
    """

    def __init__(self, cfg: ClientConfig | None = None, *, transport: httpx.AsyncBaseTransport | None = None):
        self._t = Transport(cfg or ClientConfig(), transport=transport)

        self.sessions = SessionsApi(self._t)
        self.messages = MessagesApi(self._t)
        self.chats = ChatsApi(self._t)
        self.contacts = ContactsApi(self._t)
        self.groups = GroupsApi(self._t)
        self.status = StatusApi(self._t)
        self.profile = ProfileApi(self._t)
        self.channels = ChannelsApi(self._t)

    @property
    def config(self) -> ClientConfig:
        return self._t.config

    @property
    def base_url(self) -> str:
        return self._t.config.base_url

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> WahaClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # --- generic entry points ---
    async def request(
            self,
            method: str,
            endpoint: str,
            params: Mapping[str, Any] | None = None,
            json_body: Any | None = None,
    ) -> Any:
        return await self._t.request(method, endpoint, params=params, json_body=json_body)

    async def get(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self._t.request("GET", endpoint, params=params)

    async def post(self, endpoint: str, json_body: Any | None = None) -> Any:
        return await self._t.request("POST", endpoint, json_body=json_body)

    async def put(self, endpoint: str, json_body: Any | None = None) -> Any:
        return await self._t.request("PUT", endpoint, json_body=json_body)

    async def delete(self, endpoint: str) -> Any:
        return await self._t.request("DELETE", endpoint)
