from __future__ import annotations

import json

import httpx
import pytest
from waha_client import ClientConfig, WahaClient

from waha_cli.config import AppConfig


class Gateway:
    """Records requests sent by a command and answers with canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []

    def reply(self, response: httpx.Response) -> None:
        self.responses.append(response)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responses:
            return self.responses.pop(0)
        return httpx.Response(200, json={})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content) if self.last.content else None

    def make_client(self, *_args, **_kwargs) -> WahaClient:
        return WahaClient(
            ClientConfig(base_url="http://waha.test", api_key="k"),
            transport=httpx.MockTransport(self),
        )


@pytest.fixture
def gateway() -> Gateway:
    return Gateway()


@pytest.fixture
def patch_command(monkeypatch, gateway):
    def _patch(module) -> None:
        monkeypatch.setattr(module, "load_config", lambda **_kwargs: AppConfig(session="main"))
        monkeypatch.setattr(module, "make_client", gateway.make_client)

    return _patch
