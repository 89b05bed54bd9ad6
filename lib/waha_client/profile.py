from __future__ import annotations

from .transport import Transport


class ProfileApi:
    def __init__(self, transport: Transport):
        self._t = transport

    def get_picture_url(self, session: str) -> str:
        """URL of the session's own profile picture; no request is made."""
        return f"{self._t.config.base_url}/api/{session}/profile/picture"
