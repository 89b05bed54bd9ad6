from __future__ import annotations


class WahaError(Exception):
    """Base client error."""


class TransportError(WahaError):
    """No HTTP response was received (DNS, refused connection, timeout)."""


class ApiError(WahaError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthenticationError(ApiError):
    """401 from the gateway."""


class NotFoundError(ApiError):
    """404 from the gateway."""


class RateLimitError(ApiError):
    """429 from the gateway."""


class ServerError(ApiError):
    """5xx from the gateway."""


class ClientError(ApiError):
    """Any other 4xx from the gateway."""
