from .client import WahaClient
from .config_types import ClientConfig
from .errors import (
    ApiError,
    AuthenticationError,
    ClientError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    WahaError,
)

__version__ = "0.1.0"

__all__ = [
    "WahaClient",
    "ClientConfig",
    "WahaError",
    "TransportError",
    "ApiError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "ClientError",
]
