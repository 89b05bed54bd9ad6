from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, NoReturn

import typer
from waha_client import AuthenticationError, ClientConfig, TransportError, WahaClient, WahaError

from . import console
from .config import AppConfig, apply_profile, normalize_base_url

log = logging.getLogger(__name__)


def make_client(
    cfg: AppConfig,
    *,
    profile: str | None,
    base_url_override: str | None,
) -> WahaClient:
    effective_cfg = apply_profile(cfg, profile)
    base_url = normalize_base_url(base_url_override or effective_cfg.base_url)
    log.debug("using gateway %s (profile=%s)", base_url, profile or "-")
    return WahaClient(
        ClientConfig(
            base_url=base_url,
            api_key=effective_cfg.api_key or None,
            timeout_s=effective_cfg.timeout_s,
        )
    )


def run_api(client: WahaClient, action: Callable[[WahaClient], Awaitable[Any]]) -> Any:
    """Run one coroutine against ``client`` and close it afterwards."""

    async def _run() -> Any:
        async with client:
            return await action(client)

    return asyncio.run(_run())


def fail(exc: WahaError, what: str) -> NoReturn:
    if isinstance(exc, AuthenticationError):
        console.err("Unauthorized. Check the API key (waha settings set api_key ...).")
    elif isinstance(exc, TransportError):
        console.err(f"Gateway unreachable: {exc}")
    else:
        console.err(f"Failed to {what}: {exc}")
    raise typer.Exit(code=2)
