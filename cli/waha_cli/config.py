from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir
from waha_client.config_types import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_S

APP_NAME = "waha"
CONFIG_FILENAME = "config.toml"
DEFAULT_SESSION = "default"
ENV_BASE_URL = "WAHA_BASE_URL"
ENV_API_KEY = "WAHA_API_KEY"
ENV_SESSION = "WAHA_SESSION"

log = logging.getLogger(__name__)


@dataclass
class AppConfig:
    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    timeout_s: float = DEFAULT_TIMEOUT_S
    session: str = DEFAULT_SESSION


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def normalize_base_url(raw: str | None) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"
    return f"{scheme}{value}"


def _parse_timeout(value: Any, fallback: float) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return fallback
    return timeout if timeout > 0 else fallback


def _merge(cfg: AppConfig, data: dict[str, Any]) -> AppConfig:
    base_url = normalize_base_url(str(data.get("base_url") or ""))
    return AppConfig(
        base_url=base_url or cfg.base_url,
        api_key=str(data.get("api_key") or cfg.api_key),
        timeout_s=_parse_timeout(data.get("timeout_s"), cfg.timeout_s),
        session=str(data.get("session") or cfg.session).strip() or DEFAULT_SESSION,
    )


def from_toml(data: dict[str, Any]) -> AppConfig:
    return _merge(default_config(), data)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "base_url": cfg.base_url,
        "api_key": cfg.api_key,
        "timeout_s": float(cfg.timeout_s),
        "session": cfg.session,
    }


def _read_raw() -> dict[str, Any]:
    path = config_path()
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        log.debug("no config at %s, using defaults", path)
        return {}


def apply_env(cfg: AppConfig) -> AppConfig:
    base_url = normalize_base_url(os.getenv(ENV_BASE_URL, ""))
    api_key = os.getenv(ENV_API_KEY, "").strip()
    session = os.getenv(ENV_SESSION, "").strip()
    return AppConfig(
        base_url=base_url or cfg.base_url,
        api_key=api_key or cfg.api_key,
        timeout_s=cfg.timeout_s,
        session=session or cfg.session,
    )


def load_config(*, env: bool = True) -> AppConfig:
    cfg = from_toml(_read_raw())
    return apply_env(cfg) if env else cfg


def apply_profile(cfg: AppConfig, profile: str | None) -> AppConfig:
    if not profile:
        return cfg
    profiles_raw = _read_raw().get("profiles") or {}
    if not isinstance(profiles_raw, dict):
        return cfg
    prof = profiles_raw.get(profile)
    if not isinstance(prof, dict):
        log.debug("profile %s not found", profile)
        return cfg
    return _merge(cfg, prof)


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    # keep profiles written by hand
    data = _read_raw()
    data.update(to_toml(cfg))
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(data).encode("utf-8"))
    os.chmod(path, 0o600)
    return path


def resolve_session(cfg: AppConfig, profile: str | None, session: str | None) -> str:
    explicit = (session or "").strip()
    if explicit:
        return explicit
    return apply_profile(cfg, profile).session
