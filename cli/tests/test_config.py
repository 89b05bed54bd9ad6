from __future__ import annotations

import tomllib

from waha_cli import config


def _use_tmp_config(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    for name in (config.ENV_BASE_URL, config.ENV_API_KEY, config.ENV_SESSION):
        monkeypatch.delenv(name, raising=False)


def test_load_config_defaults_without_file(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)

    cfg = config.load_config()

    assert cfg.base_url == "http://localhost:3000"
    assert cfg.api_key == ""
    assert cfg.timeout_s == 30.0
    assert cfg.session == "default"


def test_save_and_load_roundtrip_keeps_profiles(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    tmp_path.joinpath("config.toml").write_text(
        '\n'.join(
            [
                'base_url = "http://old.test"',
                "",
                "[profiles.prod]",
                'base_url = "https://prod.test"',
                'api_key = "prod-key"',
                "",
            ]
        ),
        encoding="utf-8",
    )

    cfg = config.load_config()
    cfg.api_key = "secret"
    cfg.session = "work"
    path = config.save_config(cfg)

    with open(path, "rb") as f:
        data = tomllib.load(f)
    assert data["api_key"] == "secret"
    assert data["session"] == "work"
    assert data["profiles"]["prod"]["api_key"] == "prod-key"


def test_apply_profile_overrides(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    tmp_path.joinpath("config.toml").write_text(
        '\n'.join(
            [
                'base_url = "http://localhost:3000"',
                'api_key = "default-key"',
                "",
                "[profiles.prod]",
                'base_url = "prod.test/"',
                'session = "business"',
                "",
            ]
        ),
        encoding="utf-8",
    )

    cfg = config.apply_profile(config.load_config(), "prod")

    assert cfg.base_url == "https://prod.test"
    assert cfg.api_key == "default-key"
    assert cfg.session == "business"


def test_env_overrides_file(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    tmp_path.joinpath("config.toml").write_text('api_key = "file-key"\n', encoding="utf-8")
    monkeypatch.setenv(config.ENV_API_KEY, "env-key")
    monkeypatch.setenv(config.ENV_BASE_URL, "http://127.0.0.1:3001/")

    cfg = config.load_config()

    assert cfg.api_key == "env-key"
    assert cfg.base_url == "http://127.0.0.1:3001"
    assert config.load_config(env=False).api_key == "file-key"


def test_invalid_timeout_falls_back(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    tmp_path.joinpath("config.toml").write_text('timeout_s = -5\n', encoding="utf-8")

    assert config.load_config().timeout_s == 30.0


def test_resolve_session_prefers_explicit_name() -> None:
    cfg = config.AppConfig(session="configured")
    assert config.resolve_session(cfg, None, "explicit") == "explicit"
    assert config.resolve_session(cfg, None, None) == "configured"


def test_normalize_base_url_defaults_to_https() -> None:
    assert config.normalize_base_url("waha.example.com") == "https://waha.example.com"


def test_normalize_base_url_defaults_to_http_for_localhost() -> None:
    assert config.normalize_base_url("localhost:3000") == "http://localhost:3000"


def test_normalize_base_url_strips_trailing_slash() -> None:
    assert config.normalize_base_url("https://waha.example.com/") == "https://waha.example.com"
