from __future__ import annotations

import tomllib

from typer.testing import CliRunner

from waha_cli import config, main

runner = CliRunner()


def _use_tmp_config(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    for name in (config.ENV_BASE_URL, config.ENV_API_KEY, config.ENV_SESSION):
        monkeypatch.delenv(name, raising=False)


def test_top_level_groups_available() -> None:
    result = runner.invoke(main.app, ["--help"])

    assert result.exit_code == 0
    for group in ("settings", "sessions", "send", "chats", "groups"):
        assert group in result.output


def test_settings_set_writes_config(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)

    result = runner.invoke(main.app, ["settings", "set", "base_url", "waha.example.com/"])
    assert result.exit_code == 0, result.output
    result = runner.invoke(main.app, ["settings", "set", "api_key", "secret"])
    assert result.exit_code == 0, result.output

    with open(tmp_path / "config.toml", "rb") as f:
        data = tomllib.load(f)
    assert data["base_url"] == "https://waha.example.com"
    assert data["api_key"] == "secret"


def test_settings_set_rejects_bad_timeout(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)

    result = runner.invoke(main.app, ["settings", "set", "timeout_s", "0"])

    assert result.exit_code == 2
    assert not (tmp_path / "config.toml").exists()


def test_settings_set_unknown_key(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)

    result = runner.invoke(main.app, ["settings", "set", "color", "red"])

    assert result.exit_code == 2
    assert "Unknown setting" in result.output


def test_settings_show_hides_api_key(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    (tmp_path / "config.toml").write_text('api_key = "secret"\n', encoding="utf-8")

    result = runner.invoke(main.app, ["settings", "show"])

    assert result.exit_code == 0
    assert "secret" not in result.output
    assert "(set)" in result.output
