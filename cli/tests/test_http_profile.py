from __future__ import annotations

from waha_cli import config
from waha_cli.http import make_client


def test_make_client_uses_profile_config(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    tmp_path.joinpath("config.toml").write_text(
        '\n'.join(
            [
                'base_url = "http://default.test"',
                'api_key = "default-key"',
                "",
                "[profiles.prod]",
                'base_url = "http://prod.test"',
                'api_key = "prod-key"',
                "timeout_s = 5",
                "",
            ]
        ),
        encoding="utf-8",
    )

    cfg = config.load_config(env=False)
    client = make_client(cfg, profile="prod", base_url_override=None)

    assert client.config.base_url == "http://prod.test"
    assert client.config.api_key == "prod-key"
    assert client.config.timeout_s == 5.0


def test_make_client_normalizes_base_url_override() -> None:
    client = make_client(config.default_config(), profile=None, base_url_override="example.com/")

    assert client.base_url == "https://example.com"
    assert client.config.api_key is None
