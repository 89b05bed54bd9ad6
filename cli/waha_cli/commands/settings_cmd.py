from __future__ import annotations

import typer

from .. import console
from ..config import config_path, load_config, normalize_base_url, save_config

app = typer.Typer(help="Manage local CLI settings (config.toml).")

KEYS = ("base_url", "api_key", "timeout_s", "session")


@app.command("show")
def show_settings():
    cfg = load_config()
    key_state = "(set)" if cfg.api_key.strip() else "(empty)"
    console.console.print(
        f"base_url={cfg.base_url} api_key={key_state} timeout_s={cfg.timeout_s} session={cfg.session}"
    )


@app.command("path")
def show_path():
    console.console.print(config_path())


@app.command("set")
def set_setting(
        key: str = typer.Argument(..., help=f"Setting key ({', '.join(KEYS)})."),
        value: str = typer.Argument(..., help="New value."),
):
    cfg = load_config(env=False)
    k = key.strip().lower()
    if k == "base_url":
        cfg.base_url = normalize_base_url(value)
        if not cfg.base_url:
            console.err("Base URL cannot be empty.")
            raise typer.Exit(code=2)
    elif k == "api_key":
        cfg.api_key = value.strip()
    elif k == "timeout_s":
        try:
            timeout = float(value)
        except ValueError:
            timeout = 0.0
        if timeout <= 0:
            console.err("timeout_s must be a positive number.")
            raise typer.Exit(code=2)
        cfg.timeout_s = timeout
    elif k == "session":
        if not value.strip():
            console.err("Session name cannot be empty.")
            raise typer.Exit(code=2)
        cfg.session = value.strip()
    else:
        console.err(f"Unknown setting: {key}")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
