from __future__ import annotations

import typer
from waha_client import WahaError

from .. import console
from ..config import load_config, resolve_session
from ..http import fail, make_client, run_api

app = typer.Typer(help="Post status updates.")


@app.command("text")
def post_text(
        text: str = typer.Argument(..., help="Status text."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        run_api(client, lambda c: c.status.send_text(name, text))
    except WahaError as e:
        fail(e, "post status")
    console.ok("Status posted.")
