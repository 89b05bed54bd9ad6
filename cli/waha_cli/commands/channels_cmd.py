from __future__ import annotations

import typer
from rich.table import Table
from waha_client import WahaError

from .. import console
from ..config import load_config, resolve_session
from ..http import fail, make_client, run_api

app = typer.Typer(help="WhatsApp channels.")


@app.command("list")
def list_channels(
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.channels.list(name))
    except WahaError as e:
        fail(e, "list channels")

    if json_out:
        console.print_json(data)
        return

    table = Table(title=f"Channels ({name})")
    table.add_column("id", style="bold")
    table.add_column("name")
    table.add_column("role")
    for ch in data or []:
        table.add_row(str(ch.get("id") or "-"), str(ch.get("name") or "-"), str(ch.get("role") or "-"))
    console.console.print(table)


@app.command("show")
def show_channel(
        channel_id: str = typer.Argument(..., help="Channel ID, e.g. 123@newsletter."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.channels.get(name, channel_id))
    except WahaError as e:
        fail(e, "fetch channel")
    console.print_json(data)
