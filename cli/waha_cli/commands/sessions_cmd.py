from __future__ import annotations

import base64
from pathlib import Path

import typer
from rich.table import Table
from waha_client import NotFoundError, WahaError

from .. import console
from ..config import load_config, resolve_session
from ..http import fail, make_client, run_api

app = typer.Typer(help="Manage gateway sessions (WhatsApp accounts).")


def _write_image(data, out: Path) -> None:
    if isinstance(data, dict) and data.get("data"):
        out.write_bytes(base64.b64decode(data["data"]))
    elif isinstance(data, (bytes, bytearray)):
        out.write_bytes(bytes(data))
    else:
        console.err("Gateway returned no image data.")
        raise typer.Exit(code=2)
    console.ok(f"Saved {out}")


@app.command("list")
def list_sessions(
        all_sessions: bool = typer.Option(False, "--all", help="Include stopped sessions."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.sessions.list(all_sessions=all_sessions))
    except WahaError as e:
        fail(e, "list sessions")

    if json_out:
        console.print_json(data)
        return

    table = Table(title="Sessions")
    table.add_column("name", style="bold")
    table.add_column("status")
    table.add_column("account")
    for s in data or []:
        me = s.get("me") or {}
        account = str(me.get("pushName") or me.get("id") or "-")
        table.add_row(str(s.get("name") or "-"), str(s.get("status") or "-"), account)
    console.console.print(table)


@app.command("show")
def show_session(
        session: str | None = typer.Argument(None, help="Session name (defaults to configured session)."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.sessions.get(name))
    except NotFoundError:
        console.err(f"Session '{name}' not found.")
        raise typer.Exit(code=2)
    except WahaError as e:
        fail(e, "fetch session")
    console.print_json(data)


@app.command("create")
def create_session(
        name: str | None = typer.Argument(None, help="Session name (gateway generates one if omitted)."),
        no_start: bool = typer.Option(False, "--no-start", help="Create without starting."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.sessions.create(name=name, start=not no_start))
    except WahaError as e:
        fail(e, "create session")
    created = data.get("name") if isinstance(data, dict) else None
    console.ok(f"Session created: {created or name or '-'}")


def _lifecycle(action: str, session: str | None, profile: str | None, base_url: str | None) -> None:
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: getattr(c.sessions, action)(name))
    except WahaError as e:
        fail(e, f"{action} session '{name}'")
    status = data.get("status") if isinstance(data, dict) else None
    console.ok(f"{action}: {name}" + (f" ({status})" if status else ""))


@app.command("start")
def start_session(
        session: str | None = typer.Argument(None, help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    _lifecycle("start", session, profile, base_url)


@app.command("stop")
def stop_session(
        session: str | None = typer.Argument(None, help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    _lifecycle("stop", session, profile, base_url)


@app.command("restart")
def restart_session(
        session: str | None = typer.Argument(None, help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    _lifecycle("restart", session, profile, base_url)


@app.command("logout")
def logout_session(
        session: str | None = typer.Argument(None, help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    _lifecycle("logout", session, profile, base_url)


@app.command("delete")
def delete_session(
        session: str = typer.Argument(..., help="Session name."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    if not yes and not typer.confirm(f"Delete session '{session}'?"):
        raise typer.Exit(code=1)
    _lifecycle("delete", session, profile, base_url)


@app.command("me")
def session_me(
        session: str | None = typer.Argument(None, help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.sessions.get_me(name))
    except WahaError as e:
        fail(e, "fetch account")
    if not data:
        console.warn(f"Session '{name}' is not authenticated yet.")
        return
    console.print_json(data)


@app.command("qr")
def session_qr(
        session: str | None = typer.Argument(None, help="Session name."),
        out: Path | None = typer.Option(None, "--out", "-o", help="Write the QR image to this PNG file."),
        raw: bool = typer.Option(False, "--raw", help="Print the raw QR value instead of an image."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    if not raw and out is None:
        console.err("Pass --out FILE to save the image or --raw to print the value.")
        raise typer.Exit(code=2)
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.sessions.get_qr(name, format="raw" if raw else "image"))
    except WahaError as e:
        fail(e, "fetch QR code")

    if raw:
        value = data.get("value") if isinstance(data, dict) else data
        console.console.print(str(value))
        return
    _write_image(data, out)


@app.command("request-code")
def request_code(
        phone: str = typer.Argument(..., help="Phone number in international format, digits only."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.sessions.request_code(name, phone))
    except WahaError as e:
        fail(e, "request pairing code")
    code = data.get("code") if isinstance(data, dict) else None
    if code:
        console.ok(f"Pairing code: {code}")
    else:
        console.print_json(data)


@app.command("screenshot")
def screenshot(
        out: Path = typer.Option(..., "--out", "-o", help="PNG file to write."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.sessions.get_screenshot(name))
    except WahaError as e:
        fail(e, "take screenshot")
    _write_image(data, out)
