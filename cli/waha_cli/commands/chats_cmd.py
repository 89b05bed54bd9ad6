from __future__ import annotations

from datetime import datetime, timezone

import typer
from rich.table import Table
from waha_client import WahaError

from .. import console
from ..config import load_config, resolve_session
from ..http import fail, make_client, run_api

app = typer.Typer(help="Browse and manage chats.")


def _format_ts(value) -> str:
    if not isinstance(value, (int, float)) or value <= 0:
        return "-"
    return datetime.fromtimestamp(value, tz=timezone.utc).strftime("%Y-%m-%d %H:%M")


@app.command("list")
def list_chats(
        limit: int | None = typer.Option(None, "--limit", help="Max chats to return."),
        offset: int | None = typer.Option(None, "--offset", help="Offset for listing."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.chats.list(name, limit=limit, offset=offset))
    except WahaError as e:
        fail(e, "list chats")

    if json_out:
        console.print_json(data)
        return

    table = Table(title=f"Chats ({name})")
    table.add_column("id", style="bold")
    table.add_column("name")
    table.add_column("unread")
    for chat in data or []:
        chat_id = chat.get("id")
        if isinstance(chat_id, dict):
            chat_id = chat_id.get("_serialized")
        table.add_row(str(chat_id or "-"), str(chat.get("name") or "-"), str(chat.get("unreadCount", "-")))
    console.console.print(table)


@app.command("messages")
def list_messages(
        chat_id: str = typer.Argument(..., help="Chat ID."),
        limit: int = typer.Option(20, "--limit", help="Max messages to return."),
        download_media: bool = typer.Option(False, "--download-media", help="Include media in the response."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(
            client,
            lambda c: c.chats.get_messages(name, chat_id, limit=limit, download_media=download_media),
        )
    except WahaError as e:
        fail(e, "fetch messages")

    if json_out:
        console.print_json(data)
        return

    table = Table(title=f"Messages in {chat_id}")
    table.add_column("time")
    table.add_column("from")
    table.add_column("body")
    for msg in data or []:
        sender = "me" if msg.get("fromMe") else str(msg.get("from") or "-")
        table.add_row(_format_ts(msg.get("timestamp")), sender, str(msg.get("body") or ""))
    console.console.print(table)


def _chat_action(action: str, chat_id: str, session: str | None, profile: str | None, base_url: str | None) -> None:
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        run_api(client, lambda c: getattr(c.chats, action)(name, chat_id))
    except WahaError as e:
        fail(e, f"{action} chat {chat_id}")
    console.ok(f"{action}: {chat_id}")


@app.command("archive")
def archive_chat(
        chat_id: str = typer.Argument(..., help="Chat ID."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    _chat_action("archive", chat_id, session, profile, base_url)


@app.command("unarchive")
def unarchive_chat(
        chat_id: str = typer.Argument(..., help="Chat ID."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    _chat_action("unarchive", chat_id, session, profile, base_url)


@app.command("read")
def read_chat(
        chat_id: str = typer.Argument(..., help="Chat ID."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    _chat_action("read_messages", chat_id, session, profile, base_url)


@app.command("delete")
def delete_chat(
        chat_id: str = typer.Argument(..., help="Chat ID."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    if not yes and not typer.confirm(f"Delete chat {chat_id}?"):
        raise typer.Exit(code=1)
    _chat_action("delete", chat_id, session, profile, base_url)
