from __future__ import annotations

import typer
from rich.table import Table
from waha_client import WahaError

from .. import console
from ..config import load_config, resolve_session
from ..http import fail, make_client, run_api

app = typer.Typer(help="Look up and manage contacts.")


@app.command("list")
def list_contacts(
        limit: int | None = typer.Option(None, "--limit", help="Max contacts to return."),
        offset: int | None = typer.Option(None, "--offset", help="Offset for listing."),
        sort_by: str | None = typer.Option(None, "--sort-by", help="Sort field (id, name)."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.contacts.list_all(name, limit=limit, offset=offset, sort_by=sort_by))
    except WahaError as e:
        fail(e, "list contacts")

    if json_out:
        console.print_json(data)
        return

    table = Table(title=f"Contacts ({name})")
    table.add_column("id", style="bold")
    table.add_column("name")
    table.add_column("push name")
    for contact in data or []:
        table.add_row(
            str(contact.get("id") or "-"),
            str(contact.get("name") or "-"),
            str(contact.get("pushname") or "-"),
        )
    console.console.print(table)


@app.command("show")
def show_contact(
        contact_id: str = typer.Argument(..., help="Contact ID, e.g. 1234567890@c.us."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.contacts.get(name, contact_id))
    except WahaError as e:
        fail(e, "fetch contact")
    console.print_json(data)


@app.command("check")
def check_exists(
        phone: str = typer.Argument(..., help="Phone number, digits only."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.contacts.check_exists(name, phone))
    except WahaError as e:
        fail(e, "check number")

    if isinstance(data, dict) and data.get("numberExists"):
        console.ok(f"{phone} is on WhatsApp: {data.get('chatId') or '-'}")
    else:
        console.warn(f"{phone} is not on WhatsApp.")
        raise typer.Exit(code=1)


@app.command("about")
def contact_about(
        contact_id: str = typer.Argument(..., help="Contact ID."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.contacts.get_about(name, contact_id))
    except WahaError as e:
        fail(e, "fetch about")
    about = data.get("about") if isinstance(data, dict) else None
    console.console.print(about or "-")


def _block(action: str, chat_id: str, session: str | None, profile: str | None, base_url: str | None) -> None:
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        run_api(client, lambda c: getattr(c.contacts, action)(name, chat_id))
    except WahaError as e:
        fail(e, f"{action} {chat_id}")
    console.ok(f"{action}: {chat_id}")


@app.command("block")
def block_contact(
        chat_id: str = typer.Argument(..., help="Chat ID."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    _block("block", chat_id, session, profile, base_url)


@app.command("unblock")
def unblock_contact(
        chat_id: str = typer.Argument(..., help="Chat ID."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    _block("unblock", chat_id, session, profile, base_url)
