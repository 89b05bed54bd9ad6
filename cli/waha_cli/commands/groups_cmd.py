from __future__ import annotations

import typer
from rich.table import Table
from waha_client import WahaError

from .. import console
from ..config import load_config, resolve_session
from ..http import fail, make_client, run_api

app = typer.Typer(help="Manage groups.")


@app.command("list")
def list_groups(
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.groups.list(name))
    except WahaError as e:
        fail(e, "list groups")

    if json_out:
        console.print_json(data)
        return

    # engines return either a list or a mapping keyed by group id
    groups = list(data.values()) if isinstance(data, dict) else (data or [])
    table = Table(title=f"Groups ({name})")
    table.add_column("id", style="bold")
    table.add_column("subject")
    table.add_column("members")
    for group in groups:
        group_id = group.get("id")
        if isinstance(group_id, dict):
            group_id = group_id.get("_serialized")
        subject = group.get("subject") or group.get("name") or "-"
        participants = group.get("participants")
        members = str(len(participants)) if isinstance(participants, list) else "-"
        table.add_row(str(group_id or "-"), str(subject), members)
    console.console.print(table)


@app.command("show")
def show_group(
        group_id: str = typer.Argument(..., help="Group ID, e.g. 123456789@g.us."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.groups.get(name, group_id))
    except WahaError as e:
        fail(e, "fetch group")
    console.print_json(data)


@app.command("create")
def create_group(
        subject: str = typer.Argument(..., help="Group subject."),
        participant: list[str] | None = typer.Option(None, "--participant", "-p", help="Member ID; repeatable."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    members = [{"id": p} for p in participant] if participant else None
    try:
        data = run_api(client, lambda c: c.groups.create(name, subject, participants=members))
    except WahaError as e:
        fail(e, "create group")
    console.ok(f"Group created: {subject}")
    if data:
        console.print_json(data)


@app.command("leave")
def leave_group(
        group_id: str = typer.Argument(..., help="Group ID."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        run_api(client, lambda c: c.groups.leave(name, group_id))
    except WahaError as e:
        fail(e, "leave group")
    console.ok(f"Left {group_id}")


@app.command("participants")
def list_participants(
        group_id: str = typer.Argument(..., help="Group ID."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: c.groups.get_participants(name, group_id))
    except WahaError as e:
        fail(e, "list participants")

    if json_out:
        console.print_json(data)
        return

    table = Table(title=f"Participants of {group_id}")
    table.add_column("id", style="bold")
    table.add_column("role")
    for p in data or []:
        pid = p.get("id")
        if isinstance(pid, dict):
            pid = pid.get("_serialized")
        role = p.get("role") or ("admin" if p.get("isAdmin") else "participant")
        table.add_row(str(pid or "-"), str(role))
    console.console.print(table)


def _members(action: str, group_id: str, ids: list[str], session, profile, base_url) -> None:
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    members = [{"id": i} for i in ids]
    try:
        run_api(client, lambda c: getattr(c.groups, action)(name, group_id, members))
    except WahaError as e:
        fail(e, "update participants")
    console.ok(f"Updated {len(members)} participant(s) in {group_id}")


@app.command("add")
def add_participants(
        group_id: str = typer.Argument(..., help="Group ID."),
        ids: list[str] = typer.Argument(..., help="Member IDs."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    _members("add_participants", group_id, ids, session, profile, base_url)


@app.command("remove")
def remove_participants(
        group_id: str = typer.Argument(..., help="Group ID."),
        ids: list[str] = typer.Argument(..., help="Member IDs."),
        session: str | None = typer.Option(None, "--session", "-s", help="Session name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    _members("remove_participants", group_id, ids, session, profile, base_url)
