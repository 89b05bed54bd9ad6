from __future__ import annotations

from pathlib import Path
from typing import Any, Awaitable, Callable

import typer
from waha_client import WahaClient, WahaError

from .. import console
from ..config import load_config, resolve_session
from ..http import fail, make_client, run_api

app = typer.Typer(help="Send messages from a session.")

SESSION_HELP = "Session name (defaults to configured session)."


def _send(
        what: str,
        session: str | None,
        profile: str | None,
        base_url: str | None,
        action: Callable[[WahaClient, str], Awaitable[Any]],
) -> None:
    cfg = load_config()
    name = resolve_session(cfg, profile, session)
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    try:
        data = run_api(client, lambda c: action(c, name))
    except OSError as e:
        console.err(f"Cannot read file: {e}")
        raise typer.Exit(code=2)
    except WahaError as e:
        fail(e, f"send {what}")
    message_id = None
    if isinstance(data, dict):
        msg_id = data.get("id")
        message_id = msg_id.get("_serialized") if isinstance(msg_id, dict) else msg_id
    console.ok(f"Sent {what}" + (f": {message_id}" if message_id else ""))


def _existing_file(path: Path) -> Path:
    if not path.is_file():
        console.err(f"File not found: {path}")
        raise typer.Exit(code=2)
    return path


@app.command("text")
def send_text(
        chat_id: str = typer.Argument(..., help="Chat ID, e.g. 1234567890@c.us."),
        text: str = typer.Argument(..., help="Message text."),
        reply_to: str | None = typer.Option(None, "--reply-to", help="Message ID to reply to."),
        mention: list[str] | None = typer.Option(None, "--mention", help="Chat ID to mention; repeatable."),
        no_preview: bool = typer.Option(False, "--no-preview", help="Disable link preview."),
        session: str | None = typer.Option(None, "--session", "-s", help=SESSION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    _send(
        "text",
        session,
        profile,
        base_url,
        lambda c, s: c.messages.send_text(
            s,
            chat_id,
            text,
            reply_to=reply_to,
            mentions=mention or None,
            link_preview=not no_preview,
        ),
    )


@app.command("image")
def send_image(
        chat_id: str = typer.Argument(..., help="Chat ID."),
        file: Path = typer.Argument(..., help="Image file."),
        caption: str | None = typer.Option(None, "--caption", help="Caption."),
        session: str | None = typer.Option(None, "--session", "-s", help=SESSION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    path = _existing_file(file)
    _send("image", session, profile, base_url, lambda c, s: c.messages.send_image(s, chat_id, path, caption=caption))


@app.command("file")
def send_file(
        chat_id: str = typer.Argument(..., help="Chat ID."),
        file: Path = typer.Argument(..., help="File to send as a document."),
        caption: str | None = typer.Option(None, "--caption", help="Caption."),
        session: str | None = typer.Option(None, "--session", "-s", help=SESSION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    path = _existing_file(file)
    _send("file", session, profile, base_url, lambda c, s: c.messages.send_file(s, chat_id, path, caption=caption))


@app.command("voice")
def send_voice(
        chat_id: str = typer.Argument(..., help="Chat ID."),
        file: Path = typer.Argument(..., help="Audio file (OGG/Opus unless --convert)."),
        convert: bool = typer.Option(False, "--convert", help="Ask the gateway to convert the audio."),
        session: str | None = typer.Option(None, "--session", "-s", help=SESSION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    path = _existing_file(file)
    _send("voice", session, profile, base_url, lambda c, s: c.messages.send_voice(s, chat_id, path, convert=convert))


@app.command("video")
def send_video(
        chat_id: str = typer.Argument(..., help="Chat ID."),
        file: Path = typer.Argument(..., help="Video file."),
        caption: str | None = typer.Option(None, "--caption", help="Caption."),
        as_note: bool = typer.Option(False, "--as-note", help="Send as a round video note."),
        convert: bool = typer.Option(False, "--convert", help="Ask the gateway to convert the video."),
        session: str | None = typer.Option(None, "--session", "-s", help=SESSION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    path = _existing_file(file)
    _send(
        "video",
        session,
        profile,
        base_url,
        lambda c, s: c.messages.send_video(s, chat_id, path, caption=caption, as_note=as_note, convert=convert),
    )


@app.command("location")
def send_location(
        chat_id: str = typer.Argument(..., help="Chat ID."),
        latitude: float = typer.Argument(..., help="Latitude."),
        longitude: float = typer.Argument(..., help="Longitude."),
        title: str | None = typer.Option(None, "--title", help="Location title."),
        session: str | None = typer.Option(None, "--session", "-s", help=SESSION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    _send(
        "location",
        session,
        profile,
        base_url,
        lambda c, s: c.messages.send_location(s, chat_id, latitude, longitude, title=title),
    )


@app.command("seen")
def send_seen(
        chat_id: str = typer.Argument(..., help="Chat ID."),
        message_id: list[str] | None = typer.Option(None, "--message-id", help="Message ID; repeatable."),
        session: str | None = typer.Option(None, "--session", "-s", help=SESSION_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    _send(
        "seen",
        session,
        profile,
        base_url,
        lambda c, s: c.messages.send_seen(s, chat_id, message_ids=message_id or None),
    )
