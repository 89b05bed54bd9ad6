from __future__ import annotations

import typer

from .commands import (
    channels_cmd,
    chats_cmd,
    contacts_cmd,
    groups_cmd,
    send_cmd,
    sessions_cmd,
    settings_cmd,
    status_cmd,
)
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="waha",
        help="Command line client for a WAHA (WhatsApp HTTP API) gateway.",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.add_typer(sessions_cmd.app, name="sessions")
    app.add_typer(send_cmd.app, name="send")
    app.add_typer(chats_cmd.app, name="chats")
    app.add_typer(contacts_cmd.app, name="contacts")
    app.add_typer(groups_cmd.app, name="groups")
    app.add_typer(channels_cmd.app, name="channels")
    app.add_typer(status_cmd.app, name="status")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
