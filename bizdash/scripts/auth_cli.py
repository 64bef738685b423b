"""Terminal login for operators.

Usage:
    flask auth login admin        # prompts for the password
    flask auth whoami
    flask auth logout

The session is kept in CLI_SESSION_FILE under the instance folder, so it
survives between invocations the same way the browser cookie does.
"""

from __future__ import annotations

import sys

import click
from flask.cli import with_appcontext

from bizdash.core.auth.session_services import build_cli_session_manager


_META_KEY = "bizdash.session_manager"


def _restored_manager():
    """One manager per process, restored on first use and kept in click's context meta."""
    meta = click.get_current_context().meta
    manager = meta.get(_META_KEY)
    if manager is None:
        manager = build_cli_session_manager()
        manager.restore()
        meta[_META_KEY] = manager
    return manager


@click.group("auth")
def auth_cli():
    """Log in, log out and inspect the stored operator session."""


@auth_cli.command("login")
@click.argument("username", required=False)
@click.option("--password", default=None, help="Password (prompted when omitted)")
@with_appcontext
def login_command(username: str | None, password: str | None) -> None:
    if not username:
        username = click.prompt("Username")
    if password is None:
        password = click.prompt("Password", hide_input=True)
    if not username.strip() or not password:
        click.echo("Username and password are required", err=True)
        sys.exit(2)
    manager = _restored_manager()
    if not manager.login(username, password):
        sys.exit(1)


@auth_cli.command("logout")
@with_appcontext
def logout_command() -> None:
    _restored_manager().logout()


@auth_cli.command("whoami")
@with_appcontext
def whoami_command() -> None:
    manager = _restored_manager()
    session = manager.current_session
    if session is None:
        click.echo("Not logged in", err=True)
        sys.exit(1)
    name = f" ({session.full_name})" if session.full_name else ""
    click.echo(f"{session.username}{name} [{session.role or 'admin'}]")


def register_commands(app):
    """Register CLI commands with the app."""
    from bizdash.scripts.seed_admin import seed_admin_command

    app.cli.add_command(seed_admin_command)
    app.cli.add_command(auth_cli)
