"""Seed an admin user for the dashboard.

Usage:
    flask seed-admin --username admin --password secret123
"""

from __future__ import annotations

import click
from flask import current_app
from flask.cli import with_appcontext

from bizdash.core.auth.password import hash_password
from bizdash.core.users.models import User
from bizdash.extensions import db


def seed_admin_user(
    username: str,
    password: str,
    full_name: str | None = None,
    email: str | None = None,
) -> tuple[User, bool]:
    """Create the admin, or reset its password if the username already exists."""
    scheme = current_app.config.get("AUTH_PASSWORD_SCHEME", "bcrypt")
    user = User.query.filter_by(username=username).first()
    created = user is None
    if created:
        user = User(username=username, full_name=full_name or "Admin", email=email)
        db.session.add(user)
    else:
        if full_name:
            user.full_name = full_name
        if email:
            user.email = email
    user.password = hash_password(password, scheme=scheme)
    db.session.commit()
    return user, created


@click.command("seed-admin")
@click.option("--username", required=True, help="Admin username")
@click.option("--password", required=True, help="Admin password")
@click.option("--full-name", default="Admin", help="Admin display name")
@click.option("--email", default=None, help="Admin email")
@with_appcontext
def seed_admin_command(username: str, password: str, full_name: str, email: str | None) -> None:
    username = username.strip()
    if not username or not password:
        click.echo("--username and --password must not be empty", err=True)
        raise click.Abort()
    user, created = seed_admin_user(username, password, full_name, email)
    verb = "Created" if created else "Updated"
    click.echo(f"{verb} admin user {user.username} ({user.id})")
