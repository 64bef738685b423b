"""Notification sinks for user-facing auth messages."""

from __future__ import annotations

import enum
from typing import Optional, Protocol

import click
from flask import flash, get_flashed_messages


class Severity(str, enum.Enum):
    NORMAL = "normal"
    DESTRUCTIVE = "destructive"


class Notifier(Protocol):
    def notify(self, title: str, description: Optional[str] = None, severity: Severity = Severity.NORMAL) -> None:
        ...


class FlashNotifier:
    """Queue notifications as Flask flashed messages (category = severity)."""

    def notify(self, title: str, description: Optional[str] = None, severity: Severity = Severity.NORMAL) -> None:
        flash({"title": title, "description": description}, severity.value)


def pop_notifications() -> list[dict]:
    """Drain flashed notifications into JSON-ready dicts."""
    return [
        {**message, "severity": category}
        for category, message in get_flashed_messages(with_categories=True)
        if isinstance(message, dict)
    ]


class ClickNotifier:
    """Print notifications on the terminal; destructive ones go to stderr."""

    def notify(self, title: str, description: Optional[str] = None, severity: Severity = Severity.NORMAL) -> None:
        destructive = severity == Severity.DESTRUCTIVE
        text = f"{title}: {description}" if description else title
        click.secho(text, fg="red" if destructive else "green", err=destructive)


__all__ = ["Severity", "Notifier", "FlashNotifier", "ClickNotifier", "pop_notifications"]
