"""Flask CLI commands for managing the JSON document."""

from __future__ import annotations

import logging

import click
from flask import current_app
from flask.cli import with_appcontext

from chirpy.core.extensions import get_store
from chirpy.repositories import StoreError

LOGGER = logging.getLogger(__name__)


def _ensure_non_production() -> None:
    """Abort destructive commands when running in production."""
    config = current_app.config
    app_env = str(config.get("APP_ENV", "")).lower()
    is_debug = bool(config.get("DEBUG"))
    is_testing = bool(config.get("TESTING"))
    if app_env == "production" or not (is_debug or is_testing):
        raise click.UsageError(
            "The 'flask db reset' command is restricted to non-production environments."
        )


@click.group("db")
def db_cli() -> None:
    """Document store maintenance commands."""


@db_cli.command("reset")
@click.option("--yes", is_flag=True, help="Skip the destructive confirmation prompt.")
@with_appcontext
def reset_command(yes: bool) -> None:
    """Wipe every account and chirp from the document."""
    _ensure_non_production()
    store = get_store()
    if not yes:
        click.confirm(f"This will erase all data in {store.path}. Continue?", abort=True)
    LOGGER.info("Resetting document store...")
    try:
        store.reset()
    except StoreError as exc:
        raise click.ClickException(f"Reset failed: {exc}") from exc
    click.echo(f"Document store reset: {store.path}")
