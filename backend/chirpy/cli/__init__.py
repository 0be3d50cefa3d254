"""Flask CLI commands for operating a Chirpy deployment."""

from __future__ import annotations

from flask import Flask

from .db import db_cli


def init_app(app: Flask) -> None:
    """Attach ``flask db ...`` (document maintenance) to ``app.cli``."""
    app.cli.add_command(db_cli)
