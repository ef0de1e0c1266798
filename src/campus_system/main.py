from __future__ import annotations

import importlib
import logging
from typing import Mapping, Optional

import click
from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .auth.tokens import JWTAuthenticator
from .common.serialization import CampusJSONProvider
from .container import Container, build_container
from .core.constants import API_PREFIX, DEFAULT_TOKEN_TTL_MINUTES
from .database.bootstrap import apply_schema, list_tables
from .resources.controller import register_resource
from .resources.repository import RecordRepository
from .settings import get_settings_module

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        return jsonify({"message": e.description}), e.code


def _register_cli(app: Flask, container: Container) -> None:
    @app.cli.command("init-db")
    def init_db():
        """Apply schema.sql to the configured database."""
        apply_schema(container.conn)
        tables = list_tables(container.conn)
        click.echo(f"OK: schema applied -> {container.conn.config.describe()} (tables={len(tables)})")

    @app.cli.command("issue-token")
    @click.argument("subject")
    @click.option("--role", default=None, help="Optional role claim.")
    def issue_token(subject: str, role: Optional[str]):
        """Print a bearer token for SUBJECT."""
        if not isinstance(container.authenticator, JWTAuthenticator):
            raise click.ClickException("The configured authenticator does not issue tokens")
        click.echo(container.authenticator.issue(subject, role=role))


def create_app(
    settings_module: Optional[str] = None,
    *,
    repositories: Optional[Mapping[str, RecordRepository]] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)
    app.json = CampusJSONProvider(app)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    log_level = str(getattr(settings, "LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logging.getLogger("campus_system").setLevel(log_level)

    container = build_container(
        db_config=db_config,
        secret_key=app.secret_key,
        token_ttl_minutes=int(getattr(settings, "TOKEN_TTL_MINUTES", DEFAULT_TOKEN_TTL_MINUTES)),
        repositories=repositories,
    )
    app.extensions["campus_container"] = container

    logger.debug("settings=%s db=%s", settings_module, container.conn.config.describe())

    if bool(getattr(settings, "AUTO_INIT_DB", False)) and not repositories:
        apply_schema(container.conn)

    @app.route(f"{API_PREFIX}/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"}), 200

    for service in container.services.values():
        register_resource(app, service, container.authenticator)

    _register_error_handlers(app)
    _register_cli(app, container)

    return app
