# rentalhub/__init__.py
from __future__ import annotations

import logging
import os
from typing import Any, Optional

from flask import Flask
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from .extensions import db, jwt, migrate


# --- Config ------------------------------------------------------------------
def _get_allowed_origins() -> list[str]:
    """Allowed CORS origins from env plus local dev servers."""
    default = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    # Support comma-separated list in env
    extra = os.getenv("CORS_ALLOWED_ORIGINS", "")
    extra_list = [o.strip() for o in extra.split(",") if o.strip()]
    return sorted(set(default + extra_list))


def _configure_logging(app: Flask) -> None:
    """JSON logs to stdout."""
    level = app.config.get("LOG_LEVEL", "INFO").upper()
    app.logger.setLevel(level)
    root = logging.getLogger()
    root.setLevel(level)

    # avoid duplicate handlers in reloaders
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='{"ts":"%(asctime)s","level":"%(levelname)s","msg":"%(message)s","name":"%(name)s"}',
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)


def _configure_cors(app: Flask) -> None:
    CORS(
        app,
        resources={r"/api/*": {"origins": _get_allowed_origins()}},
        supports_credentials=True,
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
        expose_headers=["Content-Type"],
        max_age=86400,
    )


def _configure_proxy(app: Flask) -> None:
    """Respect X-Forwarded-* from the reverse proxy."""
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1)  # type: ignore


def _init_extensions(app: Flask, folder_store=None) -> None:
    from .services.photos import STORE_EXTENSION_KEY, build_folder_store

    db.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)
    app.extensions[STORE_EXTENSION_KEY] = folder_store or build_folder_store(app.config)
    app.logger.debug("Folder mapping store: %r", app.extensions[STORE_EXTENSION_KEY])


def _register_blueprints(app: Flask) -> None:
    """Register all API blueprints under /api."""
    from .routes import BLUEPRINTS

    for bp in BLUEPRINTS:
        app.register_blueprint(bp, url_prefix=app.config["API_PREFIX"])


# --- Application Factory ------------------------------------------------------
def create_app(config_object: Optional[str | Any] = None, folder_store=None) -> Flask:
    """
    Standard Flask application factory.

    `config_object` may be a config class, a dotted path to one
    (e.g. "rentalhub.config.TestingConfig"), or None to use CONFIG_CLASS
    from the environment, defaulting to rentalhub.config.Config.

    `folder_store` overrides the unit photo folder mapping store built from
    UNIT_FOLDER_MAPPING_FILE.
    """
    app = Flask(__name__, instance_relative_config=True)

    if config_object is None:
        config_object = os.getenv("CONFIG_CLASS", "rentalhub.config.Config")
    app.config.from_object(config_object)
    app.config.setdefault("API_PREFIX", "/api")

    if not app.config.get("SECRET_KEY") and not app.config.get("TESTING"):
        raise ValueError("SECRET_KEY environment variable must be set")
    if not app.config.get("JWT_SECRET_KEY"):
        app.config["JWT_SECRET_KEY"] = app.config["SECRET_KEY"]

    # Core middleware/logging/CORS
    _configure_logging(app)
    _configure_proxy(app)
    _configure_cors(app)

    # Init extensions, blueprints, error handlers, CLI
    from .cli import register_cli
    from .errors import register_error_handlers

    _init_extensions(app, folder_store=folder_store)
    _register_blueprints(app)
    register_error_handlers(app)
    register_cli(app)

    return app
