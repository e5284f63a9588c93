"""
Load Demo Flask Application Factory.

Provides the ``create_app`` factory for a one-endpoint service whose
handler burns CPU before answering. It shares no code with the User API.

Under CPython only one thread executes bytecode at a time, so concurrent
requests to this service saturate a single core regardless of how many
worker threads the server runs.
"""

from __future__ import annotations

import logging

from flask import Flask

from services.load_demo.config import get_config

logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the load demo application.

    Args:
        config_name: Optional configuration environment name
            (``"development"``, ``"testing"``, ``"production"``).  When *None*,
            the value is read from the ``FLASK_ENV`` environment variable.

    Returns:
        A configured Flask application instance.
    """
    app = Flask(__name__)
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(
        "Creating load demo app with config: %s (%d iterations per request)",
        config_class.__name__,
        app.config["HEAVY_COMPUTATION_ITERATIONS"],
    )

    from .routes import api_bp, method_not_allowed, not_found

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_error_handler(404, not_found)
    app.register_error_handler(405, method_not_allowed)

    return app
