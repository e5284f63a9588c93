"""
Flask application factory module.

This module creates and configures the Flask application using
the factory pattern, allowing for different configurations
(development, testing, production).

Each application instance wires its own layers:
repository -> service -> controller -> blueprint.
"""

import logging

from flask import Flask

from config import get_config

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    """Configure root logging with the shared line format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    _configure_logging(app.config["LOG_LEVEL"])

    logger.info("Creating app with config: %s", config_class.__name__)

    # Keep response keys in model order (id, name, email)
    app.json.sort_keys = False

    from app.repository import UserRepository
    from app.routes.api import (
        UserController,
        create_api_blueprint,
        internal_error,
        method_not_allowed,
        not_found,
    )
    from app.service import UserService

    # Wire layers; the repository lives as long as this app instance
    repository = UserRepository()
    service = UserService(repository)
    controller = UserController(service)

    app.extensions["users"] = {
        "repository": repository,
        "service": service,
        "controller": controller,
    }

    app.register_blueprint(create_api_blueprint(controller))
    app.register_error_handler(404, not_found)
    app.register_error_handler(405, method_not_allowed)
    app.register_error_handler(500, internal_error)

    logger.info("User API ready with %s seeded users", repository.count())

    return app
