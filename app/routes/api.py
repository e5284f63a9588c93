"""
REST API endpoints for User management.

The controller translates HTTP requests into service calls and service
results back into JSON responses. It holds no state of its own; the
service (and the repository behind it) is injected at construction.

Endpoints:
    GET    /users    - List all users
    POST   /users    - Create a new user
"""

import logging

from flask import Blueprint, Response, jsonify, request

from app.errors import UserApiError
from app.models import User
from app.service import UserService

logger = logging.getLogger(__name__)


class UserController:
    """HTTP handlers for the ``/users`` resource."""

    def __init__(self, service: UserService) -> None:
        self.service = service

    def get_all(self) -> tuple[Response, int]:
        """
        List all users.

        Returns:
            JSON array of users and 200 status code.
        """
        logger.info("GET /users - Fetching all users")

        users = self.service.get_all_users()
        return jsonify([user.to_dict() for user in users]), 200

    def create(self) -> tuple[Response, int]:
        """
        Create a new user.

        Request Body (JSON):
            name: User name (optional)
            email: User email (required, non-empty)

        Returns:
            JSON response with the created user and 200 status code.
            Malformed bodies and validation failures raise
            ``UserApiError`` subclasses, rendered by ``handle_user_api_error``.
        """
        logger.info("POST /users - Creating new user")

        user = User.from_payload(request.get_json(silent=True))
        created = self.service.create_user(user)

        logger.info("Created user with ID: %s", created.id)
        return jsonify(created.to_dict()), 200


def create_api_blueprint(controller: UserController) -> Blueprint:
    """
    Build the API blueprint bound to a controller instance.

    Args:
        controller: Controller whose handlers serve the routes.

    Returns:
        Blueprint with the ``/users`` routes and error handler registered.
    """
    api_bp = Blueprint("api", __name__)

    api_bp.add_url_rule("/users", "get_users", controller.get_all, methods=["GET"])
    api_bp.add_url_rule("/users", "create_user", controller.create, methods=["POST"])
    api_bp.register_error_handler(UserApiError, handle_user_api_error)

    return api_bp


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

def handle_user_api_error(error: UserApiError) -> tuple[Response, int]:
    """Render malformed-request and validation errors as JSON."""
    logger.warning("Request rejected: %s", error.message)
    return jsonify({"error": error.message}), error.status_code


def not_found(error: Exception) -> tuple[Response, int]:
    """Handle 404 Not Found errors."""
    return jsonify({"error": "Resource not found"}), 404


def method_not_allowed(error: Exception) -> tuple[Response, int]:
    """Handle 405 Method Not Allowed errors."""
    return jsonify({"error": "Method not allowed"}), 405


def internal_error(error: Exception) -> tuple[Response, int]:
    """Handle 500 Internal Server errors."""
    logger.error("Internal server error: %s", error)
    return jsonify({"error": "Internal server error"}), 500
