"""
Load demo endpoint.

Endpoints:
    GET /api/hello - Burn CPU, then return a fixed greeting
"""

from __future__ import annotations

import logging
import math
import time

from flask import Blueprint, Response, current_app, jsonify

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

HELLO_MESSAGE = "Hello from Fiber!"


def heavy_computation(iterations: int) -> float:
    """
    Run a CPU-bound floating-point loop.

    No I/O and no yield points; the calling thread is busy for the whole
    loop.

    Args:
        iterations: Number of ``sin(i) * sqrt(i)`` evaluations.

    Returns:
        Sum of all evaluated terms.
    """
    total = 0.0
    for i in range(iterations):
        total += math.sin(i) * math.sqrt(i)
    return total


@api_bp.route("/hello", methods=["GET"])
def hello() -> tuple[Response, int]:
    """Return the greeting after the configured CPU-bound delay."""
    iterations = current_app.config["HEAVY_COMPUTATION_ITERATIONS"]

    started = time.perf_counter()
    heavy_computation(iterations)
    elapsed_ms = (time.perf_counter() - started) * 1000

    logger.debug("Computed %d iterations in %.1f ms", iterations, elapsed_ms)
    return jsonify({"message": HELLO_MESSAGE}), 200


def not_found(error: Exception) -> tuple[Response, int]:
    """Handle 404 Not Found errors."""
    return jsonify({"error": "Resource not found"}), 404


def method_not_allowed(error: Exception) -> tuple[Response, int]:
    """Handle 405 Method Not Allowed errors."""
    return jsonify({"error": "Method not allowed"}), 405
