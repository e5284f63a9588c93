"""
Configuration Classes for the Load Demo Service.

The load demo exposes a single CPU-bound endpoint used to watch
throughput degrade under load. The only tunable that matters is the
number of loop iterations each request burns.

Key Concepts Demonstrated:
- Class-based configuration with inheritance
- Environment-variable overrides for twelve-factor app compliance
- A testing profile that shrinks the workload so tests stay fast
"""

from __future__ import annotations

import os


class Config:
    """
    Base configuration.

    Attributes:
        HOST: Interface the development server binds to.
        PORT: Port the development server listens on.
        LOG_LEVEL: Root logging level.
        HEAVY_COMPUTATION_ITERATIONS: Loop iterations executed per
            ``GET /api/hello`` request.
    """

    HOST: str = os.environ.get("HOST", "0.0.0.0")
    PORT: int = int(os.environ.get("PORT", "3000"))
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
    HEAVY_COMPUTATION_ITERATIONS: int = int(
        os.environ.get("HEAVY_COMPUTATION_ITERATIONS", "5000000")
    )


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """
    Testing environment configuration.

    Runs a token workload so request tests return immediately.
    """

    DEBUG: bool = True
    TESTING: bool = True
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "WARNING")
    HEAVY_COMPUTATION_ITERATIONS: int = 1_000


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Look up and return the configuration class for the given environment.

    Args:
        env: Environment name (``"development"``, ``"testing"``,
            ``"production"``).  When ``None``, falls back to the
            ``FLASK_ENV`` environment variable, defaulting to
            ``"development"``.

    Returns:
        The configuration class (not an instance) corresponding to the
        requested environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
