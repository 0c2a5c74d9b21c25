"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; override them via the
environment before importing this module.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # Listening address used by ``run.py``.
    host: str = field(default_factory=lambda: os.getenv("HOST", "localhost"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8080")))

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "User Service API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG", "false"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # When enabled, the application seeds three demonstration users at
    # start-up so that ``GET /users`` returns something on a fresh process.
    seed_demo_users: bool = field(default_factory=lambda: _env_bool("SEED_DEMO_USERS", "true"))

    @classmethod
    def from_env(cls) -> "Settings":
        """Build a fresh ``Settings`` from the current environment."""
        return cls()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
