"""Entry point for the User Service API.

Starts the FastAPI application under uvicorn.  The listening address
is read from the ``HOST`` and ``PORT`` environment variables
(defaults ``localhost`` and ``8080``).  Uvicorn handles SIGINT and
SIGTERM and shuts the server down gracefully.

Usage:
    python run.py
"""
import logging

import uvicorn

from user_service_api.app.core.config import settings
from user_service_api.app.main import app


logger = logging.getLogger("user_service_api.run")

ROUTES = (
    ("GET", "/", "API information"),
    ("GET", "/health", "Health check"),
    ("GET", "/users", "Get all users"),
    ("POST", "/users", "Create user"),
    ("GET", "/users/{id}", "Get user by ID"),
    ("PUT", "/users/{id}", "Update user"),
    ("DELETE", "/users/{id}", "Delete user"),
)


def log_banner(host: str, port: int) -> None:
    """Log the endpoint table and an example request."""
    logger.info("Starting server on %s:%s", host, port)
    logger.info("API endpoints:")
    for method, path, description in ROUTES:
        logger.info("  %-6s %-14s - %s", method, path, description)
    logger.info("Example requests:")
    logger.info("  curl http://%s:%s/users", host, port)
    logger.info(
        "  curl -X POST http://%s:%s/users -H 'Content-Type: application/json' "
        "-d '{\"name\":\"Alice\",\"email\":\"alice@example.com\"}'",
        host,
        port,
    )


def main() -> None:
    log_banner(settings.host, settings.port)
    # RequestLoggingMiddleware already logs every request.
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,
    )
    logger.info("Server exited")


if __name__ == "__main__":
    main()
