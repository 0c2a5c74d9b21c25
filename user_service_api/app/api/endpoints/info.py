"""
Service information endpoints.

``GET /health`` is a liveness check with a fixed payload that does not
depend on configuration.  ``GET /`` returns a short description of the API and
reports the configured ``API_VERSION``.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request


router = APIRouter()

HEALTH = {"status": "healthy", "service": "user-service", "version": "1.0.0"}

ENDPOINTS = {
    "users": {
        "GET /users": "Get all users",
        "POST /users": "Create a new user",
        "GET /users/{id}": "Get user by ID",
        "PUT /users/{id}": "Update user by ID",
        "DELETE /users/{id}": "Delete user by ID",
    },
    "health": "GET /health - Health check",
}


@router.get("/health", response_model=Dict[str, Any])
def health() -> Dict[str, Any]:
    return dict(HEALTH)


@router.get("/", response_model=Dict[str, Any])
def root(request: Request) -> Dict[str, Any]:
    """Describe the API and list its endpoints."""
    return {
        "message": "Welcome to User Service API",
        "version": request.app.state.settings.api_version,
        "endpoints": ENDPOINTS,
    }
