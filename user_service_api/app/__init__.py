"""
Application package initializer.

The package is organised into logical pieces: ``core`` holds
configuration, logging, errors and low-level helpers, ``schemas`` the
pydantic request/response models, ``services`` the user store, and
``api`` the routers that expose it over HTTP.
"""

from .main import app, create_app  # noqa: F401
