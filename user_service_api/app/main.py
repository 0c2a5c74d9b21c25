"""
Main entrypoint for the User Service API.

This module assembles the FastAPI application, sets up logging,
middleware and exception handlers, and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn user_service_api.app.main:app --reload

or through ``run.py``, which honours ``HOST`` and ``PORT``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.errors import register_exception_handlers
from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.middleware import ExceptionHandlingMiddleware, RequestLoggingMiddleware
from .services.user_service import InMemoryUserService, UserService


logger = logging.getLogger(__name__)


def create_app(
    service: Optional[UserService] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    service : Optional[UserService]
        The user store the endpoints will use.  When omitted, a new
        ``InMemoryUserService`` is created and, if
        ``settings.seed_demo_users`` is set, seeded with demo users.
        An injected service is used as is.
    settings : Optional[Settings]
        Application settings; defaults to the module-level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file)

    if service is None:
        store = InMemoryUserService()
        if settings.seed_demo_users:
            store.seed_demo_users()
        service = store

    # The routing table is closed: no HTML docs or schema endpoints.
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.user_service = service

    # The last middleware added is outermost, so the request log sees the
    # 500 produced by ExceptionHandlingMiddleware.
    app.add_middleware(ExceptionHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)
    app.include_router(router)

    logger.debug("Application created with %s", type(service).__name__)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
