"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  API handlers
depend on the abstract ``UserService`` so the in-memory store can be
swapped for another implementation without changing them.
"""

from .user_service import InMemoryUserService, UserService  # noqa: F401
