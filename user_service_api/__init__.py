"""In-memory user CRUD service built on FastAPI."""

__version__ = "1.0.0"
