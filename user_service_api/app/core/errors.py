"""
Application error taxonomy.

Services raise subclasses of ``AppError``; the API layer maps the
error ``type`` to an HTTP status code and renders the error body.
Handlers never look at anything beyond the type, message and field.
"""

from typing import Any, Dict, Optional

from fastapi import status


VALIDATION_ERROR = "VALIDATION_ERROR"
NOT_FOUND_ERROR = "NOT_FOUND_ERROR"
CONFLICT_ERROR = "CONFLICT_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"

_STATUS_BY_TYPE = {
    VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    NOT_FOUND_ERROR: status.HTTP_404_NOT_FOUND,
    CONFLICT_ERROR: status.HTTP_409_CONFLICT,
    INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class AppError(Exception):
    """Base class for all application errors.

    ``cause`` is kept for server-side logging only and is never
    rendered into a response.
    """

    def __init__(
        self,
        error_type: str,
        message: str,
        field: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.type = error_type
        self.message = message
        self.field = field
        self.cause = cause
        super().__init__(str(self))
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.field:
            return f"{self.type}: {self.message} (field: {self.field})"
        return f"{self.type}: {self.message}"

    @property
    def status_code(self) -> int:
        return _STATUS_BY_TYPE.get(self.type, status.HTTP_500_INTERNAL_SERVER_ERROR)

    def to_dict(self) -> Dict[str, Any]:
        """Return the ``{"error": {...}}`` response body."""
        body: Dict[str, Any] = {"type": self.type, "message": self.message}
        if self.field:
            body["field"] = self.field
        return {"error": body}


class ValidationError(AppError):
    """Raised when a single field fails validation."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(VALIDATION_ERROR, message, field=field)


class NotFoundError(AppError):
    """Raised when no entity exists at the given id."""

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(NOT_FOUND_ERROR, f"{resource} with id '{identifier}' not found")


class ConflictError(AppError):
    """Raised when a uniqueness constraint would be violated."""

    def __init__(self, message: str) -> None:
        super().__init__(CONFLICT_ERROR, message)


class InternalError(AppError):
    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(INTERNAL_ERROR, message, cause=cause)


def as_app_error(exc: BaseException) -> Optional[AppError]:
    """Return the ``AppError`` found in ``exc`` or its cause chain."""
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, AppError):
            return current
        seen.add(id(current))
        current = current.__cause__
    return None
