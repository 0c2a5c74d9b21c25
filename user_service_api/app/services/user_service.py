"""
Business logic for users.

``UserService`` is the contract the API layer depends on.
``InMemoryUserService`` keeps users in a dictionary guarded by a
reader/writer lock: reads share the lock, and every mutation holds it
exclusively for its whole duration so the email uniqueness check is
atomic with the write it protects.  A persistent implementation can
satisfy the same contract without touching the endpoints.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional

from ..core.errors import ConflictError, NotFoundError
from ..core.identifiers import new_id
from ..core.locks import ReadWriteLock
from ..core.validation import validate_user_fields
from ..schemas.user import UserRead


logger = logging.getLogger(__name__)

DEMO_USERS = (
    ("John Doe", "john.doe@example.com"),
    ("Jane Smith", "jane.smith@example.com"),
    ("Bob Johnson", "bob.johnson@example.com"),
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class User:
    """Stored user record.  Frozen, so updates swap in a new record."""

    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    def to_read(self) -> UserRead:
        return UserRead.model_validate(self)


class UserService(ABC):
    """Operations the API layer needs from a user store."""

    @abstractmethod
    def list_users(self) -> List[UserRead]:
        """Return all users in no particular order."""

    @abstractmethod
    def get_user_by_id(self, user_id: str) -> UserRead:
        """Return the user with ``user_id`` or raise ``NotFoundError``."""

    @abstractmethod
    def create_user(self, name: str, email: str) -> UserRead:
        """Create a user.

        Raises ``ConflictError`` if the email is taken and
        ``ValidationError`` if a field is invalid.
        """

    @abstractmethod
    def update_user(
        self, user_id: str, name: Optional[str] = None, email: Optional[str] = None
    ) -> UserRead:
        """Replace the supplied non-empty fields of a user.

        Raises ``NotFoundError``, ``ConflictError`` or
        ``ValidationError``.  A failed update changes nothing.
        """

    @abstractmethod
    def delete_user(self, user_id: str) -> None:
        """Remove a user or raise ``NotFoundError``."""


class InMemoryUserService(UserService):
    """Thread-safe in-memory ``UserService``.

    Parameters
    ----------
    id_factory : Callable[[], str]
        Produces a new unique identifier per call.
    clock : Callable[[], datetime]
        Returns the current time; injectable for tests.
    """

    def __init__(
        self,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._id_factory = id_factory
        self._clock = clock
        self._lock = ReadWriteLock()
        self._users: Dict[str, User] = {}
        # email -> user id, kept in step with ``_users`` under the write lock.
        self._emails: Dict[str, str] = {}

    def seed_demo_users(self) -> List[UserRead]:
        """Insert the demonstration users and return them."""
        seeded = [self.create_user(name, email) for name, email in DEMO_USERS]
        logger.info("Seeded %d demo users", len(seeded))
        return seeded

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._users)

    def list_users(self) -> List[UserRead]:
        with self._lock.read_locked():
            return [user.to_read() for user in self._users.values()]

    def get_user_by_id(self, user_id: str) -> UserRead:
        with self._lock.read_locked():
            user = self._users.get(user_id)
            if user is None:
                raise NotFoundError("user", user_id)
            return user.to_read()

    def create_user(self, name: str, email: str) -> UserRead:
        with self._lock.write_locked():
            if email in self._emails:
                raise ConflictError("email already exists")

            now = self._clock()
            user = User(id=self._id_factory(), name=name, email=email, created_at=now, updated_at=now)
            validate_user_fields(user.name, user.email)
            if user.id in self._users:
                raise ConflictError(f"user id '{user.id}' already exists")

            self._users[user.id] = user
            self._emails[user.email] = user.id

        logger.info("Created user %s <%s>", user.id, user.email)
        return user.to_read()

    def update_user(
        self, user_id: str, name: Optional[str] = None, email: Optional[str] = None
    ) -> UserRead:
        with self._lock.write_locked():
            current = self._users.get(user_id)
            if current is None:
                raise NotFoundError("user", user_id)

            if email and email != current.email:
                owner = self._emails.get(email)
                if owner is not None and owner != user_id:
                    raise ConflictError("email already exists")

            candidate = replace(
                current,
                name=name or current.name,
                email=email or current.email,
            )
            validate_user_fields(candidate.name, candidate.email)

            now = self._clock()
            if now <= current.updated_at:
                now = current.updated_at + timedelta(microseconds=1)
            candidate = replace(candidate, updated_at=now)

            if candidate.email != current.email:
                del self._emails[current.email]
                self._emails[candidate.email] = user_id
            self._users[user_id] = candidate

        logger.info("Updated user %s", user_id)
        return candidate.to_read()

    def delete_user(self, user_id: str) -> None:
        with self._lock.write_locked():
            user = self._users.pop(user_id, None)
            if user is None:
                raise NotFoundError("user", user_id)
            del self._emails[user.email]

        logger.info("Deleted user %s", user_id)
