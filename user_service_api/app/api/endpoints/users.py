"""
User endpoints.

Each handler makes exactly one call into the ``UserService`` and lets
``AppError`` subclasses propagate; the exception handlers registered
in ``api.errors`` turn them into JSON error bodies.  Handlers are
plain functions, so FastAPI runs every request on a worker thread.

The collection is served on both ``/users`` and ``/users/`` so that a
client posting to the trailing-slash form is not answered with a
redirect it will not follow.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..dependencies import get_user_service, user_create_payload, user_update_payload
from ...schemas.user import UserCreate, UserRead, UserUpdate
from ...services.user_service import UserService


router = APIRouter()


@router.get("", response_model=List[UserRead])
@router.get("/", response_model=List[UserRead], include_in_schema=False)
def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return all users."""
    return service.list_users()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_user(
    payload: UserCreate = Depends(user_create_payload),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Create a user.

    Responds 409 if the email is already registered and 400 if the
    name is empty or the email is malformed.
    """
    return service.create_user(payload.name, payload.email)


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserRead:
    return service.get_user_by_id(user_id)


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: str,
    payload: UserUpdate = Depends(user_update_payload),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Replace the supplied fields of a user.

    Omitted or empty fields keep their current value.
    """
    return service.update_user(user_id, name=payload.name, email=payload.email)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> Response:
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
