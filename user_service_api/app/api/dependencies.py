"""
Dependency injection for FastAPI.

The user service is created by ``create_app`` and stored on
``app.state``; endpoints receive it through ``get_user_service``
rather than importing a module-level instance.

Request bodies are decoded from the raw bytes whatever the
``Content-Type`` header says, so ``curl -d '{...}'`` without a JSON
content type is accepted.  A body that does not decode into the
expected shape raises ``RequestValidationError`` and is answered
with 400 by ``api.errors``.
"""

from typing import Type, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from ..schemas.user import UserCreate, UserUpdate
from ..services.user_service import UserService


Payload = TypeVar("Payload", bound=BaseModel)


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


async def _decode_body(request: Request, model: Type[Payload]) -> Payload:
    body = await request.body()
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc


async def user_create_payload(request: Request) -> UserCreate:
    return await _decode_body(request, UserCreate)


async def user_update_payload(request: Request) -> UserUpdate:
    return await _decode_body(request, UserUpdate)
