"""
Pydantic models for user data.

Defines request bodies for creating and updating users and the
representation returned by the API.  Field content is validated by
the service layer, not here: these models only fix the shape of the
JSON so that a body of the wrong shape is rejected before the
service is called.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Schema for ``POST /users``.

    Both fields default to an empty string so that a missing field is
    reported by the service as a validation error on that field.
    Unknown fields are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field("", examples=["Alice"])
    email: str = Field("", examples=["alice@example.com"])


class UserUpdate(BaseModel):
    """Schema for ``PUT /users/{id}``.

    A field that is omitted, ``null`` or empty leaves the stored value
    unchanged.
    """

    name: Optional[str] = Field(None, examples=["Alice Cooper"])
    email: Optional[str] = Field(None, examples=["alice.cooper@example.com"])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
