# src/reloc_community/schemas/user.py
"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserSync(BaseModel):
    """Profile fields pushed by the client after sign-in.

    Both snake_case and the auth provider's camelCase spellings are accepted.
    """

    id: str | None = None
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    photo_url: str | None = None
    display_name: str | None = Field(None, alias="displayName")
    photo_url_alt: str | None = Field(None, alias="photoURL")
    company: str | None = None
    role: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class UserResponse(BaseModel):
    """Schema for user profile information."""

    id: str
    name: str | None
    display_name: str | None
    email: str | None
    phone: str | None
    photo_url: str | None
    company: str | None
    role: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
