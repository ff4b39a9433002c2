"""
User profile model definition.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class ProfileUpdate(BaseModel):
    """Editable profile fields. Names are stored trimmed."""
    first_name: str = Field("", max_length=100)
    last_name: str = Field("", max_length=100)
    email: Optional[str] = Field(None, max_length=320)

    @field_validator("first_name", "last_name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        return value.strip()


class Profile(ProfileUpdate):
    """
    Represents the profile of an authenticated user.
    """
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
