from datetime import datetime
from typing import Optional

from pydantic import EmailStr, field_validator

from me_tool.models.enums import Role
from me_tool.schemas.base import FormSchema, ResponseSchema

PASSWORD_MIN_LENGTH = 8


class StaffCreate(FormSchema):
    field_messages = {
        "email": "Invalid email address",
        "role": "Role must be STAFF or ADMIN",
    }

    name: str
    email: EmailStr
    role: Role
    password: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if len(v) > 100:
            raise ValueError("Name must be 100 characters or less")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if len(v) < PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
            )
        return v


class SafeStaff(ResponseSchema):
    """Staff record as exposed to callers: never carries the password."""
    id: str
    name: str
    email: str
    role: Role
    created_at: Optional[datetime] = None
