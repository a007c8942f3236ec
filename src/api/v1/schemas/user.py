"""Pydantic schemas for User API."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from api.v1.schemas.common import JSendSuccess
from domain.entities.user import User


def _check_email(v: str) -> str:
    v = v.strip()
    if "@" not in v or "." not in v.split("@")[-1]:
        raise ValueError("Invalid email address")
    return v


class UserRegisterRequest(BaseModel):
    """Schema for registering a new account."""

    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=255)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Basic email validation."""
        return _check_email(v)


class UserIdRequest(BaseModel):
    """Schema for requests addressing a single user."""

    id: UUID


class UserUpdateRequest(BaseModel):
    """Schema for updating a user's email and/or password.

    Leave ``newPassword`` empty to keep the current password.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "93449e9d-4082-4305-8840-fa1673bcf915",
                "email": "joe@newEmail.com",
                "oldPassword": "password",
                "newPassword": "newPass",
            }
        },
    )

    id: UUID
    email: str = Field(..., min_length=3, max_length=255)
    old_password: str = Field("", alias="oldPassword", max_length=255)
    new_password: str = Field("", alias="newPassword", max_length=255)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Basic email validation."""
        return _check_email(v)


class UserResponse(BaseModel):
    """Public view of a user. The password hash is never exposed."""

    id: UUID
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(id=user.id, email=user.email)


class UserData(BaseModel):
    user: UserResponse


class UserEnvelope(JSendSuccess):
    """Success envelope carrying a single user."""

    data: UserData

    @classmethod
    def for_user(cls, user: User) -> "UserEnvelope":
        return cls(data=UserData(user=UserResponse.from_entity(user)))
