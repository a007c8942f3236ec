"""Pydantic schemas for Profile API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from api.v1.schemas.common import JSendSuccess
from domain.entities.profile import Profile


class ProfileGetRequest(BaseModel):
    """Schema for fetching the profile of a user."""

    user_id: UUID


class ProfileUpdateRequest(BaseModel):
    """Schema for updating a profile. Omitted fields are left unchanged."""

    user_id: UUID
    username: str | None = Field(None, max_length=100)
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    city: str | None = Field(None, max_length=100)
    county: str | None = Field(None, max_length=100)
    slogan: str | None = Field(None, max_length=255)


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "03622d29-9e1d-499e-a9dd-9fcd12b4fab9",
                "user_id": "b5acd30c-085e-4dee-b8a9-19e725dc62c3",
                "username": "joe",
                "first_name": "Joe",
                "last_name": "Sweeny",
                "city": "Romford",
                "county": "Essex",
                "slogan": "Be drunk and Merry",
                "created_at": "2017-03-12T00:00:00",
                "updated_at": "2017-03-12T00:00:00",
            }
        },
    )

    id: UUID
    user_id: UUID
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    city: str | None = None
    county: str | None = None
    slogan: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProfileData(BaseModel):
    profile: ProfileResponse


class ProfileEnvelope(JSendSuccess):
    """Success envelope carrying a single profile."""

    data: ProfileData

    @classmethod
    def for_profile(cls, profile: Profile) -> "ProfileEnvelope":
        return cls(data=ProfileData(profile=ProfileResponse.model_validate(profile)))
