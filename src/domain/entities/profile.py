"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Profile:
    """Domain entity for a user's public profile (one per user)."""

    user_id: UUID
    id: UUID = field(default_factory=uuid4)
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    city: str | None = None
    county: str | None = None
    slogan: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
