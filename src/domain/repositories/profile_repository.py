"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def create_profile(self, profile: Profile) -> Profile:
        """Create a new profile."""
        ...

    async def get_profile_by_user_id(self, user_id: UUID) -> Profile:
        """Get the profile owned by a user, raising NotFoundError if absent."""
        ...

    async def update_profile(self, profile: Profile) -> Profile:
        """Update the profile matched by its user ID."""
        ...

    async def delete_profile(self, user_id: UUID) -> None:
        """Delete the profile owned by a user."""
        ...
