"""User repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.user import User


class IUserRepository(Protocol):
    """Repository interface for User entities."""

    async def create_user(self, user: User) -> User:
        """Create a new user."""
        ...

    async def get_user_by_id(self, id: UUID) -> User:
        """Get a user by ID, raising NotFoundError if absent."""
        ...

    async def get_user_by_email(self, email: str) -> User:
        """Get a user by email, raising NotFoundError if absent."""
        ...

    async def email_exists(self, email: str) -> bool:
        """Check whether any user has registered the email."""
        ...

    async def update_user(self, user: User) -> User:
        """Update an existing user."""
        ...

    async def delete_user(self, user: User) -> None:
        """Delete a user."""
        ...
