"""SQLAlchemy implementation of Profile repository."""

from datetime import datetime, timezone
from typing import Callable
from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ProfileNotFoundError, RepositoryError
from domain.entities.profile import Profile
from domain.hydration.profile import from_raw_data, to_raw_data
from infrastructure.database.models import ProfileModel

_profile_table = ProfileModel.__table__


def utc_now() -> datetime:
    """Current UTC time, naive and truncated to whole seconds."""
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(
        self,
        session: AsyncSession,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._session = session
        self._clock = clock

    async def create_profile(self, profile: Profile) -> Profile:
        """Create a new profile, stamping missing timestamps."""
        now = self._clock()
        profile.created_at = profile.created_at or now
        profile.updated_at = profile.updated_at or now

        try:
            await self._session.execute(insert(ProfileModel).values(**to_raw_data(profile)))
        except IntegrityError as e:
            raise RepositoryError(
                f"Unable to create profile for User ID {profile.user_id}"
            ) from e
        return profile

    async def get_profile_by_user_id(self, user_id: UUID) -> Profile:
        """Get the profile owned by a user."""
        stmt = select(_profile_table).where(ProfileModel.user_id == user_id.bytes)
        row = (await self._session.execute(stmt)).mappings().one_or_none()
        if row is None:
            raise ProfileNotFoundError(f"Profile with User ID {user_id} does not exist")
        return from_raw_data(row)

    async def update_profile(self, profile: Profile) -> Profile:
        """Overwrite the row matched by the profile's user ID."""
        profile.updated_at = self._clock()
        values = to_raw_data(profile)
        # Identity and creation time are fixed once the row exists
        for key in ("id", "user_id", "created_at"):
            values.pop(key)

        stmt = (
            update(ProfileModel)
            .where(ProfileModel.user_id == profile.user_id.bytes)
            .values(**values)
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise ProfileNotFoundError(
                f"Cannot update - Profile with User ID {profile.user_id} does not exist"
            )
        return await self.get_profile_by_user_id(profile.user_id)

    async def delete_profile(self, user_id: UUID) -> None:
        """Delete the profile owned by a user."""
        stmt = delete(ProfileModel).where(ProfileModel.user_id == user_id.bytes)
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise ProfileNotFoundError(
                f"Cannot delete - Profile with User ID {user_id} does not exist"
            )
