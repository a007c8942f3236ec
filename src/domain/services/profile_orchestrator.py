"""Profile orchestration."""

from typing import Any, Callable
from uuid import UUID

import structlog

from domain.entities.profile import Profile
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

EDITABLE_FIELDS = frozenset(
    {"username", "first_name", "last_name", "city", "county", "slogan"}
)


class ProfileOrchestrator:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create_profile(self, profile: Profile) -> Profile:
        async with self._uow_factory() as uow:
            created = await uow.profiles.create_profile(profile)
            await uow.commit()

        logger.info("profile_created", user_id=str(created.user_id))
        return created

    async def get_profile_by_user_id(self, user_id: UUID) -> Profile:
        async with self._uow_factory() as uow:
            return await uow.profiles.get_profile_by_user_id(user_id)

    async def update_profile(self, profile: Profile) -> Profile:
        async with self._uow_factory() as uow:
            updated = await uow.profiles.update_profile(profile)
            await uow.commit()

        logger.info("profile_updated", user_id=str(updated.user_id))
        return updated

    async def update_profile_details(self, user_id: UUID, **fields: Any) -> Profile:
        """Apply only the supplied editable fields to a user's profile."""
        unknown = set(fields) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown profile fields: {', '.join(sorted(unknown))}")

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_profile_by_user_id(user_id)
            for name, value in fields.items():
                setattr(profile, name, value)
            updated = await uow.profiles.update_profile(profile)
            await uow.commit()

        logger.info(
            "profile_updated",
            user_id=str(user_id),
            fields=sorted(fields),
        )
        return updated
