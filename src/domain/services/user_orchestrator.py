"""User orchestration: repository calls combined with account validation."""

from contextlib import suppress
from typing import Callable
from uuid import UUID, uuid4

import structlog

from core.exceptions import EmailTakenError, PasswordMismatchError, ProfileNotFoundError
from core.password import PasswordHash
from domain.entities.profile import Profile
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class UserOrchestrator:
    """Service layer for User business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create_user(self, user: User) -> User:
        """Persist a fully-built user entity."""
        async with self._uow_factory() as uow:
            created = await uow.users.create_user(user)
            await uow.commit()

        logger.info("user_created", user_id=str(created.id))
        return created

    async def register_user(self, email: str, password: str) -> User:
        """Register a new account along with its empty profile.

        Refuses emails that are already used.
        """
        async with self._uow_factory() as uow:
            if await uow.users.email_exists(email):
                logger.info("user_registration_rejected", reason="email_taken")
                raise EmailTakenError(email)

            user = User(
                id=uuid4(),
                email=email,
                password_hash=PasswordHash.create_from_raw(password),
            )
            created = await uow.users.create_user(user)
            await uow.profiles.create_profile(Profile(user_id=created.id))
            await uow.commit()

        logger.info("user_registered", user_id=str(created.id))
        return created

    async def get_user_by_id(self, user_id: UUID) -> User:
        async with self._uow_factory() as uow:
            return await uow.users.get_user_by_id(user_id)

    async def get_user_by_email(self, email: str) -> User:
        async with self._uow_factory() as uow:
            return await uow.users.get_user_by_email(email)

    async def can_create_new_user(self, email: str) -> bool:
        """True when no user has registered the email yet."""
        async with self._uow_factory() as uow:
            return not await uow.users.email_exists(email)

    async def validate_user_password(self, user_id: UUID, password: str) -> bool:
        """Check a plaintext password against the user's stored hash.

        A matching password stored with outdated hasher parameters is
        rehashed and saved.
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_user_by_id(user_id)
            if user.password_hash is None or not user.password_hash.verify(password):
                return False

            if user.password_hash.needs_rehash():
                user.password_hash = PasswordHash.create_from_raw(password)
                await uow.users.update_user(user)
                await uow.commit()
                logger.info("user_password_rehashed", user_id=str(user_id))

        return True

    async def update_user(self, user: User) -> User:
        async with self._uow_factory() as uow:
            updated = await uow.users.update_user(user)
            await uow.commit()
            return updated

    async def update_user_details(
        self,
        user_id: UUID,
        email: str,
        old_password: str = "",
        new_password: str = "",
    ) -> User:
        """Change a user's email and/or password.

        The password only changes when ``new_password`` is non-empty, and
        then ``old_password`` must verify against the stored hash. All checks
        run before anything is written.
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_user_by_id(user_id)

            if email and email != user.email:
                if await uow.users.email_exists(email):
                    logger.info(
                        "user_update_rejected",
                        user_id=str(user_id),
                        reason="email_taken",
                    )
                    raise EmailTakenError(email)
                user.email = email

            if new_password:
                if user.password_hash is None or not user.password_hash.verify(old_password):
                    logger.info(
                        "user_update_rejected",
                        user_id=str(user_id),
                        reason="password_mismatch",
                    )
                    raise PasswordMismatchError()
                user.password_hash = PasswordHash.create_from_raw(new_password)

            updated = await uow.users.update_user(user)
            await uow.commit()

        logger.info("user_updated", user_id=str(user_id))
        return updated

    async def delete_user(self, user: User) -> None:
        """Delete a user together with their profile, if they have one."""
        async with self._uow_factory() as uow:
            await uow.users.delete_user(user)
            with suppress(ProfileNotFoundError):
                await uow.profiles.delete_profile(user.id)
            await uow.commit()

        logger.info("user_deleted", user_id=str(user.id))
