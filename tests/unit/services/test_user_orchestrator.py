"""Unit tests for UserOrchestrator."""

from uuid import UUID

import pytest
from argon2 import PasswordHasher

from core.exceptions import (
    EmailTakenError,
    PasswordMismatchError,
    ProfileNotFoundError,
    UserNotFoundError,
)
from core.password import PasswordHash
from domain.entities.profile import Profile
from domain.entities.user import User
from domain.services.user_orchestrator import UserOrchestrator
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def orchestrator(uow: FakeUnitOfWork) -> UserOrchestrator:
    return UserOrchestrator(lambda: uow)


def _user(user_id: UUID, email: str = "joe@mail.com", password: str = "password") -> User:
    return User(id=user_id, email=email, password_hash=PasswordHash.create_from_raw(password))


# --- create / register ---


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_delegates_to_repository(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork, user_id: UUID
    ):
        user = _user(user_id)
        uow.users.create_user.return_value = user

        result = await orchestrator.create_user(user)

        assert result is user
        uow.users.create_user.assert_called_once_with(user)
        assert uow.committed


class TestRegisterUser:
    @pytest.mark.asyncio
    async def test_creates_user_with_hashed_password_and_profile(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork
    ):
        uow.users.email_exists.return_value = False
        uow.users.create_user.side_effect = lambda user: user

        result = await orchestrator.register_user("joe@mail.com", "password")

        assert result.email == "joe@mail.com"
        assert result.password_hash is not None
        assert result.password_hash.verify("password")
        profile = uow.profiles.create_profile.call_args.args[0]
        assert isinstance(profile, Profile)
        assert profile.user_id == result.id
        assert uow.committed

    @pytest.mark.asyncio
    async def test_raises_when_email_taken(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork
    ):
        uow.users.email_exists.return_value = True

        with pytest.raises(EmailTakenError) as exc_info:
            await orchestrator.register_user("joe@mail.com", "password")

        assert exc_info.value.message == "A user has already registered with this email address"
        uow.users.create_user.assert_not_called()
        assert not uow.committed


# --- lookups ---


class TestLookups:
    @pytest.mark.asyncio
    async def test_get_user_by_id_propagates_not_found(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.users.get_user_by_id.side_effect = UserNotFoundError(
            f"User with ID '{user_id}' does not exist"
        )

        with pytest.raises(UserNotFoundError, match=f"User with ID '{user_id}' does not exist"):
            await orchestrator.get_user_by_id(user_id)

    @pytest.mark.asyncio
    async def test_get_user_by_email(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.users.get_user_by_email.return_value = _user(user_id)

        result = await orchestrator.get_user_by_email("joe@mail.com")

        assert result.id == user_id
        uow.users.get_user_by_email.assert_called_once_with("joe@mail.com")

    @pytest.mark.asyncio
    async def test_can_create_new_user(self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork):
        uow.users.email_exists.return_value = False
        assert await orchestrator.can_create_new_user("new@mail.com") is True

        uow.users.email_exists.return_value = True
        assert await orchestrator.can_create_new_user("joe@mail.com") is False

    @pytest.mark.asyncio
    async def test_validate_user_password(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.users.get_user_by_id.return_value = _user(user_id)

        assert await orchestrator.validate_user_password(user_id, "password") is True
        assert await orchestrator.validate_user_password(user_id, "nope") is False
        uow.users.update_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_validate_user_password_rehashes_outdated_hash(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork, user_id: UUID
    ):
        outdated = PasswordHash(PasswordHasher(time_cost=3, memory_cost=2048).hash("password"))
        uow.users.get_user_by_id.return_value = User(
            id=user_id, email="joe@mail.com", password_hash=outdated
        )

        assert await orchestrator.validate_user_password(user_id, "password") is True

        saved = uow.users.update_user.call_args.args[0]
        assert saved.password_hash != outdated
        assert saved.password_hash.verify("password")
        assert not saved.password_hash.needs_rehash()
        assert uow.committed

    @pytest.mark.asyncio
    async def test_wrong_password_is_not_rehashed(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork, user_id: UUID
    ):
        outdated = PasswordHash(PasswordHasher(time_cost=3, memory_cost=2048).hash("password"))
        uow.users.get_user_by_id.return_value = User(
            id=user_id, email="joe@mail.com", password_hash=outdated
        )

        assert await orchestrator.validate_user_password(user_id, "nope") is False
        uow.users.update_user.assert_not_called()


# --- update_user ---


class TestUpdateUser:
    @pytest.mark.asyncio
    async def test_persists_entity_and_commits(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork, user_id: UUID
    ):
        user = _user(user_id, email="joe@email.com")
        uow.users.update_user.return_value = user

        result = await orchestrator.update_user(user)

        assert result.email == "joe@email.com"
        uow.users.update_user.assert_called_once_with(user)
        assert uow.committed


# --- update_user_details ---


class TestUpdateUserDetails:
    @pytest.mark.asyncio
    async def test_changes_email_and_password(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.users.get_user_by_id.return_value = _user(user_id)
        uow.users.email_exists.return_value = False
        uow.users.update_user.side_effect = lambda user: user

        result = await orchestrator.update_user_details(
            user_id, "joe@newEmail.com", "password", "newPass"
        )

        assert result.email == "joe@newEmail.com"
        assert result.password_hash is not None
        assert result.password_hash.verify("newPass")
        assert not result.password_hash.verify("password")
        assert uow.committed

    @pytest.mark.asyncio
    async def test_same_email_skips_uniqueness_check(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.users.get_user_by_id.return_value = _user(user_id)
        uow.users.update_user.side_effect = lambda user: user

        await orchestrator.update_user_details(user_id, "joe@mail.com")

        uow.users.email_exists.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_new_password_keeps_hash(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork, user_id: UUID
    ):
        user = _user(user_id)
        original_hash = user.password_hash
        uow.users.get_user_by_id.return_value = user
        uow.users.email_exists.return_value = False
        uow.users.update_user.side_effect = lambda user: user

        result = await orchestrator.update_user_details(user_id, "joe@other.com", "", "")

        assert result.password_hash is original_hash

    @pytest.mark.asyncio
    async def test_raises_not_found(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.users.get_user_by_id.side_effect = UserNotFoundError("missing")

        with pytest.raises(UserNotFoundError):
            await orchestrator.update_user_details(user_id, "joe@newEmail.com", "password", "newPass")

        uow.users.update_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_raises_when_email_belongs_to_another_user(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.users.get_user_by_id.return_value = _user(user_id)
        uow.users.email_exists.return_value = True

        with pytest.raises(EmailTakenError):
            await orchestrator.update_user_details(user_id, "andrea@mail.com")

        uow.users.update_user.assert_not_called()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_raises_when_old_password_is_wrong(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.users.get_user_by_id.return_value = _user(user_id)
        uow.users.email_exists.return_value = False

        with pytest.raises(PasswordMismatchError) as exc_info:
            await orchestrator.update_user_details(
                user_id, "joe@email.com", "wrongPassword", "newPass"
            )

        assert exc_info.value.message == (
            "Password does not match the password on record - please try again"
        )
        uow.users.update_user.assert_not_called()


# --- delete ---


class TestDeleteUser:
    @pytest.mark.asyncio
    async def test_deletes_user_and_profile(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork, user_id: UUID
    ):
        user = _user(user_id)

        await orchestrator.delete_user(user)

        uow.users.delete_user.assert_called_once_with(user)
        uow.profiles.delete_profile.assert_called_once_with(user_id)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_user_without_profile_is_still_deleted(
        self, orchestrator: UserOrchestrator, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.profiles.delete_profile.side_effect = ProfileNotFoundError("missing")

        await orchestrator.delete_user(_user(user_id))

        assert uow.committed
