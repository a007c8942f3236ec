"""SQLAlchemy implementation of User repository."""

from uuid import UUID

from sqlalchemy import delete, exists, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import EmailTakenError, RepositoryError, UserNotFoundError
from domain.entities.user import User
from domain.hydration.user import from_raw_data, to_raw_data
from infrastructure.database.models import UserModel

_user_table = UserModel.__table__

EMAIL_CONSTRAINT = "uq_user_email"


def _is_email_conflict(error: IntegrityError) -> bool:
    # PostgreSQL names the constraint, SQLite names the column
    message = str(error.orig)
    return EMAIL_CONSTRAINT in message or "user.email" in message


class SQLAlchemyUserRepository:
    """SQLAlchemy implementation of IUserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create_user(self, user: User) -> User:
        """Create a new user."""
        try:
            await self._session.execute(insert(UserModel).values(**to_raw_data(user)))
        except IntegrityError as e:
            if _is_email_conflict(e):
                raise EmailTakenError(user.email) from e
            raise RepositoryError(f"Unable to create user with ID '{user.id}'") from e
        return user

    async def get_user_by_id(self, id: UUID) -> User:
        """Get a user by ID."""
        stmt = select(_user_table).where(UserModel.id == id.bytes)
        row = (await self._session.execute(stmt)).mappings().one_or_none()
        if row is None:
            raise UserNotFoundError(f"User with ID '{id}' does not exist")
        return from_raw_data(row)

    async def get_user_by_email(self, email: str) -> User:
        """Get a user by email."""
        stmt = select(_user_table).where(UserModel.email == email)
        row = (await self._session.execute(stmt)).mappings().one_or_none()
        if row is None:
            raise UserNotFoundError(f"User with email '{email}' does not exist")
        return from_raw_data(row)

    async def email_exists(self, email: str) -> bool:
        """Check whether any user has registered the email."""
        stmt = select(exists().where(UserModel.email == email))
        return bool((await self._session.execute(stmt)).scalar())

    async def update_user(self, user: User) -> User:
        """Overwrite the row matched by the user's ID."""
        values = to_raw_data(user)
        values.pop("id")
        stmt = update(UserModel).where(UserModel.id == user.id.bytes).values(**values)
        try:
            result = await self._session.execute(stmt)
        except IntegrityError as e:
            if _is_email_conflict(e):
                raise EmailTakenError(user.email) from e
            raise RepositoryError(f"Unable to update user with ID '{user.id}'") from e

        if result.rowcount == 0:
            raise UserNotFoundError(f"Cannot update - User with ID '{user.id}' does not exist")
        return user

    async def delete_user(self, user: User) -> None:
        """Delete the row matched by the user's ID."""
        stmt = delete(UserModel).where(UserModel.id == user.id.bytes)
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise UserNotFoundError(f"Cannot delete - User with ID '{user.id}' does not exist")
