"""SQLAlchemy ORM models."""

from sqlalchemy import LargeBinary, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class UserModel(Base):
    """User account model. IDs are stored as 16-byte binary UUIDs."""

    __tablename__ = "user"
    __table_args__ = (UniqueConstraint("email", name="uq_user_email"),)

    id: Mapped[bytes] = mapped_column(LargeBinary(16), primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)


class ProfileModel(Base):
    """User profile model (one row per user)."""

    __tablename__ = "user_profile"

    id: Mapped[bytes] = mapped_column(LargeBinary(16), primary_key=True)
    user_id: Mapped[bytes] = mapped_column(LargeBinary(16), nullable=False, unique=True)
    username: Mapped[str | None] = mapped_column(String(100))
    first_name: Mapped[str | None] = mapped_column(String(100))
    last_name: Mapped[str | None] = mapped_column(String(100))
    city: Mapped[str | None] = mapped_column(String(100))
    county: Mapped[str | None] = mapped_column(String(100))
    slogan: Mapped[str | None] = mapped_column(String(255))
    # "YYYY-MM-DD HH:MM:SS", written by domain.hydration.profile
    created_at: Mapped[str | None] = mapped_column(String(19))
    updated_at: Mapped[str | None] = mapped_column(String(19))
