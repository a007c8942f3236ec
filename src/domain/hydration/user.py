"""Conversion between User entities and flat ``user`` rows."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from core.password import PasswordHash
from domain.entities.user import User


def to_raw_data(user: User) -> dict[str, Any]:
    """Flatten a user into storage-ready scalars."""
    return {
        "id": user.id.bytes,
        "email": user.email,
        "password_hash": str(user.password_hash) if user.password_hash else None,
    }


def from_raw_data(row: Mapping[str, Any]) -> User:
    """Build a user from a ``user`` row."""
    stored_hash = row["password_hash"]
    return User(
        id=UUID(bytes=bytes(row["id"])),
        email=row["email"],
        password_hash=PasswordHash(stored_hash) if stored_hash else None,
    )
