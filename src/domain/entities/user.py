"""User domain entity."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from core.password import PasswordHash


@dataclass
class User:
    """Domain entity for a registered user account."""

    id: UUID = field(default_factory=uuid4)
    email: str = ""
    password_hash: PasswordHash | None = None
