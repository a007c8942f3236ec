"""Password hashing backed by argon2."""

from functools import lru_cache

from argon2 import PasswordHasher
from argon2 import exceptions as argon_exc

from core.config import settings


@lru_cache
def get_hasher() -> PasswordHasher:
    """Get the shared argon2 hasher configured from settings."""
    return PasswordHasher(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
    )


class PasswordHash:
    """Opaque one-way hash of a password.

    Holds the encoded argon2 string exactly as stored in the database.
    """

    __slots__ = ("_hash",)

    def __init__(self, hashed: str) -> None:
        self._hash = hashed

    @classmethod
    def create_from_raw(cls, raw: str) -> "PasswordHash":
        """Hash a plaintext password with a fresh salt."""
        return cls(get_hasher().hash(raw))

    def verify(self, raw: str) -> bool:
        """Check a plaintext password against this hash."""
        try:
            return get_hasher().verify(self._hash, raw)
        except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False

    def needs_rehash(self) -> bool:
        """Whether the hash was produced with outdated parameters."""
        try:
            return get_hasher().check_needs_rehash(self._hash)
        except argon_exc.InvalidHashError:
            return True

    def __str__(self) -> str:
        return self._hash

    def __repr__(self) -> str:
        return "PasswordHash(<hidden>)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PasswordHash):
            return NotImplemented
        return self._hash == other._hash

    def __hash__(self) -> int:
        return hash(self._hash)
