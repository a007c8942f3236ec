"""Conversion between Profile entities and flat ``user_profile`` rows."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any
from uuid import UUID

from domain.entities.profile import Profile

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def to_raw_data(profile: Profile) -> dict[str, Any]:
    """Flatten a profile into storage-ready scalars.

    UUIDs become their 16-byte binary form and datetimes are rendered as
    ``YYYY-MM-DD HH:MM:SS`` strings. Everything else passes through.
    """
    return {
        "id": profile.id.bytes,
        "user_id": profile.user_id.bytes,
        "username": profile.username,
        "first_name": profile.first_name,
        "last_name": profile.last_name,
        "city": profile.city,
        "county": profile.county,
        "slogan": profile.slogan,
        "created_at": _format_datetime(profile.created_at),
        "updated_at": _format_datetime(profile.updated_at),
    }


def from_raw_data(row: Mapping[str, Any]) -> Profile:
    """Build a profile from a ``user_profile`` row."""
    return Profile(
        id=UUID(bytes=bytes(row["id"])),
        user_id=UUID(bytes=bytes(row["user_id"])),
        username=row["username"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        city=row["city"],
        county=row["county"],
        slogan=row["slogan"],
        created_at=_parse_datetime(row["created_at"]),
        updated_at=_parse_datetime(row["updated_at"]),
    )


def _format_datetime(value: datetime | None) -> str | None:
    return value.strftime(DATETIME_FORMAT) if value else None


def _parse_datetime(value: str | None) -> datetime | None:
    return datetime.strptime(value, DATETIME_FORMAT) if value else None
