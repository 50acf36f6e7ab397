"""Helpers shared by the MongoDB repositories."""

from __future__ import annotations

from datetime import datetime, timezone

from bson import ObjectId


def to_object_id(value: str | None) -> ObjectId | None:
    """Parse a string id; ids that are not ObjectIds resolve to nothing."""
    # ObjectId(None) would mint a fresh id instead of failing.
    if value is None or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def as_utc(value: datetime) -> datetime:
    """Stored datetimes are UTC; attach the zone if the driver dropped it."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
