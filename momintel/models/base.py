"""Base record class for all domain models."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


class Record(BaseModel):
    """Base class for meeting intelligence records.

    Provides the standard serialization config shared by every entity.
    Immutable records (notes, chunks, snapshots) override it with
    ``frozen=True``.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_default=True,
        from_attributes=True,
    )
