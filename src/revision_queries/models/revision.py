"""Revision model: one recorded edit event."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import AwareDatetime, BaseModel, ConfigDict, field_validator


class Revision(BaseModel):
    """An edit event with its author's display name and the instant it happened."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    user: str
    timestamp: AwareDatetime

    @field_validator("user", mode="before")
    @classmethod
    def _require_string_user(cls, value: Any) -> Any:
        if not isinstance(value, str):
            raise ValueError("user must be a string")
        return value

    @field_validator("timestamp", mode="before")
    @classmethod
    def _require_iso_timestamp(cls, value: Any) -> Any:
        # Parse here so pydantic never coerces epoch numbers or digit strings.
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            raise ValueError("timestamp must be an ISO-8601 string")
        try:
            return datetime.fromisoformat(value)
        except ValueError as exc:
            raise ValueError(f"timestamp {value!r} is not ISO-8601") from exc

    @field_validator("timestamp")
    @classmethod
    def _normalize_to_utc(cls, value: datetime) -> datetime:
        return value.astimezone(UTC)

    @classmethod
    def from_json(cls, item: Any) -> Revision:
        """Build a revision from one decoded JSON object.

        Raises ``pydantic.ValidationError`` when a field is missing or malformed.
        """
        return cls.model_validate(item)
