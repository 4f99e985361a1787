"""Time of day as understood by the feeder."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from typing import Self

from aln_feeder.domain.bounds import Hours, Minutes
from aln_feeder.domain.payloads import (
    TIME_ADAPTER,
    TimePayload,
    dump_payload_json,
    validate_payload,
    validate_payload_json,
)

# The feeder has no timezone setting; its clock always runs on UTC.
REFERENCE_TIMEZONE = UTC


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """Hour and minute in the feeder's reference timezone."""

    hour: Hours
    minute: Minutes

    @classmethod
    def of(cls, hour: int, minute: int) -> Self:
        """Build a time from plain integers."""
        return cls(hour=Hours(hour), minute=Minutes(minute))

    @classmethod
    def from_timestamp(cls, instant: datetime) -> Self:
        """Build a time from an instant, dropping seconds.

        Naive instants are taken as already expressed in the reference
        timezone.
        """
        if instant.tzinfo is None:
            local = instant.replace(tzinfo=REFERENCE_TIMEZONE)
        else:
            local = instant.astimezone(REFERENCE_TIMEZONE)
        return cls.of(local.hour, local.minute)

    def to_timestamp(self, on: date | None = None) -> datetime:
        """Return this time on the given day (today by default)."""
        day = on or datetime.now(tz=REFERENCE_TIMEZONE).date()
        return datetime.combine(
            day,
            time(self.hour.value, self.minute.value),
            tzinfo=REFERENCE_TIMEZONE,
        )

    def encode(self) -> dict[str, object]:
        """Return the JSON-compatible payload."""
        return TIME_ADAPTER.dump_python(self._to_payload())

    def to_json(self) -> str:
        """Return compact JSON text."""
        return dump_payload_json(TIME_ADAPTER, self._to_payload())

    @classmethod
    def decode(cls, data: object) -> Self:
        """Build a time from decoded JSON data."""
        return cls._from_payload(validate_payload(TIME_ADAPTER, data, "time"))

    @classmethod
    def from_json(cls, text: str | bytes) -> Self:
        """Build a time from JSON text."""
        return cls._from_payload(validate_payload_json(TIME_ADAPTER, text, "time"))

    def __str__(self) -> str:
        return f"{self.hour.value:02d}:{self.minute.value:02d}"

    def _to_payload(self) -> TimePayload:
        return TimePayload(hours=self.hour.value, minutes=self.minute.value)

    @classmethod
    def _from_payload(cls, payload: TimePayload) -> Self:
        return cls.of(payload.hours, payload.minutes)
