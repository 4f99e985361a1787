"""Meal entities sent to and received from the feeder."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from functools import total_ordering
from typing import Self
from uuid import UUID, uuid4

from aln_feeder.domain.bounds import Amount
from aln_feeder.domain.payloads import (
    MEAL_ADAPTER,
    SCHEDULED_MEAL_ADAPTER,
    MealPayload,
    ScheduledMealPayload,
    TimePayload,
    dump_payload_json,
    validate_payload,
    validate_payload_json,
)
from aln_feeder.domain.times import TimeOfDay


@dataclass(frozen=True)
class Meal:
    """One-shot meal used to trigger an immediate feed."""

    amount: Amount

    def __post_init__(self) -> None:
        _check_type("amount", self.amount, Amount)

    def encode(self) -> dict[str, object]:
        """Return the JSON-compatible payload."""
        return MEAL_ADAPTER.dump_python(MealPayload(quantity=self.amount.value))

    def to_json(self) -> str:
        """Return compact JSON text."""
        return dump_payload_json(MEAL_ADAPTER, MealPayload(quantity=self.amount.value))

    @classmethod
    def decode(cls, data: object) -> Self:
        """Build a meal from decoded JSON data."""
        payload = validate_payload(MEAL_ADAPTER, data, "meal")
        return cls(amount=Amount(payload.quantity))

    @classmethod
    def from_json(cls, text: str | bytes) -> Self:
        """Build a meal from JSON text."""
        payload = validate_payload_json(MEAL_ADAPTER, text, "meal")
        return cls(amount=Amount(payload.quantity))


@total_ordering
@dataclass(frozen=True, eq=False)
class ScheduledMeal:
    """Recurring meal in a feeding plan.

    Meals compare and hash by ``(time, amount)`` only. ``enabled`` and ``id``
    never take part, so two meals differing only in ``enabled`` are equal
    while remaining distinct plan entries. ``id`` is never serialized; a
    decoded meal always gets a fresh one.
    """

    amount: Amount
    time: TimeOfDay
    enabled: bool = True
    id: UUID = field(default_factory=uuid4, repr=False)

    def __post_init__(self) -> None:
        _check_type("amount", self.amount, Amount)
        _check_type("time", self.time, TimeOfDay)
        _check_type("enabled", self.enabled, bool)

    @classmethod
    def from_timestamp(
        cls, amount: Amount, instant: datetime, enabled: bool = True
    ) -> Self:
        """Build a meal scheduled at the time of day of an instant."""
        return cls(
            amount=amount, time=TimeOfDay.from_timestamp(instant), enabled=enabled
        )

    def with_changes(
        self,
        *,
        amount: Amount | None = None,
        time: TimeOfDay | None = None,
        enabled: bool | None = None,
    ) -> Self:
        """Return a copy with new content and the same identity."""
        return replace(
            self,
            amount=self.amount if amount is None else amount,
            time=self.time if time is None else time,
            enabled=self.enabled if enabled is None else enabled,
        )

    def sort_key(self) -> tuple[TimeOfDay, Amount]:
        """Return the key meals are compared by."""
        return (self.time, self.amount)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScheduledMeal):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ScheduledMeal):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return hash(self.sort_key())

    def encode(self) -> dict[str, object]:
        """Return the JSON-compatible payload."""
        return SCHEDULED_MEAL_ADAPTER.dump_python(self.to_payload())

    def to_json(self) -> str:
        """Return compact JSON text in backend key order."""
        return dump_payload_json(SCHEDULED_MEAL_ADAPTER, self.to_payload())

    @classmethod
    def decode(cls, data: object) -> Self:
        """Build a meal from decoded JSON data."""
        payload = validate_payload(SCHEDULED_MEAL_ADAPTER, data, "scheduled meal")
        return cls.from_payload(payload)

    @classmethod
    def from_json(cls, text: str | bytes) -> Self:
        """Build a meal from JSON text."""
        payload = validate_payload_json(SCHEDULED_MEAL_ADAPTER, text, "scheduled meal")
        return cls.from_payload(payload)

    def to_payload(self) -> ScheduledMealPayload:
        """Return the wire payload model."""
        return ScheduledMealPayload(
            enabled=self.enabled,
            quantity=self.amount.value,
            time=TimePayload(
                hours=self.time.hour.value, minutes=self.time.minute.value
            ),
        )

    @classmethod
    def from_payload(cls, payload: ScheduledMealPayload) -> Self:
        """Build a meal from a validated wire payload."""
        return cls(
            amount=Amount(payload.quantity),
            time=TimeOfDay.of(payload.time.hours, payload.time.minutes),
            enabled=payload.enabled,
        )


def _check_type(name: str, value: object, expected: type) -> None:
    if not isinstance(value, expected):
        raise TypeError(
            f"{name} expects {expected.__name__}, got {type(value).__name__}"
        )
