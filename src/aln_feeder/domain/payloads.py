"""Pydantic models for feeder wire payloads."""

from typing import TypeVar

from pydantic import BaseModel, StrictBool, StrictInt, TypeAdapter, ValidationError

from aln_feeder.domain.errors import ShapeMismatchError

T = TypeVar("T")


class TimePayload(BaseModel):
    """Time of day payload."""

    hours: StrictInt
    minutes: StrictInt


class MealPayload(BaseModel):
    """One-shot meal payload."""

    quantity: StrictInt


class ScheduledMealPayload(BaseModel):
    """Scheduled meal payload, fields in backend key order."""

    enabled: StrictBool
    quantity: StrictInt
    time: TimePayload


INTEGER_ADAPTER = TypeAdapter(StrictInt)
TIME_ADAPTER = TypeAdapter(TimePayload)
MEAL_ADAPTER = TypeAdapter(MealPayload)
SCHEDULED_MEAL_ADAPTER = TypeAdapter(ScheduledMealPayload)
PLAN_ADAPTER = TypeAdapter(list[ScheduledMealPayload])


def validate_payload(adapter: TypeAdapter[T], data: object, label: str) -> T:
    """Validate decoded JSON data against a payload adapter."""
    try:
        return adapter.validate_python(data)
    except ValidationError as exc:
        raise ShapeMismatchError(_describe(label, exc)) from exc


def validate_payload_json(
    adapter: TypeAdapter[T], text: str | bytes, label: str
) -> T:
    """Validate raw JSON text against a payload adapter."""
    try:
        return adapter.validate_json(text)
    except ValidationError as exc:
        raise ShapeMismatchError(_describe(label, exc)) from exc


def dump_payload_json(adapter: TypeAdapter[T], payload: T) -> str:
    """Serialize a payload as compact JSON text."""
    return adapter.dump_json(payload).decode()


def _describe(label: str, exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"Invalid {label} payload at {location}: {first['msg']}"
