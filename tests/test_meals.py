"""Tests for meal entities."""

import json
import random
from datetime import datetime, timedelta, timezone

import pytest

from aln_feeder.domain.bounds import Amount, Hours, Minutes
from aln_feeder.domain.errors import OutOfBoundsError, ShapeMismatchError
from aln_feeder.domain.meals import Meal, ScheduledMeal
from aln_feeder.domain.times import TimeOfDay
from tests.conftest import make_meal


def test_decode_meal() -> None:
    meal = Meal.decode({"quantity": 32})

    assert meal.amount.value == 32


@pytest.mark.parametrize("payload", [{"quantity": 4}, {"quantity": 151}])
def test_decode_meal_out_of_bounds(payload) -> None:
    with pytest.raises(OutOfBoundsError):
        Meal.decode(payload)


@pytest.mark.parametrize("payload", [{"quantity": {"_value": 12}}, {}, {"amount": 13}])
def test_decode_meal_wrong_shape(payload) -> None:
    with pytest.raises(ShapeMismatchError):
        Meal.decode(payload)


def test_encode_meal() -> None:
    meal = Meal(amount=Amount(42))

    assert meal.encode() == {"quantity": 42}
    assert meal.to_json() == '{"quantity":42}'
    assert Meal.from_json(meal.to_json()) == meal


def test_decode_scheduled_meal() -> None:
    meal = ScheduledMeal.decode(
        json.loads(
            '{"time": { "hours": 12, "minutes": 42 }, "quantity": 15, "enabled": true}'
        )
    )

    assert meal.time.hour.value == 12
    assert meal.time.minute.value == 42
    assert meal.amount.value == 15
    assert meal.enabled is True


@pytest.mark.parametrize(
    "payload",
    [
        {"quantity": 15, "time": {"hours": 12, "minutes": 42}},
        {"enabled": True, "time": {"hours": 12, "minutes": 42}},
        {"enabled": True, "quantity": 15},
        {"enabled": "yes", "quantity": 15, "time": {"hours": 12, "minutes": 42}},
        {"enabled": True, "quantity": {"_value": 15}, "time": {"hours": 1}},
        {"enabled": True, "quantity": 15, "time": {"hours": {"_value": 1}}},
        {"enabled": True, "quantity": 15, "time": "12:42"},
    ],
)
def test_decode_scheduled_meal_wrong_shape(payload) -> None:
    with pytest.raises(ShapeMismatchError):
        ScheduledMeal.decode(payload)


@pytest.mark.parametrize(
    "payload",
    [
        {"enabled": True, "quantity": 151, "time": {"hours": 12, "minutes": 42}},
        {"enabled": False, "quantity": 15, "time": {"hours": 24, "minutes": 0}},
    ],
)
def test_decode_scheduled_meal_out_of_bounds(payload) -> None:
    with pytest.raises(OutOfBoundsError):
        ScheduledMeal.decode(payload)


def test_encode_scheduled_meal() -> None:
    time = TimeOfDay(hour=Hours(13), minute=Minutes(23))
    meal = ScheduledMeal(amount=Amount(15), time=time, enabled=True)

    assert (
        meal.to_json()
        == '{"enabled":true,"quantity":15,"time":{"hours":13,"minutes":23}}'
    )
    assert list(meal.encode()) == ["enabled", "quantity", "time"]
    assert "id" not in meal.encode()


def test_scheduled_meal_round_trip_gets_new_identity() -> None:
    meal = make_meal(7, 30, amount=40, enabled=False)

    decoded = ScheduledMeal.from_json(meal.to_json())

    assert decoded == meal
    assert decoded.enabled is False
    assert decoded.id != meal.id


def test_equality_ignores_enabled_and_identity() -> None:
    enabled = make_meal(8, enabled=True)
    disabled = make_meal(8, enabled=False)

    assert enabled == disabled
    assert hash(enabled) == hash(disabled)
    assert enabled.id != disabled.id
    assert make_meal(8, amount=21) != enabled
    assert make_meal(8, 1) != enabled


def test_ordering_by_time_then_amount() -> None:
    assert make_meal(8, amount=100) < make_meal(9, amount=10)
    assert make_meal(8, amount=10) < make_meal(8, amount=11)
    assert make_meal(8, 30) > make_meal(8, 15)
    assert make_meal(8, enabled=False) <= make_meal(8, enabled=True)


def test_sorting_is_independent_of_initial_order() -> None:
    meals = [
        make_meal(hour, minute, amount)
        for hour in (6, 12, 18)
        for minute in (0, 45)
        for amount in (10, 10, 50)
    ]
    expected = sorted(meal.sort_key() for meal in meals)

    for seed in range(5):
        shuffled = meals[:]
        random.Random(seed).shuffle(shuffled)
        assert [meal.sort_key() for meal in sorted(shuffled)] == expected


def test_with_changes_keeps_identity() -> None:
    meal = make_meal(8)

    changed = meal.with_changes(amount=Amount(60), enabled=False)

    assert changed.id == meal.id
    assert changed.amount == Amount(60)
    assert changed.time == meal.time
    assert changed.enabled is False
    assert meal.amount == Amount(20)


def test_scheduled_meal_from_timestamp() -> None:
    instant = datetime(2024, 2, 2, 9, 45, 30, tzinfo=timezone(timedelta(hours=-5)))

    meal = ScheduledMeal.from_timestamp(Amount(25), instant, enabled=False)

    assert meal.time == TimeOfDay.of(14, 45)
    assert meal.amount == Amount(25)
    assert meal.enabled is False


def test_meals_reject_unvalidated_fields() -> None:
    time = TimeOfDay.of(8, 0)

    with pytest.raises(TypeError):
        ScheduledMeal(amount=20, time=time)
    with pytest.raises(TypeError):
        ScheduledMeal(amount=Amount(20), time=(8, 0))
    with pytest.raises(TypeError):
        ScheduledMeal(amount=Amount(20), time=time, enabled="yes")
    with pytest.raises(TypeError):
        Meal(amount=20)
