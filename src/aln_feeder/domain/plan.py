"""Feeding plan: the sorted set of scheduled meals of one feeder."""

from bisect import bisect_right
from collections.abc import Iterable, Iterator
from typing import Self

from aln_feeder.domain.errors import (
    DuplicateMealError,
    MealNotFoundError,
    TooManyMealsError,
)
from aln_feeder.domain.meals import ScheduledMeal
from aln_feeder.domain.payloads import (
    PLAN_ADAPTER,
    ScheduledMealPayload,
    dump_payload_json,
    validate_payload,
    validate_payload_json,
)

MAX_MEALS = 10


class FeedingPlan:
    """Ordered collection of at most ``MAX_MEALS`` scheduled meals.

    Meals are kept sorted by time then amount and are located by identity,
    so structurally equal meals can coexist and be updated independently.
    Not safe for concurrent mutation; a single owner is expected.
    """

    def __init__(self, meals: Iterable[ScheduledMeal] = ()) -> None:
        self._meals: list[ScheduledMeal] = []
        for meal in meals:
            self.add(meal)

    def __len__(self) -> int:
        return len(self._meals)

    def __getitem__(self, index: int) -> ScheduledMeal:
        return self._meals[index]

    def __iter__(self) -> Iterator[ScheduledMeal]:
        return iter(tuple(self._meals))

    def __contains__(self, meal: object) -> bool:
        return isinstance(meal, ScheduledMeal) and self._index_of(meal) is not None

    def __repr__(self) -> str:
        return f"FeedingPlan({self._meals!r})"

    @property
    def is_full(self) -> bool:
        """Return True when no more meals can be added."""
        return len(self._meals) >= MAX_MEALS

    def add(self, meal: ScheduledMeal) -> None:
        """Insert a meal at its sorted position."""
        if self._index_of(meal) is not None:
            raise DuplicateMealError(f"Meal {meal.id} is already in the plan")
        if self.is_full:
            raise TooManyMealsError(f"A feeding plan holds at most {MAX_MEALS} meals")
        self._meals.insert(bisect_right(self._meals, meal), meal)

    def update(self, meal: ScheduledMeal) -> None:
        """Replace the meal sharing this meal's identity."""
        index = self._require_index(meal)
        self._meals[index] = meal
        # At most MAX_MEALS entries, a full sort is fine.
        self._meals.sort()

    def delete(self, meal: ScheduledMeal) -> None:
        """Remove the meal sharing this meal's identity."""
        del self._meals[self._require_index(meal)]

    def encode(self) -> list[dict[str, object]]:
        """Return the JSON-compatible payload."""
        return PLAN_ADAPTER.dump_python(self._to_payload())

    def to_json(self) -> str:
        """Return compact JSON text."""
        return dump_payload_json(PLAN_ADAPTER, self._to_payload())

    @classmethod
    def decode(cls, data: object) -> Self:
        """Build a plan from decoded JSON data, sorting it."""
        return cls._from_payload(validate_payload(PLAN_ADAPTER, data, "feeding plan"))

    @classmethod
    def from_json(cls, text: str | bytes) -> Self:
        """Build a plan from JSON text, sorting it."""
        return cls._from_payload(
            validate_payload_json(PLAN_ADAPTER, text, "feeding plan")
        )

    def _index_of(self, meal: ScheduledMeal) -> int | None:
        for index, existing in enumerate(self._meals):
            if existing.id == meal.id:
                return index
        return None

    def _require_index(self, meal: ScheduledMeal) -> int:
        index = self._index_of(meal)
        if index is None:
            raise MealNotFoundError(f"Meal {meal.id} is not in the plan")
        return index

    def _to_payload(self) -> list[ScheduledMealPayload]:
        return [meal.to_payload() for meal in self._meals]

    @classmethod
    def _from_payload(cls, payloads: list[ScheduledMealPayload]) -> Self:
        if len(payloads) > MAX_MEALS:
            raise TooManyMealsError(
                f"Feeding plan payload has {len(payloads)} meals, "
                f"at most {MAX_MEALS} allowed"
            )
        return cls(ScheduledMeal.from_payload(payload) for payload in payloads)
