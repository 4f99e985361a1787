"""Errors raised by the feeder domain model."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aln_feeder.domain.bounds import IntegerBounds


class FeederDataError(Exception):
    """Base error for invalid feeder data or plan operations.

    Attributes:
        message: human-readable message
        code: machine-readable error code
    """

    code = "feeder_data_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, object]:
        """Return a payload collaborators can hand to their callers."""
        return {"code": self.code, "message": self.message}

    def __str__(self) -> str:
        return self.message


class OutOfBoundsError(FeederDataError):
    """Raised when a numeric value falls outside its declared range."""

    code = "out_of_bounds"

    def __init__(self, value: int, bounds: "IntegerBounds") -> None:
        super().__init__(
            f"{bounds.name} value {value} is out of bounds "
            f"[{bounds.inbound_min}, {bounds.outbound_max})"
        )
        self.value = value
        self.bounds = bounds

    def to_dict(self) -> dict[str, object]:
        payload = super().to_dict()
        payload["value"] = self.value
        payload["kind"] = self.bounds.name
        return payload


class ShapeMismatchError(FeederDataError):
    """Raised when a JSON payload does not have the expected structure."""

    code = "shape_mismatch"


class FeedingPlanError(FeederDataError):
    """Base error for feeding plan mutations."""

    code = "feeding_plan_error"


class DuplicateMealError(FeedingPlanError):
    """Raised when adding a meal whose identity is already in the plan."""

    code = "duplicate_meal"


class MealNotFoundError(FeedingPlanError):
    """Raised when updating or deleting a meal absent from the plan."""

    code = "meal_not_found"


class TooManyMealsError(FeedingPlanError):
    """Raised when a plan would exceed its meal capacity."""

    code = "too_many_meals"
