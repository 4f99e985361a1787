"""Bounded integer values understood by the feeder."""

from dataclasses import dataclass
from typing import ClassVar, Self

from aln_feeder.domain.errors import OutOfBoundsError
from aln_feeder.domain.payloads import INTEGER_ADAPTER, validate_payload


@dataclass(frozen=True)
class IntegerBounds:
    """Inclusive lower and exclusive upper bound for an integer kind."""

    name: str
    inbound_min: int
    outbound_max: int

    def contains(self, value: int) -> bool:
        """Return True when the value is within bounds."""
        return self.inbound_min <= value < self.outbound_max


HOURS_BOUNDS = IntegerBounds("hours", 0, 24)
MINUTES_BOUNDS = IntegerBounds("minutes", 0, 60)
AMOUNT_BOUNDS = IntegerBounds("amount", 5, 151)


@dataclass(frozen=True, order=True)
class BoundedInteger:
    """Immutable integer validated against the bounds of its subclass.

    Subclasses only set ``bounds``. Values of different kinds never compare
    equal and cannot be ordered against each other.
    """

    bounds: ClassVar[IntegerBounds]

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"{type(self).__name__} expects an int, got {type(self.value).__name__}"
            )
        if not self.bounds.contains(self.value):
            raise OutOfBoundsError(self.value, self.bounds)

    @classmethod
    def minimum(cls) -> int:
        """Return the smallest accepted value."""
        return cls.bounds.inbound_min

    @classmethod
    def maximum(cls) -> int:
        """Return the largest accepted value."""
        return cls.bounds.outbound_max - 1

    def encode(self) -> int:
        """Return the bare integer sent over the wire."""
        return self.value

    @classmethod
    def decode(cls, data: object) -> Self:
        """Build a value from a bare JSON integer."""
        value = validate_payload(INTEGER_ADAPTER, data, cls.bounds.name)
        return cls(value)


class Hours(BoundedInteger):
    """Hour of day, 0-23."""

    bounds = HOURS_BOUNDS


class Minutes(BoundedInteger):
    """Minute of hour, 0-59."""

    bounds = MINUTES_BOUNDS


class Amount(BoundedInteger):
    """Meal amount in grams, 5-150."""

    bounds = AMOUNT_BOUNDS

    @property
    def kilograms(self) -> float:
        """Amount in kilograms, for display only."""
        return self.value / 1000
