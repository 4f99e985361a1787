"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from aln_feeder.adapters.feeder_client import FeederClient
from aln_feeder.config import Settings
from aln_feeder.domain.bounds import Amount
from aln_feeder.domain.meals import ScheduledMeal
from aln_feeder.domain.times import TimeOfDay


@dataclass
class FakeFeederClient(FeederClient):
    """Fake feeder client that records requests."""

    planning: object = field(default_factory=list)
    triggered: list[tuple[int, dict[str, object]]] = field(default_factory=list)
    pushed: list[tuple[int, list[dict[str, object]]]] = field(default_factory=list)

    async def trigger_meal(self, feeder_id: int, payload: dict[str, object]) -> None:
        self.triggered.append((feeder_id, payload))

    async def fetch_planning(self, feeder_id: int) -> object:
        return self.planning

    async def push_planning(
        self, feeder_id: int, payload: list[dict[str, object]]
    ) -> None:
        self.pushed.append((feeder_id, payload))


def make_meal(
    hour: int, minute: int = 0, amount: int = 20, enabled: bool = True
) -> ScheduledMeal:
    """Build a scheduled meal from plain values."""
    return ScheduledMeal(
        amount=Amount(amount), time=TimeOfDay.of(hour, minute), enabled=enabled
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(feeder_api_base_url="https://feeder.test")


@pytest.fixture
def feeder_client() -> FakeFeederClient:
    return FakeFeederClient()
