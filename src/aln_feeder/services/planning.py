"""Feeding plan session service."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from aln_feeder.adapters.feeder_client import FeederClient
from aln_feeder.domain.bounds import Amount
from aln_feeder.domain.errors import FeederDataError
from aln_feeder.domain.meals import Meal, ScheduledMeal
from aln_feeder.domain.plan import FeedingPlan

_logger = logging.getLogger(__name__)


@dataclass
class PlanningService:
    """Owns the in-memory feeding plans of a session and syncs them.

    Changes are applied to a copy of the cached plan, which replaces the
    cached plan only once the feeder accepted it.
    """

    client: FeederClient
    plans: dict[int, FeedingPlan] = field(default_factory=dict)

    async def feed_now(self, feeder_id: int, amount: Amount) -> None:
        """Serve a one-shot meal immediately."""
        await self.client.trigger_meal(feeder_id, Meal(amount=amount).encode())
        _logger.info("Meal triggered: feeder_id=%s grams=%s", feeder_id, amount.value)

    async def load_plan(self, feeder_id: int) -> FeedingPlan:
        """Fetch and cache the feeder's plan."""
        data = await self.client.fetch_planning(feeder_id)
        try:
            plan = FeedingPlan.decode(data)
        except FeederDataError as exc:
            _logger.warning(
                "Rejected feeding plan: feeder_id=%s code=%s: %s",
                feeder_id,
                exc.code,
                exc,
            )
            raise
        self.plans[feeder_id] = plan
        _logger.info("Feeding plan loaded: feeder_id=%s meals=%s", feeder_id, len(plan))
        return plan

    def plan_for(self, feeder_id: int) -> FeedingPlan:
        """Return the cached plan, creating an empty one if needed."""
        return self.plans.setdefault(feeder_id, FeedingPlan())

    async def schedule_meal(self, feeder_id: int, meal: ScheduledMeal) -> FeedingPlan:
        """Add a meal to the plan and push it."""
        return await self._apply(feeder_id, FeedingPlan.add, meal)

    async def reschedule_meal(
        self, feeder_id: int, meal: ScheduledMeal
    ) -> FeedingPlan:
        """Replace a planned meal and push the plan."""
        return await self._apply(feeder_id, FeedingPlan.update, meal)

    async def cancel_meal(self, feeder_id: int, meal: ScheduledMeal) -> FeedingPlan:
        """Remove a planned meal and push the plan."""
        return await self._apply(feeder_id, FeedingPlan.delete, meal)

    async def save_plan(self, feeder_id: int) -> None:
        """Push the cached plan to the feeder."""
        await self._push(feeder_id, self.plan_for(feeder_id))

    def forget(self, feeder_id: int) -> None:
        """Drop the cached plan of a feeder."""
        self.plans.pop(feeder_id, None)

    async def _apply(
        self,
        feeder_id: int,
        change: Callable[[FeedingPlan, ScheduledMeal], None],
        meal: ScheduledMeal,
    ) -> FeedingPlan:
        draft = FeedingPlan(self.plan_for(feeder_id))
        change(draft, meal)
        await self._push(feeder_id, draft)
        self.plans[feeder_id] = draft
        return draft

    async def _push(self, feeder_id: int, plan: FeedingPlan) -> None:
        try:
            await self.client.push_planning(feeder_id, plan.encode())
        except Exception as exc:
            _logger.warning(
                "Feeding plan push failed: feeder_id=%s meals=%s: %s",
                feeder_id,
                len(plan),
                exc,
            )
            raise
        _logger.info("Feeding plan pushed: feeder_id=%s meals=%s", feeder_id, len(plan))
