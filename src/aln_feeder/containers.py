"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from aln_feeder.adapters.feeder_client import FeederClient, HttpxFeederClient
from aln_feeder.app_logging import configure_logging
from aln_feeder.config import Settings
from aln_feeder.services.planning import PlanningService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    feeder_client: FeederClient
    planning_service: PlanningService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    configure_logging()
    resolved_settings = settings or Settings()
    feeder_client = HttpxFeederClient.create(
        base_url=resolved_settings.feeder_api_base_url,
        timeout=resolved_settings.feeder_api_timeout_seconds,
    )
    planning_service = PlanningService(feeder_client)

    async def close_resources() -> None:
        await feeder_client.close()

    return AppContainer(
        settings=resolved_settings,
        feeder_client=feeder_client,
        planning_service=planning_service,
        close_resources=close_resources,
    )
