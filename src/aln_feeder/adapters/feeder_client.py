"""Feeder backend API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class FeederClient(Protocol):
    """Interface for feeder backend interactions."""

    async def trigger_meal(self, feeder_id: int, payload: dict[str, object]) -> None:
        """Ask the feeder to serve a one-shot meal now."""

    async def fetch_planning(self, feeder_id: int) -> object:
        """Fetch the feeder's planning and return raw API data."""

    async def push_planning(
        self, feeder_id: int, payload: list[dict[str, object]]
    ) -> None:
        """Replace the feeder's planning."""


@dataclass
class HttpxFeederClient(FeederClient):
    """HTTPX-backed feeder client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10.0

    @classmethod
    def create(cls, base_url: str, timeout: float = 10.0) -> "HttpxFeederClient":
        """Create a feeder client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient(), timeout=timeout)

    async def trigger_meal(self, feeder_id: int, payload: dict[str, object]) -> None:
        """Trigger a meal on the feeder."""
        response = await self.http_client.post(
            self._url(f"api/feeder/feed/{feeder_id}"),
            json=payload,
            timeout=self.timeout,
        )
        response.raise_for_status()

    async def fetch_planning(self, feeder_id: int) -> object:
        """Fetch the feeder planning."""
        response = await self.http_client.get(
            self._url(f"api/feeder/planning/{feeder_id}"),
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    async def push_planning(
        self, feeder_id: int, payload: list[dict[str, object]]
    ) -> None:
        """Replace the feeder planning."""
        response = await self.http_client.put(
            self._url(f"api/feeder/planning/{feeder_id}"),
            json=payload,
            timeout=self.timeout,
        )
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    def _url(self, subpath: str) -> str:
        return f"{self.base_url.rstrip('/')}/{subpath}"
