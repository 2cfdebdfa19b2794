"""Multi-location weather lookups over any `WeatherService`.

This module keeps the fan-out concern out of the CLI. It only depends on
the contract, so the same code runs against the native service, an adapter,
or a test double. Errors are collected per location, never dropped: each
`WeatherLookup` carries either `data` or the exception the service raised.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Iterable

from core.domain.models import WeatherData
from core.interfaces.weather import WeatherService
from core.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class WeatherLookup:
    """Outcome of one location lookup."""

    location: str
    data: WeatherData | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def dedupe_locations(locations: Iterable[str]) -> list[str]:
    """Strip blanks and case-insensitive duplicates, keeping first occurrence order."""

    seen: set[str] = set()
    out: list[str] = []
    for raw in locations:
        location = raw.strip()
        key = location.lower()
        if not location or key in seen:
            continue
        seen.add(key)
        out.append(location)
    return out


async def collect_weather(
    service: WeatherService,
    locations: Iterable[str],
    *,
    max_concurrency: int = 4,
) -> list[WeatherLookup]:
    """Query every location concurrently; results follow input order.

    Cancellation of the caller's task cancels every pending lookup and is
    re-raised (it is not recorded as a per-location error).
    """

    sem = asyncio.Semaphore(max(1, max_concurrency))

    async def lookup_one(location: str) -> WeatherLookup:
        async with sem:
            try:
                data = await service.query(location)
            except Exception as exc:
                logger.info("lookup failed for %r: %s", location, exc)
                return WeatherLookup(location=location, error=exc)
            return WeatherLookup(location=location, data=data)

    return list(await asyncio.gather(*(lookup_one(loc) for loc in dedupe_locations(locations))))
