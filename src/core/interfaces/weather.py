"""Target contract for weather lookups.

Design rules:
- `query` is asynchronous because providers typically do I/O (HTTP).
  Synchronous providers are wrapped so callers always await.
- Returns exactly one `WeatherData` per location or raises. Translation
  problems surface as `AdapterTranslationError`; provider failures
  (HTTP errors, unknown station, cancellation) propagate unchanged.
- Timeouts and cancellation are the caller's policy (`asyncio.wait_for`).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import WeatherData


@runtime_checkable
class WeatherService(Protocol):
    """Stable boundary shared by native services and every adapter."""

    async def query(self, location: str) -> WeatherData:
        """Look up current conditions for `location`."""

        ...
