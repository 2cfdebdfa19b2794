"""Weather services: native implementation plus adapters over foreign providers.

Every service here satisfies `core.interfaces.weather.WeatherService`.
Callers pick one by name through `build_weather_registry` and never see the
provider behind it.
"""

from __future__ import annotations

import httpx

from adapters.weather.static import StaticWeatherService
from adapters.weather.station import StationFeed, StationReading, StationWeatherAdapter
from adapters.weather.wttr import WttrClient, WttrWeatherAdapter
from core.config import AppSettings
from core.interfaces.weather import WeatherService
from core.services.registry import Registry


def build_weather_registry(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Registry[str, WeatherService]:
    """Registry of weather services keyed by provider name."""

    settings = settings or AppSettings()
    registry: Registry[str, WeatherService] = Registry("weather")
    registry.register("wttr", lambda: WttrWeatherAdapter(WttrClient(settings, transport=transport)))
    registry.register("station", lambda: StationWeatherAdapter(StationFeed.sample()))
    registry.register("static", StaticWeatherService.sample)
    return registry


__all__ = [
    "StaticWeatherService",
    "StationFeed",
    "StationReading",
    "StationWeatherAdapter",
    "WttrClient",
    "WttrWeatherAdapter",
    "build_weather_registry",
]
