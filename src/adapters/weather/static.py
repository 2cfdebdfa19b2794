"""Native `WeatherService` backed by a mapping (no adapter involved).

Used for offline CLI runs and as the reference implementation callers can
swap with any adapter.
"""

from __future__ import annotations

from collections.abc import Mapping

from core.domain.models import WeatherData
from core.interfaces.weather import WeatherService

SOURCE = "static"


class StaticWeatherService(WeatherService):
    def __init__(self, entries: Mapping[str, WeatherData] | None = None) -> None:
        self._entries = {k.strip().lower(): v for k, v in (entries or {}).items()}

    async def query(self, location: str) -> WeatherData:
        try:
            entry = self._entries[location.strip().lower()]
        except KeyError:
            raise LookupError(f"no static weather for {location!r}") from None
        return entry.model_copy(update={"location": location})

    @classmethod
    def sample(cls) -> "StaticWeatherService":
        return cls(
            {
                "paris": WeatherData(location="Paris", temperature_c=14.0, condition="Overcast", humidity_pct=81, wind_kph=10.0, source=SOURCE),
                "london": WeatherData(location="London", temperature_c=10.0, condition="Rain", humidity_pct=88, wind_kph=18.0, source=SOURCE),
                "tokyo": WeatherData(location="Tokyo", temperature_c=24.0, condition="Partly cloudy", humidity_pct=70, wind_kph=7.0, source=SOURCE),
            }
        )
