"""Weather provider: legacy station feed (synchronous, imperial units).

The feed predates the `WeatherService` contract:
- keyed by station code (`"LFPG"`), not by location name;
- returns `StationReading` in Fahrenheit / mph with a numeric condition code;
- blocks the caller and raises `LookupError` for unknown stations.

`StationWeatherAdapter` translates both ways: location name -> station code
on the request side, reading -> `WeatherData` on the response side.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import ValidationError

from core.domain.models import WeatherData
from core.domain.units import fahrenheit_to_celsius, mph_to_kph
from core.errors import AdapterTranslationError
from core.interfaces.weather import WeatherService
from core.logging_utils import get_logger

SOURCE = "station"

logger = get_logger(__name__)

CONDITION_CODES: dict[int, str] = {
    0: "Clear",
    1: "Partly cloudy",
    2: "Overcast",
    3: "Fog",
    4: "Drizzle",
    5: "Rain",
    6: "Snow",
    7: "Thunderstorm",
}

DEFAULT_STATIONS: dict[str, str] = {
    "paris": "LFPG",
    "london": "EGLL",
    "new york": "KJFK",
    "tokyo": "RJTT",
    "madrid": "LEMD",
}


@dataclass(frozen=True)
class StationReading:
    station: str
    temp_f: float | None
    wind_mph: float | None
    relative_humidity: float | None
    condition_code: int | None


class StationFeed:
    """In-process stand-in for a vendor SDK: readings by station code."""

    def __init__(self, readings: Mapping[str, StationReading] | None = None) -> None:
        self._readings: dict[str, StationReading] = dict(readings or {})

    def publish(self, reading: StationReading) -> None:
        self._readings[reading.station.upper()] = reading

    def get_reading(self, station_code: str) -> StationReading:
        try:
            return self._readings[station_code.upper()]
        except KeyError:
            raise LookupError(f"unknown station: {station_code}") from None

    @classmethod
    def sample(cls) -> "StationFeed":
        """Feed preloaded with fixed readings for the default stations."""

        return cls(
            {
                "LFPG": StationReading("LFPG", 57.2, 6.2, 81.0, 2),
                "EGLL": StationReading("EGLL", 50.0, 11.2, 88.0, 5),
                "KJFK": StationReading("KJFK", 68.0, 8.7, 55.0, 0),
                "RJTT": StationReading("RJTT", 75.2, 4.3, 70.0, 1),
                "LEMD": StationReading("LEMD", 82.4, 3.1, 30.0, 0),
            }
        )


def station_reading_to_weather(reading: StationReading, location: str) -> WeatherData:
    """Translate a `StationReading` into `WeatherData` (°F -> °C, mph -> km/h)."""

    if reading.temp_f is None:
        raise AdapterTranslationError(source=SOURCE, location=location, reason="reading has no temperature")
    if reading.condition_code not in CONDITION_CODES:
        raise AdapterTranslationError(
            source=SOURCE,
            location=location,
            reason=f"unknown condition code {reading.condition_code!r}",
        )
    try:
        return WeatherData(
            location=location,
            temperature_c=round(fahrenheit_to_celsius(reading.temp_f), 1),
            condition=CONDITION_CODES[reading.condition_code],
            humidity_pct=None if reading.relative_humidity is None else round(reading.relative_humidity),
            wind_kph=None if reading.wind_mph is None else round(mph_to_kph(reading.wind_mph), 1),
            source=SOURCE,
        )
    except ValidationError as exc:
        err = exc.errors(include_url=False)[0]
        field = ".".join(str(p) for p in err.get("loc", ()))
        raise AdapterTranslationError(source=SOURCE, location=location, reason=f"{field}: {err.get('msg')}") from exc
    except (TypeError, ValueError, OverflowError) as exc:
        # round() rejects nan and inf; arithmetic rejects non-numbers.
        raise AdapterTranslationError(source=SOURCE, location=location, reason=f"non-numeric reading: {exc}") from exc


class StationWeatherAdapter(WeatherService):
    """Exposes a synchronous `StationFeed` through the async contract."""

    def __init__(self, feed: StationFeed, *, stations: Mapping[str, str] | None = None) -> None:
        self._feed = feed
        self._stations = {k.strip().lower(): v for k, v in (stations or DEFAULT_STATIONS).items()}

    @property
    def provider(self) -> StationFeed:
        return self._feed

    def station_for(self, location: str) -> str:
        try:
            return self._stations[location.strip().lower()]
        except KeyError:
            raise AdapterTranslationError(
                source=SOURCE,
                location=location,
                reason="no station mapped for this location",
            ) from None

    async def query(self, location: str) -> WeatherData:
        station = self.station_for(location)
        logger.debug("station: %r -> %s", location, station)
        # LookupError from the feed propagates unchanged.
        reading = self._feed.get_reading(station)
        try:
            return station_reading_to_weather(reading, location)
        except AdapterTranslationError as exc:
            logger.warning("%s", exc)
            raise
