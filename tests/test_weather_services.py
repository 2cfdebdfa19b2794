from __future__ import annotations

import asyncio

import httpx
import pytest

from adapters.weather import (
    StaticWeatherService,
    StationFeed,
    StationWeatherAdapter,
    WttrWeatherAdapter,
    build_weather_registry,
)
from core.config import AppSettings
from core.domain.models import WeatherData
from core.domain.units import Units
from core.errors import AdapterTranslationError, UnknownKey
from core.interfaces.weather import WeatherService
from core.services.weather_lookup import collect_weather, dedupe_locations


def _settings() -> AppSettings:
    return AppSettings(_env_file=None)


def test_registry_exposes_every_service_under_the_contract() -> None:
    registry = build_weather_registry(_settings())
    assert registry.keys() == ("static", "station", "wttr")
    assert isinstance(registry.create("wttr"), WttrWeatherAdapter)
    assert isinstance(registry.create("station"), StationWeatherAdapter)
    assert isinstance(registry.create("static"), StaticWeatherService)
    for name in registry.keys():
        assert isinstance(registry.create(name), WeatherService)


def test_registry_unknown_provider() -> None:
    with pytest.raises(UnknownKey, match="weather registry"):
        build_weather_registry(_settings()).create("darksky")


@pytest.mark.anyio
async def test_callers_are_polymorphic_over_services() -> None:
    # Same call, same result shape, whichever service answers.
    payload = {
        "current_condition": [
            {"temp_C": "14", "humidity": "81", "windspeedKmph": "10", "weatherDesc": [{"value": "Overcast"}]}
        ]
    }
    transport = httpx.MockTransport(lambda _: httpx.Response(200, json=payload))
    registry = build_weather_registry(_settings(), transport=transport)

    results = {name: await registry.create(name).query("Paris") for name in registry.keys()}

    for name, data in results.items():
        assert isinstance(data, WeatherData)
        assert data.source == name
        assert data.location == "Paris"
        assert data.temperature_c == 14.0
        assert data.condition == "Overcast"


@pytest.mark.anyio
async def test_static_service_unknown_location() -> None:
    with pytest.raises(LookupError):
        await StaticWeatherService.sample().query("Atlantis")


def test_dedupe_locations_keeps_first_spelling() -> None:
    assert dedupe_locations(["Paris", " paris ", "", "London", "PARIS"]) == ["Paris", "London"]


@pytest.mark.anyio
async def test_collect_weather_reports_data_and_errors_in_order() -> None:
    service = StationWeatherAdapter(StationFeed.sample())

    lookups = await collect_weather(service, ["Tokyo", "Atlantis", "Paris"], max_concurrency=2)

    assert [item.location for item in lookups] == ["Tokyo", "Atlantis", "Paris"]
    assert [item.ok for item in lookups] == [True, False, True]
    assert isinstance(lookups[1].error, AdapterTranslationError)
    assert lookups[1].data is None
    assert lookups[0].data is not None and lookups[0].data.temperature_c == 24.0


@pytest.mark.anyio
async def test_collect_weather_bounds_concurrency() -> None:
    active = 0
    peak = 0

    class SlowService:
        async def query(self, location: str) -> WeatherData:
            nonlocal active, peak
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0.01)
            active -= 1
            return WeatherData(location=location, temperature_c=1.0, condition="Clear", source="slow")

    lookups = await collect_weather(SlowService(), [f"city-{i}" for i in range(6)], max_concurrency=2)

    assert all(item.ok for item in lookups)
    assert peak == 2


@pytest.mark.anyio
async def test_collect_weather_propagates_cancellation() -> None:
    class CancelledService:
        async def query(self, location: str) -> WeatherData:
            raise asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        await collect_weather(CancelledService(), ["Paris"])


def test_weather_data_unit_conversion() -> None:
    data = WeatherData(location="Paris", temperature_c=20.0, condition="Clear", wind_kph=16.09344, source="x")
    assert data.temperature_in(Units.METRIC) == 20.0
    assert data.temperature_in(Units.IMPERIAL) == 68.0
    assert data.wind_in(Units.IMPERIAL) == 10.0
    assert data.model_copy(update={"wind_kph": None}).wind_in(Units.IMPERIAL) is None
