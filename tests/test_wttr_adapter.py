from __future__ import annotations

import asyncio
import copy
from typing import Any

import httpx
import pytest

from adapters.weather.wttr import WttrClient, WttrWeatherAdapter, wttr_payload_to_weather
from core.config import AppSettings
from core.domain.models import WeatherData
from core.errors import AdapterTranslationError
from core.interfaces.weather import WeatherService

PARIS_PAYLOAD: dict[str, Any] = {
    "current_condition": [
        {
            "temp_C": "14",
            "humidity": "72",
            "windspeedKmph": "11",
            "weatherDesc": [{"value": "Partly cloudy"}],
        }
    ],
    "nearest_area": [{"areaName": [{"value": "Paris"}]}],
}

PARIS_EXPECTED = WeatherData(
    location="Paris",
    temperature_c=14.0,
    condition="Partly cloudy",
    humidity_pct=72,
    wind_kph=11.0,
    source="wttr",
)


class StubWttrClient(WttrClient):
    """Foreign provider stub returning fixed payloads per city."""

    def __init__(self, payloads: dict[str, Any], error: BaseException | None = None) -> None:
        super().__init__(AppSettings(_env_file=None))
        self.payloads = payloads
        self.error = error
        self.calls: list[str] = []

    async def fetch_current(self, city: str) -> dict[str, Any]:
        self.calls.append(city)
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.payloads[city])


def test_adapter_satisfies_contract() -> None:
    adapter = WttrWeatherAdapter(StubWttrClient({}))
    assert isinstance(adapter, WeatherService)


@pytest.mark.anyio
async def test_query_translates_foreign_response() -> None:
    client = StubWttrClient({"Paris": PARIS_PAYLOAD})
    adapter = WttrWeatherAdapter(client)

    result = await adapter.query("Paris")

    assert result == PARIS_EXPECTED
    assert client.calls == ["Paris"]
    assert await adapter.query("Paris") == result
    assert adapter.provider is client


def test_conversion_tolerates_missing_optional_fields() -> None:
    payload = copy.deepcopy(PARIS_PAYLOAD)
    del payload["current_condition"][0]["humidity"]
    payload["current_condition"][0]["windspeedKmph"] = ""
    result = wttr_payload_to_weather(payload, "Paris")
    assert result.humidity_pct is None
    assert result.wind_kph is None
    assert result.temperature_c == 14.0


@pytest.mark.parametrize(
    ("mutate", "reason"),
    [
        (lambda p: p.pop("current_condition"), "current_condition"),
        (lambda p: p.update(current_condition=[]), "current_condition"),
        (lambda p: p["current_condition"][0].pop("temp_C"), "temp_C"),
        (lambda p: p["current_condition"][0].update(temp_C="warm"), "warm"),
        (lambda p: p["current_condition"][0].update(weatherDesc=[]), "weatherDesc"),
        (lambda p: p["current_condition"][0].update(weatherDesc=[{"value": " "}]), "weatherDesc"),
        (lambda p: p["current_condition"][0].update(humidity="140"), "humidity_pct"),
        (lambda p: p["current_condition"][0].update(temp_C="500"), "temperature_c"),
    ],
)
def test_conversion_fails_instead_of_partial_result(mutate: Any, reason: str) -> None:
    payload = copy.deepcopy(PARIS_PAYLOAD)
    mutate(payload)
    with pytest.raises(AdapterTranslationError) as excinfo:
        wttr_payload_to_weather(payload, "Paris")
    err = excinfo.value
    assert err.source == "wttr"
    assert err.location == "Paris"
    assert reason in err.reason
    assert err.__cause__ is not None


def test_conversion_rejects_non_object_payload() -> None:
    with pytest.raises(AdapterTranslationError, match="not a JSON object"):
        wttr_payload_to_weather(["unexpected"], "Paris")


@pytest.mark.anyio
async def test_query_surfaces_translation_error() -> None:
    adapter = WttrWeatherAdapter(StubWttrClient({"Paris": {"current_condition": []}}))
    with pytest.raises(AdapterTranslationError):
        await adapter.query("Paris")


@pytest.mark.anyio
async def test_foreign_failure_propagates_unchanged() -> None:
    request = httpx.Request("GET", "https://wttr.in/Paris")
    boom = httpx.HTTPStatusError("503", request=request, response=httpx.Response(503, request=request))
    adapter = WttrWeatherAdapter(StubWttrClient({}, error=boom))
    with pytest.raises(httpx.HTTPStatusError) as excinfo:
        await adapter.query("Paris")
    assert excinfo.value is boom


@pytest.mark.anyio
async def test_foreign_cancellation_propagates() -> None:
    adapter = WttrWeatherAdapter(StubWttrClient({}, error=asyncio.CancelledError()))
    with pytest.raises(asyncio.CancelledError):
        await adapter.query("Paris")


@pytest.mark.anyio
async def test_client_requests_j1_format_over_http() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=PARIS_PAYLOAD)

    settings = AppSettings(_env_file=None, user_agent="tests/1.0")
    adapter = WttrWeatherAdapter(WttrClient(settings, transport=httpx.MockTransport(handler)))

    result = await adapter.query("New York")

    assert result.location == "New York"
    assert seen[0].url.path == "/New York"
    assert seen[0].url.params["format"] == "j1"
    assert seen[0].headers["User-Agent"] == "tests/1.0"


@pytest.mark.anyio
async def test_client_raises_on_http_error() -> None:
    settings = AppSettings(_env_file=None)
    client = WttrClient(settings, transport=httpx.MockTransport(lambda _: httpx.Response(404)))
    with pytest.raises(httpx.HTTPStatusError):
        await WttrWeatherAdapter(client).query("Atlantis")
