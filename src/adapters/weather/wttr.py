"""Weather provider: wttr.in (JSON API, `format=j1`).

Foreign shape (abridged):

    {"current_condition": [{"temp_C": "14", "humidity": "72",
                            "windspeedKmph": "11",
                            "weatherDesc": [{"value": "Partly cloudy"}]}],
     "nearest_area": [...]}

Every value is a string and the current observation is wrapped in a list.
`WttrClient` speaks that shape and is never changed to fit the Core;
`WttrWeatherAdapter` is the only place that translates it.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import WeatherData
from core.errors import AdapterTranslationError
from core.interfaces.weather import WeatherService
from core.logging_utils import get_logger

SOURCE = "wttr"

logger = get_logger(__name__)


class WttrClient:
    """Async client for wttr.in. Returns the raw JSON payload."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch_current(self, city: str) -> dict[str, Any]:
        """GET `/{city}?format=j1`; HTTP errors raise `httpx.HTTPStatusError`."""

        async with build_async_client(
            self._settings,
            base_url=self._settings.wttr_base_url,
            transport=self._transport,
        ) as client:
            resp = await client.get(f"/{quote(city.strip())}", params={"format": "j1"})
            resp.raise_for_status()
            return resp.json()


def _first(value: object, what: str) -> dict[str, Any]:
    if not isinstance(value, list) or not value or not isinstance(value[0], dict):
        raise ValueError(f"'{what}' is not a non-empty list of objects")
    return value[0]


def _optional_number(raw: dict[str, Any], key: str, cast: type) -> Any:
    value = raw.get(key)
    if value in (None, ""):
        return None
    return cast(value)


def wttr_payload_to_weather(payload: object, location: str) -> WeatherData:
    """Translate a wttr.in j1 payload into `WeatherData`.

    Total: returns a fully populated value or raises
    `AdapterTranslationError`. Never a partial result.
    """

    try:
        if not isinstance(payload, dict):
            raise ValueError("payload is not a JSON object")
        current = _first(payload.get("current_condition"), "current_condition")
        if "temp_C" not in current:
            raise KeyError("temp_C")
        condition = _first(current.get("weatherDesc"), "weatherDesc").get("value")
        if not isinstance(condition, str) or not condition.strip():
            raise ValueError("weatherDesc has no text value")
        return WeatherData(
            location=location,
            temperature_c=float(current["temp_C"]),
            condition=condition.strip(),
            humidity_pct=_optional_number(current, "humidity", int),
            wind_kph=_optional_number(current, "windspeedKmph", float),
            source=SOURCE,
        )
    except KeyError as exc:
        raise AdapterTranslationError(source=SOURCE, location=location, reason=f"missing field {exc}") from exc
    except ValidationError as exc:
        raise AdapterTranslationError(source=SOURCE, location=location, reason=_first_error(exc)) from exc
    except (TypeError, ValueError) as exc:
        raise AdapterTranslationError(source=SOURCE, location=location, reason=str(exc)) from exc


def _first_error(exc: ValidationError) -> str:
    err = exc.errors(include_url=False)[0]
    field = ".".join(str(p) for p in err.get("loc", ()))
    return f"{field}: {err.get('msg')}"


class WttrWeatherAdapter(WeatherService):
    """Exposes `WttrClient` through the `WeatherService` contract."""

    def __init__(self, client: WttrClient) -> None:
        self._client = client

    @property
    def provider(self) -> WttrClient:
        return self._client

    async def query(self, location: str) -> WeatherData:
        logger.debug("wttr: querying %r", location)
        # Failures/cancellation of the fetch propagate unchanged.
        payload = await self._client.fetch_current(location)
        try:
            return wttr_payload_to_weather(payload, location)
        except AdapterTranslationError as exc:
            logger.warning("%s", exc)
            raise
