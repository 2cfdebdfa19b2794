"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  Core to I/O libraries.
- `frozen=True` gives builders an immutable result type for free.

Note:
- These models describe *what* the data is, not *how* it is obtained.
"""

from __future__ import annotations

from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.units import Units, celsius_to_fahrenheit, kph_to_mph


def _check_http_url(value: str | None) -> str | None:
    if value is None:
        return None
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("must be an absolute http(s) URL")
    return value


class UserProfile(BaseModel):
    """A user's public profile, assembled by `ProfileBuilder`.

    Why immutable:
    - The builder can keep accumulating after `build()`; results handed out
      earlier must not change underneath their owners.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    username: str = Field(
        ...,
        min_length=1,
        max_length=64,
        pattern=r"^\S+$",
        description="Handle shown on the profile; no whitespace.",
    )
    display_name: str | None = Field(
        default=None,
        min_length=1,
        max_length=128,
        description="Human readable name, if different from the handle.",
    )
    bio: str = Field(
        default="",
        max_length=2_000,
        description="Free-form biography.",
    )
    avatar_url: str | None = Field(
        default=None,
        description="Public URL of the avatar image.",
    )
    website: str | None = Field(
        default=None,
        description="Personal website.",
    )
    location: str | None = Field(
        default=None,
        max_length=128,
        description="Free-form location (city, region).",
    )
    tags: tuple[str, ...] = Field(
        default=(),
        description="Interests/labels shown as chips.",
    )

    @field_validator("avatar_url", "website")
    @classmethod
    def _validate_urls(cls, value: str | None) -> str | None:
        return _check_http_url(value)

    @property
    def title(self) -> str:
        return self.display_name or f"@{self.username}"


class CardAction(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    label: str = Field(..., min_length=1, max_length=32)
    target: str = Field(..., min_length=1, description="Route or URL opened on tap.")


class ProfileCard(BaseModel):
    """A card widget configuration, assembled by `CardBuilder`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str = Field(..., min_length=1, max_length=120)
    subtitle: str | None = Field(default=None, max_length=240)
    image_url: str | None = Field(default=None)
    actions: tuple[CardAction, ...] = Field(default=())
    elevation: int = Field(
        default=1,
        ge=0,
        le=24,
        description="Shadow depth in density-independent pixels.",
    )

    @field_validator("image_url")
    @classmethod
    def _validate_image_url(cls, value: str | None) -> str | None:
        return _check_http_url(value)


class WeatherData(BaseModel):
    """Target-shaped response of every `WeatherService`.

    Why a single shape:
    - Callers format, compare and export weather without knowing which
      provider (or adapter) answered.
    - Units are fixed (metric) at the boundary; conversion for display is
      done with `temperature_in` / `wind_in`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    location: str = Field(..., min_length=1, description="Location as requested by the caller.")
    temperature_c: float = Field(..., ge=-100.0, le=70.0)
    condition: str = Field(..., min_length=1, description="Human readable condition (e.g. 'Light rain').")
    humidity_pct: int | None = Field(default=None, ge=0, le=100)
    wind_kph: float | None = Field(default=None, ge=0.0)
    source: str = Field(..., min_length=1, description="Name of the service that produced the value.")

    def temperature_in(self, units: Units) -> float:
        if units is Units.IMPERIAL:
            return round(celsius_to_fahrenheit(self.temperature_c), 1)
        return self.temperature_c

    def wind_in(self, units: Units) -> float | None:
        if self.wind_kph is None:
            return None
        if units is Units.IMPERIAL:
            return round(kph_to_mph(self.wind_kph), 1)
        return self.wind_kph
