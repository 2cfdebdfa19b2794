"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Adapters (HTTP providers) and the CLI read config the same way.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.units import Units
from core.domain.widgets import Platform
from core.logging_utils import parse_level

APP_DIR_NAME = "construct-kit"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env file."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# construct-kit user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) keeps the Core free of parsing.
    - One configuration contract for the CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="CONSTRUCT_KIT_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level for core/adapters loggers (DEBUG, INFO, WARNING...).",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout (seconds) for HTTP providers.",
    )
    user_agent: str = Field(
        default="construct-kit/0.1 (+https://local)",
        min_length=1,
        description="User-Agent sent by HTTP providers.",
    )

    wttr_base_url: str = Field(
        default="https://wttr.in",
        min_length=8,
        description="Base URL of the wttr.in JSON API.",
    )
    weather_provider: str = Field(
        default="static",
        min_length=1,
        description="Weather service selected by default (wttr, station, static).",
    )
    weather_max_concurrency: int = Field(
        default=4,
        ge=1,
        le=64,
        description="Maximum concurrent lookups when querying several locations.",
    )

    default_units: Units = Field(
        default=Units.METRIC,
        description="Unit system for weather output (metric/imperial).",
    )
    default_platform: Platform = Field(
        default=Platform.ANDROID,
        description="Widget platform used when none is given.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if parse_level(normalized, -1) == -1:
            raise ValueError(f"unknown log level: {value}")
        return normalized

    @field_validator("default_platform", mode="before")
    @classmethod
    def _parse_platform(cls, value: object) -> object:
        if isinstance(value, str):
            return Platform.parse(value)
        return value

    @property
    def log_level_value(self) -> int:
        return parse_level(self.log_level, 30)
