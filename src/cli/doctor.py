"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.weather import build_weather_registry
from core.config import AppSettings, write_user_env_vars
from core.domain.widgets import Platform
from core.services.registry import build_widget_registry

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


def _check_widgets() -> tuple[bool, str]:
    registry = build_widget_registry()
    missing = [p.value for p in Platform if p not in registry]
    if missing:
        return False, "missing: " + ", ".join(missing)
    return True, ", ".join(p.value for p in registry.keys())


@app.command()
def run(
    offline: bool = typer.Option(False, "--offline", help="Skip the connectivity check."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="construct-kit Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Log level", "OK", settings.log_level)
    table.add_row("Default platform", "OK", settings.default_platform.value)

    ok_widgets, detail_widgets = _check_widgets()
    table.add_row("Widget registry", "OK" if ok_widgets else "FAIL", detail_widgets)

    weather = build_weather_registry(settings)
    if settings.weather_provider in weather:
        table.add_row("Weather provider", "OK", settings.weather_provider)
    else:
        table.add_row(
            "Weather provider",
            "FAIL",
            f"{settings.weather_provider!r} not in: {', '.join(weather.keys())}",
        )

    if offline:
        table.add_row("HTTP connectivity", "SKIPPED", settings.wttr_base_url)
    else:
        # Best-effort
        ok_http, detail_http = asyncio.run(_check_http(settings.wttr_base_url, settings))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command()
def configure(
    provider: str = typer.Option(..., "--provider", prompt="Weather provider", help="wttr, station or static."),
    platform: str = typer.Option("android", "--platform", prompt="Default widget platform"),
) -> None:
    """Store defaults in the user config .env (no manual editing needed)."""

    provider = provider.strip().lower()
    weather = build_weather_registry()
    if provider not in weather:
        raise typer.BadParameter(f"unknown provider {provider!r}; expected one of: {', '.join(weather.keys())}")
    try:
        platform_key = Platform.parse(platform)
    except ValueError:
        raise typer.BadParameter(f"unknown platform {platform!r}") from None

    env_path = write_user_env_vars(
        {
            "CONSTRUCT_KIT_WEATHER_PROVIDER": provider,
            "CONSTRUCT_KIT_DEFAULT_PLATFORM": platform_key.value,
        }
    )
    _console.print(f"[green]Saved config to:[/green] {env_path}")
