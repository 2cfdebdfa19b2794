"""construct-kit CLI (typer + rich).

Commands are thin: they parse input, call one core component, and render
the result. Library errors (`ConstructKitError`) print in red and exit with
status 1; anything else is a bug and propagates.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.json_exporter import dump_models_json, export_model_json
from adapters.weather import build_weather_registry
from cli import doctor
from cli.ui_components import (
    build_keys_table,
    build_profile_panel,
    build_weather_table,
    build_widget_panel,
    print_banner,
)
from core.config import AppSettings
from core.domain.units import Units
from core.domain.widgets import Platform
from core.errors import ConstructKitError
from core.logging_utils import parse_level, set_level
from core.services.builder import ProfileBuilder
from core.services.registry import build_widget_registry
from core.services.weather_lookup import collect_weather

app = typer.Typer(no_args_is_help=True, help="Factories, builders and adapters for UI object construction.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True, soft_wrap=True)


def _fail(exc: Exception) -> typer.Exit:
    _err_console.print(f"[red]Error:[/red] {exc}")
    return typer.Exit(code=1)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override CONSTRUCT_KIT_LOG_LEVEL."),
) -> None:
    settings = AppSettings()
    if log_level is None:
        set_level(settings.log_level_value)
    else:
        set_level(parse_level(log_level, settings.log_level_value))


@app.command()
def widgets() -> None:
    """List the registered widget platforms."""

    registry = build_widget_registry()
    _console.print(build_keys_table("Widget platforms", registry.keys()))


@app.command()
def widget(
    platform: Optional[str] = typer.Argument(None, help="android, ios or web (default from settings)."),
    label: str = typer.Option("OK", "--label", help="Button label."),
) -> None:
    """Create a widget through the registry and render it."""

    settings = AppSettings()
    registry = build_widget_registry(label=label)
    try:
        key = Platform.parse(platform) if platform else settings.default_platform
    except ValueError:
        # Unparseable platform names are still reported as a registry miss.
        key = platform  # type: ignore[assignment]
    try:
        product = registry.create(key)
    except ConstructKitError as exc:
        raise _fail(exc) from exc
    _console.print(build_widget_panel(product))


@app.command()
def profile(
    username: Optional[str] = typer.Option(None, "--username", "-u"),
    display_name: Optional[str] = typer.Option(None, "--display-name"),
    bio: Optional[str] = typer.Option(None, "--bio"),
    avatar_url: Optional[str] = typer.Option(None, "--avatar-url"),
    website: Optional[str] = typer.Option(None, "--website"),
    location: Optional[str] = typer.Option(None, "--location"),
    tag: list[str] = typer.Option([], "--tag", help="Repeatable."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a panel."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write JSON to this path."),
) -> None:
    """Build a user profile step by step."""

    builder = ProfileBuilder()
    if username is not None:
        builder.with_username(username)
    if display_name is not None:
        builder.with_display_name(display_name)
    if bio is not None:
        builder.with_bio(bio)
    if avatar_url is not None:
        builder.with_avatar_url(avatar_url)
    if website is not None:
        builder.with_website(website)
    if location is not None:
        builder.with_location(location)
    for value in tag:
        builder.add_tag(value)

    try:
        result = builder.build()
    except ConstructKitError as exc:
        raise _fail(exc) from exc

    if output is not None:
        export_model_json(model=result, output_path=output)
    if as_json:
        _console.print_json(dump_models_json(result))
    else:
        _console.print(build_profile_panel(result))


@app.command()
def weather(
    locations: list[str] = typer.Argument(..., help="One or more locations."),
    provider: Optional[str] = typer.Option(None, "--provider", "-p", help="wttr, station or static."),
    imperial: bool = typer.Option(False, "--imperial", help="Show °F and mph."),
    as_json: bool = typer.Option(False, "--json"),
    banner: bool = typer.Option(False, "--banner"),
) -> None:
    """Query current weather through the selected service."""

    settings = AppSettings()
    registry = build_weather_registry(settings)
    try:
        service = registry.create(provider or settings.weather_provider)
    except ConstructKitError as exc:
        raise _fail(exc) from exc

    lookups = asyncio.run(
        collect_weather(service, locations, max_concurrency=settings.weather_max_concurrency)
    )

    if as_json:
        _console.print_json(dump_models_json([item.data for item in lookups if item.data is not None]))
    else:
        if banner:
            print_banner(_console)
        units = Units.IMPERIAL if imperial else settings.default_units
        _console.print(build_weather_table(lookups, units))

    failed = [item for item in lookups if not item.ok]
    for item in failed:
        _err_console.print(f"[red]Error:[/red] {item.location}: {item.error}")
    if failed:
        raise typer.Exit(code=1)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
