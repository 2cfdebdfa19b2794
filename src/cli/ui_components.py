"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables/panels are reused by several commands.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import UserProfile
from core.domain.units import Units
from core.interfaces.widget import Widget
from core.services.weather_lookup import WeatherLookup


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in JSON mode)."""

    title = Text("construct-kit", style="bold cyan")
    subtitle = Text("Factories • Builders • Adapters", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_keys_table(title: str, keys: Iterable[object]) -> Table:
    table = Table(title=title)
    table.add_column("Key", style="cyan", no_wrap=True)
    for key in keys:
        table.add_row(str(getattr(key, "value", key)))
    return table


def build_widget_panel(widget: Widget) -> Panel:
    body = Text()
    body.append(widget.description() + "\n\n")
    body.append(widget.render(), style="green")
    return Panel(body, title=Text(widget.name(), style="bold cyan"), border_style="cyan")


def build_profile_panel(profile: UserProfile) -> Panel:
    """Panel presenting a built `UserProfile`."""

    body = Text()
    body.append(f"@{profile.username}\n", style="bold")
    if profile.bio:
        body.append(profile.bio.strip() + "\n")
    if profile.location:
        body.append(f"\nLocation: {profile.location}")
    if profile.website:
        body.append(f"\nWebsite: {profile.website}", style="magenta")
    if profile.avatar_url:
        body.append(f"\nAvatar: {profile.avatar_url}", style="dim")
    if profile.tags:
        body.append("\nTags: " + ", ".join(profile.tags), style="cyan")
    return Panel(body, title=Text(profile.title, style="bold yellow"), border_style="yellow")


def build_weather_table(lookups: Sequence[WeatherLookup], units: Units) -> Table:
    table = Table(title="Weather")
    table.add_column("Location", style="cyan", no_wrap=True)
    table.add_column(f"Temp ({units.temperature_symbol()})", style="white", justify="right")
    table.add_column("Condition", style="white")
    table.add_column("Humidity", style="white", justify="right")
    table.add_column(f"Wind ({units.speed_symbol()})", style="white", justify="right")
    table.add_column("Source", style="dim")
    table.add_column("Error", style="red")

    for item in lookups:
        if item.data is None:
            table.add_row(item.location, "-", "-", "-", "-", "-", str(item.error))
            continue
        data = item.data
        wind = data.wind_in(units)
        table.add_row(
            data.location,
            f"{data.temperature_in(units):.1f}",
            data.condition,
            "-" if data.humidity_pct is None else f"{data.humidity_pct}%",
            "-" if wind is None else f"{wind:.1f}",
            data.source,
            "",
        )
    return table
