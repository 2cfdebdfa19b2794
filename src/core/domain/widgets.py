"""Platform button variants (factory products).

Each variant satisfies `core.interfaces.widget.Widget` structurally. Variants
hold only their own immutable configuration, so two products created by the
same registry never share state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from html import escape


class Platform(str, Enum):
    """Logical keys for the widget registry."""

    ANDROID = "android"
    IOS = "ios"
    WEB = "web"

    @classmethod
    def parse(cls, value: str) -> "Platform":
        """Case-insensitive lookup used by the CLI and settings."""

        return cls(value.strip().lower())


@dataclass(frozen=True)
class AndroidButton:
    label: str = "OK"

    def name(self) -> str:
        return "android-button"

    def description(self) -> str:
        return "Material Design elevated button with ripple feedback."

    def render(self) -> str:
        return f'<Button style="@style/Widget.Material3.Button" text="{escape(self.label)}" />'


@dataclass(frozen=True)
class IOSButton:
    label: str = "OK"

    def name(self) -> str:
        return "ios-button"

    def description(self) -> str:
        return "Cupertino filled button with rounded corners."

    def render(self) -> str:
        return f'Button("{self.label}").buttonStyle(.borderedProminent)'


@dataclass(frozen=True)
class WebButton:
    label: str = "OK"
    css_class: str = "btn btn-primary"

    def name(self) -> str:
        return "web-button"

    def description(self) -> str:
        return "HTML button element styled with a CSS class."

    def render(self) -> str:
        return f'<button type="button" class="{escape(self.css_class)}">{escape(self.label)}</button>'
