"""Capability set of a UI widget product.

Why Protocol:
- A structural contract (duck typing) with no shared mutable base class.
- Any object exposing these three operations can be produced by a registry,
  including third-party widgets that never import this module.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Widget(Protocol):
    """Fixed capability set every widget variant exposes."""

    def name(self) -> str:
        """Short identifier of the concrete variant."""

        ...

    def description(self) -> str:
        ...

    def render(self) -> str:
        """Return a markup/text rendition of the widget."""

        ...
