"""Core errors.

Why a dedicated module:
- Registry, builders and adapters report failures to the immediate caller.
  None of them retries or recovers from another component's error.
- A shared base (`ConstructKitError`) lets the CLI catch library failures
  without hiding producer or provider bugs (those propagate unchanged).
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Any


class ConstructKitError(Exception):
    """Base class for every error raised by the toolkit itself."""


class UnknownKey(ConstructKitError, KeyError):
    """No producer is registered for the requested key."""

    def __init__(self, key: Hashable, *, registry: str, available: Sequence[Hashable] = ()) -> None:
        self.key = key
        self.registry = registry
        self.available = tuple(available)
        listed = ", ".join(str(k) for k in self.available) or "<empty>"
        super().__init__(f"{registry} registry: no producer for {key!r}. Available: {listed}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])


class BuildError(ConstructKitError):
    """Base class for `build()` failures."""


class IncompleteBuild(BuildError):
    """One or more required fields were never set on the builder."""

    def __init__(self, missing: Sequence[str], *, model: str) -> None:
        self.missing = tuple(missing)
        self.model = model
        super().__init__(f"Cannot build {model}: missing required field(s): {', '.join(self.missing)}")


class InvalidBuild(BuildError):
    """Field values were set but violate the result model constraints."""

    def __init__(self, errors: list[dict[str, Any]], *, model: str) -> None:
        self.errors = errors
        self.model = model
        fields = sorted({".".join(str(p) for p in e.get("loc", ())) or "<root>" for e in errors})
        super().__init__(f"Cannot build {model}: invalid value for {', '.join(fields)}")


class AdapterTranslationError(ConstructKitError):
    """A foreign response could not be mapped into the target contract shape."""

    def __init__(self, *, source: str, location: str, reason: str) -> None:
        self.source = source
        self.location = location
        self.reason = reason
        super().__init__(f"{source}: cannot translate response for {location!r}: {reason}")
