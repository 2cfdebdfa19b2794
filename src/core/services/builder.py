"""Step builders: chained mutators, one immutable value per `build()`.

Contract:
- `with_<field>(value)` only assigns and returns the same builder. Value
  constraints (non-empty, URL shape, ranges) are checked in `build()`.
- `build()` first reports every unset required field (`IncompleteBuild`),
  then validates into a frozen pydantic model (`InvalidBuild` on failure).
- Field values are deep-copied into the result, and lists become tuples.
  Mutating the builder, or the list the caller passed in, after `build()`
  never alters a result already handed out.
- There is no terminal state: a builder can keep accumulating and building.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from core.domain.models import ProfileCard, UserProfile
from core.errors import IncompleteBuild, InvalidBuild
from core.logging_utils import get_logger

M = TypeVar("M", bound=BaseModel)
B = TypeVar("B", bound="StepBuilder[Any]")

logger = get_logger(__name__)


class StepBuilder(Generic[M]):
    """Generic accumulator for a frozen pydantic result model.

    Subclasses declare `model` and `required`; optional fields are every
    other field of the model, with the model's own defaults.
    """

    model: ClassVar[type[BaseModel]]
    required: ClassVar[tuple[str, ...]] = ()

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}

    @classmethod
    def from_model(cls: type[B], result: BaseModel) -> B:
        """Seed a builder with the explicitly set fields of an existing result."""

        builder = cls()
        for name in result.model_fields_set:
            builder._set(name, getattr(result, name))
        return builder

    def _set(self: B, name: str, value: Any) -> B:
        self._fields[name] = value
        return self

    def reset(self: B) -> B:
        self._fields.clear()
        return self

    def snapshot(self) -> dict[str, Any]:
        """Copy of the accumulated fields (the builder keeps its own)."""

        return copy.deepcopy(self._fields)

    def missing(self) -> tuple[str, ...]:
        return tuple(name for name in self.required if self._fields.get(name) is None)

    def build(self) -> M:
        model_name = self.model.__name__
        missing = self.missing()
        if missing:
            raise IncompleteBuild(missing, model=model_name)

        data = {name: _freeze(value) for name, value in self.snapshot().items()}
        try:
            result = self.model.model_validate(data)
        except ValidationError as exc:
            logger.debug("%s build rejected: %s", model_name, exc)
            raise InvalidBuild(exc.errors(include_url=False), model=model_name) from exc
        return result  # type: ignore[return-value]


def _freeze(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, set | frozenset):
        return tuple(sorted(value))
    return value


class ProfileBuilder(StepBuilder[UserProfile]):
    """Assembles a `UserProfile`; `username` is required.

    >>> ProfileBuilder().with_username("ada").with_bio("math").build().bio
    'math'
    """

    model = UserProfile
    required = ("username",)

    def with_username(self, value: str) -> "ProfileBuilder":
        return self._set("username", value)

    def with_display_name(self, value: str) -> "ProfileBuilder":
        return self._set("display_name", value)

    def with_bio(self, value: str) -> "ProfileBuilder":
        return self._set("bio", value)

    def with_avatar_url(self, value: str) -> "ProfileBuilder":
        return self._set("avatar_url", value)

    def with_website(self, value: str) -> "ProfileBuilder":
        return self._set("website", value)

    def with_location(self, value: str) -> "ProfileBuilder":
        return self._set("location", value)

    def with_tags(self, values: Iterable[str]) -> "ProfileBuilder":
        return self._set("tags", list(values))

    def add_tag(self, value: str) -> "ProfileBuilder":
        tags = list(self._fields.get("tags") or ())
        tags.append(value)
        return self._set("tags", tags)


class CardBuilder(StepBuilder[ProfileCard]):
    model = ProfileCard
    required = ("title",)

    def with_title(self, value: str) -> "CardBuilder":
        return self._set("title", value)

    def with_subtitle(self, value: str) -> "CardBuilder":
        return self._set("subtitle", value)

    def with_image_url(self, value: str) -> "CardBuilder":
        return self._set("image_url", value)

    def with_elevation(self, value: int) -> "CardBuilder":
        return self._set("elevation", value)

    def with_action(self, label: str, target: str) -> "CardBuilder":
        actions = list(self._fields.get("actions") or ())
        actions.append({"label": label, "target": target})
        return self._set("actions", actions)

    @classmethod
    def for_profile(cls, profile: UserProfile) -> "CardBuilder":
        """Card preset for a profile: title, bio as subtitle, avatar, website link."""

        builder = cls().with_title(profile.title)
        if profile.bio:
            builder.with_subtitle(profile.bio)
        if profile.avatar_url:
            builder.with_image_url(profile.avatar_url)
        if profile.website:
            builder.with_action("Website", profile.website)
        return builder

