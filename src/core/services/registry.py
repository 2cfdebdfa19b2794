"""Registry-Factory: logical key -> zero-argument producer.

Why a table instead of a conditional chain:
- Adding a variant means one `register` call; existing dispatch code never
  changes.
- Lookups fail loudly (`UnknownKey`). There is no silent default product.

Overwrite policy:
- `register` on an existing key replaces the previous producer
  (last-write-wins). This is how callers swap an implementation (tests,
  platform overrides). Every overwrite is logged at INFO level.

Producer failures are the producer's responsibility: `create` lets them
propagate unchanged. Instances are not thread-safe.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from typing import Generic, TypeVar

from core.domain.widgets import AndroidButton, IOSButton, Platform, WebButton
from core.errors import UnknownKey
from core.interfaces.widget import Widget
from core.logging_utils import get_logger

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")

Producer = Callable[[], T]

logger = get_logger(__name__)


class Registry(Generic[K, T]):
    """Named mapping of keys to producers."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._producers: dict[K, Producer[T]] = {}

    @property
    def name(self) -> str:
        return self._name

    def register(self, key: K, producer: Producer[T]) -> None:
        """Associate `key` with `producer`, replacing any previous producer."""

        previous = self._producers.get(key)
        self._producers[key] = producer
        if previous is not None and previous is not producer:
            logger.info(
                "%s registry: producer for %r replaced (%s -> %s)",
                self._name,
                key,
                _describe(previous),
                _describe(producer),
            )

    def producer(self, key: K) -> Callable[[Producer[T]], Producer[T]]:
        """Decorator form of `register`; returns the producer untouched."""

        def decorator(fn: Producer[T]) -> Producer[T]:
            self.register(key, fn)
            return fn

        return decorator

    def unregister(self, key: K) -> None:
        try:
            del self._producers[key]
        except KeyError:
            raise UnknownKey(key, registry=self._name, available=self.keys()) from None

    def create(self, key: K) -> T:
        """Invoke the producer registered for `key` and return its product."""

        try:
            producer = self._producers[key]
        except KeyError:
            raise UnknownKey(key, registry=self._name, available=self.keys()) from None
        logger.debug("%s registry: creating %r via %s", self._name, key, _describe(producer))
        return producer()

    def keys(self) -> tuple[K, ...]:
        return tuple(sorted(self._producers, key=_key_text))

    def __contains__(self, key: object) -> bool:
        return key in self._producers

    def __len__(self) -> int:
        return len(self._producers)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"Registry(name={self._name!r}, keys={[_key_text(k) for k in self.keys()]})"


def _key_text(key: Hashable) -> str:
    value = getattr(key, "value", key)
    return str(value)


def _describe(producer: Callable[..., object]) -> str:
    return getattr(producer, "__qualname__", None) or repr(producer)


def build_widget_registry(*, label: str = "OK") -> Registry[Platform, Widget]:
    """Registry with one button variant per `Platform`."""

    registry: Registry[Platform, Widget] = Registry("widgets")
    registry.register(Platform.ANDROID, lambda: AndroidButton(label=label))
    registry.register(Platform.IOS, lambda: IOSButton(label=label))
    registry.register(Platform.WEB, lambda: WebButton(label=label))
    return registry
