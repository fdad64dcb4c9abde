"""Component base type, shared builder and construction checks."""

from __future__ import annotations

import logging
from typing import Any, Callable, ClassVar, Generic, Optional, TypeVar

from ..properties.base import Property, as_property
from ..validators import collect, fail

logger = logging.getLogger(__name__)

T = TypeVar("T")
B = TypeVar("B", bound="ComponentBuilder")


class CalendarComponent:
    component_name: ClassVar[str]
    Builder: ClassVar[type]

    @classmethod
    def builder(cls):
        return cls.Builder(cls)

    def formatted(self) -> str:
        raise NotImplementedError

    def _coerce(self, name: str, property_type: type) -> None:
        object.__setattr__(self, name, as_property(getattr(self, name), property_type))

    def _coerce_all(self, name: str, property_type: type) -> None:
        values = getattr(self, name) or ()
        object.__setattr__(
            self, name, tuple(as_property(value, property_type) for value in values if value is not None)
        )


class ComponentBuilder(Generic[T]):
    """Accumulates properties for one component; ``build()`` validates once."""

    def __init__(self, target: type[T]) -> None:
        self._target = target
        self._fields: dict[str, Any] = {}

    def _set(self: B, key: str, value: Any) -> B:
        self._fields[key] = value
        return self

    def _extend(self: B, key: str, values: tuple[Any, ...]) -> B:
        self._fields[key] = self._fields.get(key, ()) + collect(values)
        return self

    def build(self) -> T:
        component = self._target(**self._fields)
        logger.debug("Built %s with %d property groups", self._target.component_name, len(self._fields))
        return component


def require_property(value: Optional[Property], name: str) -> None:
    if value is None:
        raise fail(f"The `{name}` property is required and must not be null.", field=name)


def require_exclusive(first: Optional[Property], second: Optional[Property], first_name: str, second_name: str) -> None:
    if first is not None and second is not None:
        raise fail(f"The `{first_name}` and `{second_name}` properties must not both be set.", field=first_name)


def require_status(status: Any, allowed: Callable[[Any], bool], component_name: str) -> None:
    if status is not None and not allowed(status):
        raise fail(f"STATUS:{status.value} is not allowed in {component_name}", field="status", value=status.value)


def require_participation_status(
    attendees: tuple[Any, ...], allowed: Callable[[Any], bool], component_name: str
) -> None:
    for attendee in attendees:
        if attendee.status is not None and not allowed(attendee.status):
            raise fail(
                f"PARTSTAT={attendee.status.value} is not allowed in {component_name}",
                field="partstat",
                value=attendee.status.value,
            )
