"""The VCALENDAR document that wraps components into a complete iCalendar stream."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from .components import Event, FreeBusy, Journal, TimeZone, Todo
from .components.base import CalendarComponent, ComponentBuilder
from .composer import ComponentComposer
from .config import load_config
from .constants import CRLF
from .properties import (
    CalendarDescription,
    CalendarId,
    CalendarName,
    CalendarScale,
    CalendarTimeZone,
    CustomProperty,
    Method,
    Owner,
    PrimaryCalendar,
    ProductIdentifier,
    PublishedTtl,
    Version,
)
from .validators import fail

TOP_LEVEL_COMPONENTS = (Event, Todo, Journal, FreeBusy, TimeZone)


class CalendarBuilder(ComponentBuilder["Calendar"]):
    def with_product_identifier(self, value: Any) -> CalendarBuilder:
        return self._set("product_identifier", value)

    def with_version(self, value: Any) -> CalendarBuilder:
        return self._set("version", value)

    def with_calendar_scale(self, value: Any) -> CalendarBuilder:
        return self._set("calendar_scale", value)

    def with_method(self, value: Any) -> CalendarBuilder:
        return self._set("method", value)

    def with_calendar_name(self, value: Any) -> CalendarBuilder:
        return self._set("calendar_name", value)

    def with_calendar_description(self, value: Any) -> CalendarBuilder:
        return self._set("calendar_description", value)

    def with_calendar_id(self, value: Any) -> CalendarBuilder:
        return self._set("calendar_id", value)

    def with_calendar_time_zone(self, value: Any) -> CalendarBuilder:
        return self._set("calendar_time_zone", value)

    def with_owner(self, value: Any) -> CalendarBuilder:
        return self._set("owner", value)

    def with_primary_calendar(self, value: Any) -> CalendarBuilder:
        return self._set("primary_calendar", value)

    def with_published_ttl(self, value: Any) -> CalendarBuilder:
        return self._set("published_ttl", value)

    def with_custom_properties(self, *values: CustomProperty) -> CalendarBuilder:
        return self._extend("custom_properties", values)

    def with_components(self, *components: CalendarComponent) -> CalendarBuilder:
        return self._extend("components", components)


@dataclass(frozen=True)
class Calendar(CalendarComponent):
    """A VCALENDAR object.

    PRODID falls back to the configured product identifier and VERSION to 2.0.
    Unlike a component block, the formatted calendar ends with CRLF so it can be
    written out as a file as is.
    """

    component_name: ClassVar[str] = "VCALENDAR"
    Builder: ClassVar[type] = CalendarBuilder

    product_identifier: Optional[ProductIdentifier] = None
    version: Optional[Version] = None
    calendar_scale: Optional[CalendarScale] = None
    method: Optional[Method] = None
    calendar_name: Optional[CalendarName] = None
    calendar_description: Optional[CalendarDescription] = None
    calendar_id: Optional[CalendarId] = None
    calendar_time_zone: Optional[CalendarTimeZone] = None
    owner: Optional[Owner] = None
    primary_calendar: Optional[PrimaryCalendar] = None
    published_ttl: Optional[PublishedTtl] = None
    custom_properties: tuple[CustomProperty, ...] = ()
    components: tuple[CalendarComponent, ...] = ()

    def __post_init__(self) -> None:
        if self.product_identifier is None:
            object.__setattr__(self, "product_identifier", load_config().prod_id)
        if self.version is None:
            object.__setattr__(self, "version", Version.V2_0)
        self._coerce("product_identifier", ProductIdentifier)
        self._coerce("version", Version)
        self._coerce("calendar_scale", CalendarScale)
        self._coerce("method", Method)
        self._coerce("calendar_name", CalendarName)
        self._coerce("calendar_description", CalendarDescription)
        self._coerce("calendar_id", CalendarId)
        self._coerce("calendar_time_zone", CalendarTimeZone)
        self._coerce("owner", Owner)
        self._coerce("primary_calendar", PrimaryCalendar)
        self._coerce("published_ttl", PublishedTtl)
        object.__setattr__(self, "custom_properties", tuple(self.custom_properties or ()))
        object.__setattr__(self, "components", tuple(self.components or ()))

        for prop in self.custom_properties:
            if not isinstance(prop, CustomProperty):
                raise fail("Calendar custom properties must be CustomProperty objects", field="custom_properties")
        for component in self.components:
            if not isinstance(component, TOP_LEVEL_COMPONENTS):
                raise fail(
                    "A calendar holds VEVENT, VTODO, VJOURNAL, VFREEBUSY and VTIMEZONE components",
                    field="components",
                    value=type(component).__name__,
                )

    def formatted(self) -> str:
        body = (
            ComponentComposer.of(self.component_name)
            .start()
            .append(self.product_identifier)
            .append(self.version)
            .append(self.calendar_scale)
            .append(self.method)
            .append(self.calendar_name)
            .append(self.calendar_description)
            .append(self.calendar_id)
            .append(self.calendar_time_zone)
            .append(self.owner)
            .append(self.primary_calendar)
            .append(self.published_ttl)
            .extend(self.custom_properties)
            .nest(self.components)
            .end()
        )
        return body + CRLF
