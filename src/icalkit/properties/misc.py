"""Miscellaneous properties (RFC 5545 section 3.8.8): REQUEST-STATUS and X- properties."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from ..composer import PropertyComposer
from ..constants import REQUEST_STATUS_LIMITS
from ..formatters import escape_text
from ..parameters import CustomParameter, Language, Parameter
from ..validators import collect, fail, validate_not_blank, validate_property_name, validate_range
from .base import CalendarProperty, ComponentProperty, LanguageBuilder, PropertyBuilder


@dataclass(frozen=True)
class RequestStatus(ComponentProperty):
    """REQUEST-STATUS as ``class.detail;description[;additional data]``.

    ``formatted()`` is the status value alone; ``content_line()`` is the full
    line with the property name and LANGUAGE.
    """

    property_name: ClassVar[str] = "REQUEST-STATUS"
    Builder: ClassVar[type] = LanguageBuilder

    status_class: int
    status_detail: int
    description: str
    additional_data: Optional[str] = None
    language: Optional[Language] = None

    def __post_init__(self) -> None:
        validate_range(
            self.status_class,
            REQUEST_STATUS_LIMITS["CLASS_MIN"],
            REQUEST_STATUS_LIMITS["CLASS_MAX"],
            "Request status class must be between 1 and 5",
            field="status_class",
        )
        validate_range(
            self.status_detail,
            REQUEST_STATUS_LIMITS["DETAIL_MIN"],
            REQUEST_STATUS_LIMITS["DETAIL_MAX"],
            "Request status detail must be between 0 and 99",
            field="status_detail",
        )
        if not isinstance(self.description, str):
            raise fail("Request status description must be text", field="description", value=self.description)
        validate_not_blank(self.description, "Request status description must not be blank", field="description")
        if self.additional_data is not None and not isinstance(self.additional_data, str):
            raise fail("Request status data must be text", field="additional_data", value=self.additional_data)
        self._coerce("language", Language)

    @property
    def code(self) -> str:
        return f"{self.status_class}.{self.status_detail}"

    def formatted(self) -> str:
        text = f"{self.code};{escape_text(self.description)}"
        if self.additional_data:
            text += f";{escape_text(self.additional_data)}"
        return text

    def content_line(self) -> str:
        return PropertyComposer.of(self.property_name).append(self.language).end(self.formatted())


class CustomPropertyBuilder(PropertyBuilder["CustomProperty"]):
    def with_parameters(self, *parameters: Parameter) -> CustomPropertyBuilder:
        return self._set("parameters", collect(parameters))

    def with_parameter(self, name: str, value: str) -> CustomPropertyBuilder:
        current = self._parameters.get("parameters", ())
        return self._set("parameters", current + (CustomParameter(name, value),))


@dataclass(frozen=True)
class CustomProperty(ComponentProperty, CalendarProperty):
    """An ``X-`` or IANA-registered property written verbatim.

    The value is not TEXT-escaped; callers pass it already encoded for its
    value type. Line breaks are rejected since they would end the line early.
    """

    Builder: ClassVar[type] = CustomPropertyBuilder

    name: str
    value: Any
    parameters: tuple[Parameter, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", validate_property_name(self.name))
        if self.value is None:
            raise fail(f"Property {self.name} needs a value", field=self.name)
        text = str(self.value)
        if "\r" in text or "\n" in text:
            raise fail(f"Property {self.name} value must not contain line breaks", field=self.name)
        object.__setattr__(self, "value", text)
        parameters = collect(tuple(self.parameters))
        for parameter in parameters:
            if not isinstance(parameter, Parameter):
                raise fail("Custom property parameters must be Parameter objects", field="parameters", value=parameter)
        object.__setattr__(self, "parameters", parameters)

    @property
    def property_name(self) -> str:
        return self.name

    def formatted(self) -> str:
        return PropertyComposer.of(self.name).extend(self.parameters).end(self.value)
