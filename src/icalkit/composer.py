"""Line assembly for properties and components."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Optional

from .constants import CRLF
from .formatters import fold_line

if TYPE_CHECKING:
    from .components.base import CalendarComponent
    from .parameters import Parameter
    from .properties.base import Property


class PropertyComposer:
    """Builds one unfolded ``NAME;PARAM=VALUE:VALUE`` content line.

    Parameters are emitted in the order they are appended; ``None`` is skipped
    so callers can pass optional parameters straight through.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._parameters: list[str] = []

    @classmethod
    def of(cls, name: str) -> PropertyComposer:
        return cls(name)

    def append(self, parameter: Optional[Parameter]) -> PropertyComposer:
        if parameter is not None:
            self._parameters.append(parameter.formatted())
        return self

    def extend(self, parameters: Iterable[Optional[Parameter]]) -> PropertyComposer:
        for parameter in parameters:
            self.append(parameter)
        return self

    def end(self, value: str) -> str:
        return f"{self._name}{''.join(self._parameters)}:{value}"


class ComponentComposer:
    """Builds a ``BEGIN:NAME`` ... ``END:NAME`` block.

    Absent properties and empty collections contribute nothing. Each property
    line is folded on its own; nested components are inserted as already
    composed blocks.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._lines: list[str] = []

    @classmethod
    def of(cls, name: str) -> ComponentComposer:
        return cls(name)

    def start(self) -> ComponentComposer:
        self._lines.append(f"BEGIN:{self._name}")
        return self

    def append(self, prop: Optional[Property]) -> ComponentComposer:
        if prop is not None:
            self._lines.append(fold_line(prop.content_line()))
        return self

    def extend(self, props: Optional[Iterable[Property]]) -> ComponentComposer:
        for prop in props or ():
            self.append(prop)
        return self

    def nest(self, components: Optional[Iterable[CalendarComponent]]) -> ComponentComposer:
        for component in components or ():
            self._lines.append(component.formatted())
        return self

    def end(self) -> str:
        self._lines.append(f"END:{self._name}")
        return CRLF.join(self._lines)
