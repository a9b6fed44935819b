"""Engine properties shown on the panel."""

from __future__ import annotations

import enum
from typing import Iterator

from pinyintable.lookup_table import Text


class PropType(enum.IntEnum):
    NORMAL = 0
    TOGGLE = 1
    RADIO = 2
    MENU = 3
    SEPARATOR = 4


class PropState(enum.IntEnum):
    UNCHECKED = 0
    CHECKED = 1
    INCONSISTENT = 2


def _to_text(value: Text | str | None) -> Text:
    if value is None:
        return Text("")
    if isinstance(value, Text):
        return value
    if isinstance(value, str):
        return Text(value)
    raise TypeError(f"expected Text or str, got {type(value).__name__}")


class PropList:
    """An ordered collection of properties."""

    def __init__(self) -> None:
        self._props: list[Property] = []

    def append(self, prop: Property) -> None:
        if not isinstance(prop, Property):
            raise TypeError("only Property objects can be appended")
        self._props.append(prop)

    def __iter__(self) -> Iterator[Property]:
        return iter(self._props)

    def __len__(self) -> int:
        return len(self._props)

    def __getitem__(self, index: int) -> Property:
        return self._props[index]


class Property:
    """A panel property; text fields accept either Text or str."""

    def __init__(
        self,
        key: str,
        type: PropType = PropType.NORMAL,
        label: Text | str | None = None,
        icon: str | None = None,
        tooltip: Text | str | None = None,
        sensitive: bool = True,
        visible: bool = True,
        state: PropState = PropState.UNCHECKED,
        sub_props: PropList | None = None,
    ) -> None:
        if not isinstance(key, str):
            raise TypeError("property key must be a string")
        self.key = key
        self.type = PropType(type)
        self.label = label
        self.icon = icon
        self.tooltip = tooltip
        self.symbol = None
        self.sensitive = sensitive
        self.visible = visible
        self.state = state
        self.sub_props = sub_props

    @property
    def label(self) -> Text:
        return self._label

    @label.setter
    def label(self, value: Text | str | None) -> None:
        self._label = _to_text(value)

    @property
    def tooltip(self) -> Text:
        return self._tooltip

    @tooltip.setter
    def tooltip(self, value: Text | str | None) -> None:
        self._tooltip = _to_text(value)

    @property
    def symbol(self) -> Text:
        return self._symbol

    @symbol.setter
    def symbol(self, value: Text | str | None) -> None:
        self._symbol = _to_text(value)

    @property
    def icon(self) -> str:
        return self._icon

    @icon.setter
    def icon(self, value: str | None) -> None:
        self._icon = value or ""

    @property
    def state(self) -> PropState:
        return self._state

    @state.setter
    def state(self, value: PropState) -> None:
        self._state = PropState(value)

    @property
    def sub_props(self) -> PropList:
        return self._sub_props

    @sub_props.setter
    def sub_props(self, value: PropList | None) -> None:
        self._sub_props = value if value is not None else PropList()