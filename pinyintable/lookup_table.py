"""Display text and a paged candidate lookup table."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple


class Attribute(NamedTuple):
    type: int
    value: int
    start: int
    end: int


@dataclass
class Text:
    """A piece of display text with optional style attributes."""

    text: str = ""
    attributes: list[Attribute] = field(default_factory=list)

    def append_attribute(self, type: int, value: int, start: int, end: int) -> None:
        """Attach a style attribute covering characters ``start`` to ``end``."""
        self.attributes.append(Attribute(type, value, start, end))

    def __str__(self) -> str:
        return self.text


def _as_text(value: Text | str) -> Text:
    if isinstance(value, Text):
        return value
    if isinstance(value, str):
        return Text(value)
    raise TypeError(f"expected Text or str, got {type(value).__name__}")


class Orientation(enum.IntEnum):
    HORIZONTAL = 0
    VERTICAL = 1
    SYSTEM = 2


class LookupTable:
    """A list of candidates shown page by page with a cursor."""

    def __init__(
        self,
        page_size: int = 10,
        cursor_pos: int = 0,
        cursor_visible: bool = True,
        round: bool = False,
    ) -> None:
        if page_size <= 0:
            raise ValueError("page size must be positive")
        self._page_size = page_size
        self._cursor_pos = cursor_pos
        self.cursor_visible = cursor_visible
        self.round = round
        self.orientation = Orientation.SYSTEM
        self._candidates: list[Text] = []
        self._labels: list[Text | None] = []

    @property
    def page_size(self) -> int:
        return self._page_size

    @page_size.setter
    def page_size(self, size: int) -> None:
        if size <= 0:
            raise ValueError("page size must be positive")
        self._page_size = size

    @property
    def cursor_pos(self) -> int:
        return self._cursor_pos

    @cursor_pos.setter
    def cursor_pos(self, pos: int) -> None:
        if not 0 <= pos < len(self._candidates):
            raise IndexError("cursor position out of range")
        self._cursor_pos = pos

    @property
    def labels(self) -> tuple[Text | None, ...]:
        return tuple(self._labels)

    def __len__(self) -> int:
        return len(self._candidates)

    def __iter__(self) -> Iterator[Text]:
        return iter(self._candidates)

    def page_up(self) -> bool:
        """Move the cursor one page up; False if it cannot move."""
        count = len(self._candidates)
        if self._cursor_pos < self._page_size:
            if not self.round or count == 0:
                return False
            in_page = self._cursor_pos % self._page_size
            pages = (count + self._page_size - 1) // self._page_size
            self._cursor_pos = min((pages - 1) * self._page_size + in_page, count - 1)
            return True
        self._cursor_pos -= self._page_size
        return True

    def page_down(self) -> bool:
        """Move the cursor one page down; False if it cannot move."""
        count = len(self._candidates)
        if count == 0:
            return False
        in_page = self._cursor_pos % self._page_size
        page = self._cursor_pos // self._page_size
        pages = (count + self._page_size - 1) // self._page_size
        if page == pages - 1:
            if not self.round:
                return False
            self._cursor_pos = in_page
            return True
        self._cursor_pos = min(self._cursor_pos + self._page_size, count - 1)
        return True

    def cursor_up(self) -> bool:
        """Move the cursor to the previous candidate; False if it cannot move."""
        count = len(self._candidates)
        if self._cursor_pos == 0:
            if not self.round or count == 0:
                return False
            self._cursor_pos = count - 1
            return True
        self._cursor_pos -= 1
        return True

    def cursor_down(self) -> bool:
        """Move the cursor to the next candidate; False if it cannot move."""
        count = len(self._candidates)
        if count == 0:
            return False
        if self._cursor_pos == count - 1:
            if not self.round:
                return False
            self._cursor_pos = 0
            return True
        self._cursor_pos += 1
        return True

    def clear(self) -> None:
        """Remove all candidates and reset the cursor."""
        self._candidates.clear()
        self._cursor_pos = 0

    def append_candidate(self, text: Text | str) -> None:
        self._candidates.append(_as_text(text))

    def append_label(self, text: Text | str) -> None:
        self._labels.append(_as_text(text))

    def set_label(self, index: int, text: Text | str) -> None:
        """Set the label at ``index``, growing the label list if needed."""
        if index < 0:
            raise IndexError("label index out of range")
        if index >= len(self._labels):
            self._labels.extend([None] * (index + 1 - len(self._labels)))
        self._labels[index] = _as_text(text)

    def candidate(self, index: int) -> Text:
        if not 0 <= index < len(self._candidates):
            raise IndexError("candidate index out of range")
        return self._candidates[index]

    def page_candidates(self) -> tuple[Text, ...]:
        """Candidates on the page holding the cursor."""
        start = (self._cursor_pos // self._page_size) * self._page_size
        return tuple(self._candidates[start:start + self._page_size])