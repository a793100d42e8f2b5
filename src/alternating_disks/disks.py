"""Disk row state for the alternating disks problem."""

from __future__ import annotations

import enum
from typing import Iterable, Iterator


class DiskStateError(Exception):
    """Base class for misuse of a :class:`DiskRow`."""


class InvalidConstructionError(DiskStateError, ValueError):
    pass


class DiskIndexError(DiskStateError, IndexError):
    pass


class Color(enum.Enum):
    LIGHT = "L"
    DARK = "D"

    @property
    def token(self) -> str:
        return self.value


class DiskRow:
    """A row of light and dark disks that only changes through adjacent swaps.

    A fresh row holds ``2 * light_count`` disks in alternating order, light
    first. Rows built with :meth:`from_colors` or :meth:`parse` may hold any
    arrangement with equal numbers of each color.
    """

    __slots__ = ("_colors",)

    def __init__(self, light_count: int) -> None:
        if isinstance(light_count, bool) or not isinstance(light_count, int):
            raise InvalidConstructionError(f"light_count must be an integer, got {light_count!r}")
        if light_count < 1:
            raise InvalidConstructionError(f"light_count must be positive, got {light_count}")
        self._colors = [Color.LIGHT if i % 2 == 0 else Color.DARK for i in range(2 * light_count)]

    @classmethod
    def from_colors(cls, colors: Iterable[Color]) -> DiskRow:
        values = list(colors)
        if not values:
            raise InvalidConstructionError("a disk row needs at least one light and one dark disk")
        for value in values:
            if not isinstance(value, Color):
                raise InvalidConstructionError(f"not a disk color: {value!r}")
        light = sum(1 for value in values if value is Color.LIGHT)
        if light * 2 != len(values):
            raise InvalidConstructionError(
                f"expected equal light and dark counts, got {light} light of {len(values)}"
            )
        row = cls.__new__(cls)
        row._colors = values
        return row

    @classmethod
    def parse(cls, text: str) -> DiskRow:
        """Build a row from the output of :meth:`render`."""

        colors: list[Color] = []
        for token in text.split():
            try:
                colors.append(Color(token.upper()))
            except ValueError:
                raise InvalidConstructionError(f"unknown disk token {token!r}") from None
        return cls.from_colors(colors)

    def copy(self) -> DiskRow:
        return type(self).from_colors(self._colors)

    def total_count(self) -> int:
        return len(self._colors)

    def light_count(self) -> int:
        return self.total_count() // 2

    def dark_count(self) -> int:
        return self.light_count()

    def is_index(self, index: int) -> bool:
        return 0 <= index < self.total_count()

    def get(self, index: int) -> Color:
        if not self.is_index(index):
            raise DiskIndexError(f"index {index} outside [0, {self.total_count()})")
        return self._colors[index]

    def swap(self, left_index: int) -> None:
        """Exchange the disks at ``left_index`` and ``left_index + 1``."""

        right_index = left_index + 1
        if not (self.is_index(left_index) and self.is_index(right_index)):
            raise DiskIndexError(
                f"cannot swap {left_index} and {right_index} in a row of {self.total_count()}"
            )
        colors = self._colors
        colors[left_index], colors[right_index] = colors[right_index], colors[left_index]

    def equals(self, other: DiskRow) -> bool:
        return self._colors == other._colors

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiskRow):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return self.total_count()

    def __iter__(self) -> Iterator[Color]:
        return iter(tuple(self._colors))

    def render(self) -> str:
        return " ".join(color.token for color in self._colors)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"DiskRow.parse({self.render()!r})"

    def is_alternating(self) -> bool:
        """Return True when even indices are light and odd indices are dark."""

        for index, color in enumerate(self._colors):
            expected = Color.LIGHT if index % 2 == 0 else Color.DARK
            if color is not expected:
                return False
        return True

    def is_sorted_blocks(self) -> bool:
        """Return True when every light disk sits left of every dark disk."""

        for index in range(self.light_count()):
            if self.get(index) is not Color.LIGHT:
                return False
        for index in range(self.dark_count(), self.total_count()):
            if self.get(index) is not Color.DARK:
                return False
        return True
