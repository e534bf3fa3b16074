from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple


@dataclass(frozen=True, slots=True)
class Pixel:
    """A single pixmap pixel (one byte per channel)."""
    r: int
    g: int
    b: int

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    def average(self) -> int:
        """Naive luma: integer mean of the three channels."""
        return (self.r + self.g + self.b) // 3


class Point(NamedTuple):
    """Integer coordinate used as rasterization input."""
    x: int
    y: int
