"""PixelGrid - flat row-major pixel buffer."""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator

from netpbm_kit.core.constants import MAX_SAMPLE_VALUE
from netpbm_kit.core.magic import Family
from netpbm_kit.core.pixel import Pixel
from netpbm_kit.errors import BoundsViolation

logger = logging.getLogger(__name__)


@dataclass
class PixelGrid:
    """
    A width x height grid of pixels stored in one flat buffer.

    Each pixel occupies ``family.channels`` consecutive bytes, rows are
    laid out top to bottom with no padding. Values read back as ``bool``
    for bitmaps, ``int`` for graymaps and ``Pixel`` for pixmaps.

    ``max_value`` caps every gray or color sample written through ``set``;
    an owning Image keeps it equal to its own max value.
    """
    width: int
    height: int
    family: Family = Family.PIXMAP
    _data: bytearray = field(default_factory=bytearray, repr=False)
    max_value: int = MAX_SAMPLE_VALUE

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Invalid grid size {self.width}x{self.height}")
        expected = self.width * self.height * self.family.channels
        if not self._data:
            self._data = bytearray(expected)
        elif len(self._data) != expected:
            raise ValueError(
                f"Buffer holds {len(self._data)} bytes, "
                f"expected {expected} for {self.width}x{self.height} {self.family.value}"
            )
        if self.family is Family.BITMAP:
            self.max_value = 1

    @property
    def channels(self) -> int:
        return self.family.channels

    @property
    def data(self) -> bytearray:
        """The raw sample buffer (shared, not a copy)."""
        return self._data

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        return (y * self.width + x) * self.family.channels

    def get(self, x: int, y: int) -> Any:
        """Get the pixel at (x, y)."""
        if not self.contains(x, y):
            raise BoundsViolation(
                f"Position ({x}, {y}) out of bounds ({self.width}x{self.height})"
            )
        i = self._index(x, y)
        if self.family is Family.PIXMAP:
            return Pixel(self._data[i], self._data[i + 1], self._data[i + 2])
        if self.family is Family.BITMAP:
            return bool(self._data[i])
        return self._data[i]

    def set(self, x: int, y: int, value: Any) -> None:
        """
        Set the pixel at (x, y).

        Out-of-range coordinates are ignored and logged; callers that need
        strict checking should test ``contains`` first.
        """
        if not self.contains(x, y):
            logger.warning(
                "Ignoring set at (%d, %d): outside %dx%d grid",
                x, y, self.width, self.height,
            )
            return
        i = self._index(x, y)
        if self.family is Family.BITMAP:
            self._data[i] = 1 if value else 0
            return
        samples = tuple(value) if self.family is Family.PIXMAP else (value,)
        if len(samples) != self.family.channels:
            raise ValueError(f"Expected {self.family.channels} samples, got {len(samples)}")
        if max(samples) > self.max_value:
            raise ValueError(f"Sample value {max(samples)} exceeds max value {self.max_value}")
        self._data[i:i + len(samples)] = bytes(samples)

    def __getitem__(self, pos: tuple[int, int]) -> Any:
        """Get pixel using indexing: grid[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], value: Any) -> None:
        """Set pixel using indexing: grid[x, y] = value."""
        x, y = pos
        self.set(x, y, value)

    def swap(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """Exchange two in-range pixels."""
        c = self.family.channels
        i, j = self._index(x0, y0), self._index(x1, y1)
        self._data[i:i + c], self._data[j:j + c] = self._data[j:j + c], self._data[i:i + c]

    def swap_rows(self, y0: int, y1: int) -> None:
        """Exchange two in-range rows."""
        stride = self.width * self.family.channels
        i, j = y0 * stride, y1 * stride
        self._data[i:i + stride], self._data[j:j + stride] = (
            self._data[j:j + stride],
            self._data[i:i + stride],
        )

    def rows(self) -> Iterator[list[Any]]:
        """Iterate over rows as lists of pixel values."""
        for y in range(self.height):
            yield [self.get(x, y) for x in range(self.width)]

    def pixels(self) -> Iterator[tuple[int, int, Any]]:
        """Iterate over all pixels as (x, y, value) tuples."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.get(x, y)

    def copy(self) -> "PixelGrid":
        return PixelGrid(
            self.width, self.height, self.family, bytearray(self._data), self.max_value
        )
