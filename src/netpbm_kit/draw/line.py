"""Stepped line drawing, the primitive every shape is built on."""

from typing import Any, Iterator

from netpbm_kit.core.grid import PixelGrid
from netpbm_kit.core.pixel import Point


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def line_points(a: tuple[int, int], b: tuple[int, int]) -> Iterator[Point]:
    """
    Yield the points of the line from a to b, both ends included.

    Integer error accumulation (Bresenham): each step moves one unit along
    x, y or both, so every point is visited exactly once. Works for any
    slope and direction; a == b yields a single point.
    """
    x, y = a
    x1, y1 = b
    dx = abs(x1 - x)
    dy = abs(y1 - y)
    sx, sy = _sign(x1 - x), _sign(y1 - y)
    err = dx - dy

    while True:
        yield Point(x, y)
        if x == x1 and y == y1:
            return
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def draw_line(grid: PixelGrid, a: tuple[int, int], b: tuple[int, int], color: Any) -> None:
    """Draw a line from a to b; points off the grid are skipped."""
    for x, y in line_points(a, b):
        if grid.contains(x, y):
            grid.set(x, y, color)
