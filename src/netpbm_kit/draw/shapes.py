"""Shape rasterization on a PixelGrid.

Shapes are clipped to the grid. The filled variants intentionally
reproduce the reference renderer's pixel output (stacked outlines,
fan fills) rather than textbook scanline fills.
"""

import math
from typing import Any

from netpbm_kit.core.constants import CIRCLE_RADIUS_SCALE, CIRCLE_TOLERANCE
from netpbm_kit.core.grid import PixelGrid
from netpbm_kit.draw.line import draw_line


def draw_rectangle(
    grid: PixelGrid, origin: tuple[int, int], width: int, height: int, color: Any
) -> None:
    """Outline the rectangle with corners origin and origin + (width, height)."""
    x, y = origin
    top_right = (x + width, y)
    bottom_left = (x, y + height)
    bottom_right = (x + width, y + height)
    draw_line(grid, (x, y), top_right, color)
    draw_line(grid, top_right, bottom_right, color)
    draw_line(grid, bottom_right, bottom_left, color)
    draw_line(grid, bottom_left, (x, y), color)


def draw_filled_rectangle(
    grid: PixelGrid, origin: tuple[int, int], width: int, height: int, color: Any
) -> None:
    """Fill rows origin.y through origin.y + height inclusive."""
    x, y = origin
    for row in range(y, y + height + 1):
        draw_line(grid, (x, row), (x + width, row), color)


def draw_circle(grid: PixelGrid, center: tuple[int, int], radius: int, color: Any) -> None:
    """
    Outline a circle by testing every pixel of the grid.

    A pixel is marked when its distance to center is within 0.5 of
    radius * 0.85. Cost is O(width * height) whatever the radius.
    """
    cx, cy = center
    target = radius * CIRCLE_RADIUS_SCALE
    for y in range(grid.height):
        for x in range(grid.width):
            dx, dy = x - cx, y - cy
            distance = math.sqrt(dx * dx + dy * dy)
            if abs(distance - target) < CIRCLE_TOLERANCE:
                grid.set(x, y, color)


def draw_filled_circle(
    grid: PixelGrid, center: tuple[int, int], radius: int, color: Any
) -> None:
    """Fill a circle with outlines of every radius from radius down to 0."""
    for r in range(radius, -1, -1):
        draw_circle(grid, center, r, color)


def draw_triangle(
    grid: PixelGrid,
    p1: tuple[int, int],
    p2: tuple[int, int],
    p3: tuple[int, int],
    color: Any,
) -> None:
    draw_line(grid, p1, p2, color)
    draw_line(grid, p2, p3, color)
    draw_line(grid, p3, p1, color)


def draw_filled_triangle(
    grid: PixelGrid,
    p1: tuple[int, int],
    p2: tuple[int, int],
    p3: tuple[int, int],
    color: Any,
) -> None:
    """
    Fan-fill a triangle from p3.

    A cursor starts at p1 and walks toward p2, stepping x and y by one
    unit each per iteration until both match; a line is drawn from p3 to
    every cursor position, ending with p3 to p2.
    """
    x, y = p1
    x2, y2 = p2
    while (x, y) != (x2, y2):
        draw_line(grid, p3, (x, y), color)
        if x < x2:
            x += 1
        elif x > x2:
            x -= 1
        if y < y2:
            y += 1
        elif y > y2:
            y -= 1
    draw_line(grid, p3, (x, y), color)
