"""Rasterization of lines and shapes onto a PixelGrid."""

from netpbm_kit.draw.line import draw_line, line_points
from netpbm_kit.draw.shapes import (
    draw_circle,
    draw_filled_circle,
    draw_filled_rectangle,
    draw_filled_triangle,
    draw_rectangle,
    draw_triangle,
)

__all__ = [
    "line_points",
    "draw_line",
    "draw_rectangle",
    "draw_filled_rectangle",
    "draw_circle",
    "draw_filled_circle",
    "draw_triangle",
    "draw_filled_triangle",
]
