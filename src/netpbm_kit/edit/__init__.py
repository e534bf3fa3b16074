"""Transforms and conversions for Netpbm images."""

from netpbm_kit.edit.convert import to_bitmap, to_graymap
from netpbm_kit.edit.transform import (
    flip_horizontal,
    flip_vertical,
    invert,
    rescale_max,
    rotate_90_clockwise,
)

__all__ = [
    "invert",
    "flip_horizontal",
    "flip_vertical",
    "rotate_90_clockwise",
    "rescale_max",
    "to_graymap",
    "to_bitmap",
]
