"""In-place geometric and tonal transforms."""

from netpbm_kit.core.constants import MAX_SAMPLE_VALUE
from netpbm_kit.core.grid import PixelGrid
from netpbm_kit.core.image import Image
from netpbm_kit.core.magic import Family


def invert(image: Image) -> None:
    """Replace every sample v with max - v (bitmaps: logical negation)."""
    data = image.grid.data
    top = image.max_value
    if data and max(data) > top:
        raise ValueError(f"Sample value {max(data)} exceeds max value {top}")
    data[:] = bytes(top - value for value in data)


def flip_horizontal(image: Image) -> None:
    """Mirror the image left to right."""
    grid = image.grid
    for y in range(grid.height):
        left, right = 0, grid.width - 1
        while left < right:
            grid.swap(left, y, right, y)
            left += 1
            right -= 1


def flip_vertical(image: Image) -> None:
    """Mirror the image top to bottom."""
    grid = image.grid
    top, bottom = 0, grid.height - 1
    while top < bottom:
        grid.swap_rows(top, bottom)
        top += 1
        bottom -= 1


def rotate_90_clockwise(image: Image) -> None:
    """Rotate a quarter turn clockwise; width and height swap."""
    old = image.grid
    rotated = PixelGrid(old.height, old.width, old.family, max_value=old.max_value)
    for y in range(old.height):
        for x in range(old.width):
            rotated.set(old.height - 1 - y, x, old.get(x, y))
    image.grid = rotated


def rescale_max(image: Image, new_max: int) -> None:
    """
    Change the max value, scaling every sample by new_max / old_max.

    Uses truncating integer division. A new max of 0 becomes 1. Bitmaps
    have no max value and are left alone.
    """
    if image.family is Family.BITMAP:
        return
    if new_max == 0:
        new_max = 1
    if not 0 < new_max <= MAX_SAMPLE_VALUE:
        raise ValueError(f"max value must be 1-{MAX_SAMPLE_VALUE}, got {new_max}")

    old_max = image.max_value
    grid = image.grid
    scaled = [value * new_max // old_max for value in grid.data]
    if scaled and max(scaled) > new_max:
        raise ValueError(f"Sample value {max(grid.data)} exceeds max value {old_max}")
    grid.data[:] = bytes(scaled)
    grid.max_value = image.max_value = new_max
