"""Cross-family conversions.

Each conversion derives a new image and leaves the source untouched.
Luma is the naive channel average; no perceptual weighting is applied.
"""

from netpbm_kit.core.constants import BITMAP_THRESHOLD_DIVISOR
from netpbm_kit.core.grid import PixelGrid
from netpbm_kit.core.image import Image
from netpbm_kit.core.magic import Family, MagicNumber


def _averages(image: Image) -> bytearray:
    """Per-pixel integer mean of the channels, row-major."""
    data = image.grid.data
    channels = image.grid.channels
    if channels == 1:
        return bytearray(data)
    return bytearray(
        sum(data[i:i + channels]) // channels
        for i in range(0, len(data), channels)
    )


def to_graymap(image: Image, binary: bool = False) -> Image:
    """Derive a graymap whose values are (R+G+B) // 3, keeping max."""
    if image.family is Family.BITMAP:
        raise ValueError("Cannot derive a graymap from a bitmap")
    magic = MagicNumber.GRAYMAP_ASCII.with_binary(binary)
    grid = PixelGrid(image.width, image.height, Family.GRAYMAP, _averages(image))
    return Image(magic, grid, image.max_value)


def to_bitmap(image: Image, binary: bool = False) -> Image:
    """
    Derive a bitmap by thresholding the channel average.

    A pixel is set (foreground, black) when its average is below
    max // 2. With max=100 an average of 49 is set and 50 is not.
    """
    magic = MagicNumber.BITMAP_ASCII.with_binary(binary)
    if image.family is Family.BITMAP:
        return Image(magic, image.grid.copy())

    threshold = image.max_value // BITMAP_THRESHOLD_DIVISOR
    bits = bytearray(1 if avg < threshold else 0 for avg in _averages(image))
    grid = PixelGrid(image.width, image.height, Family.BITMAP, bits)
    return Image(magic, grid)
