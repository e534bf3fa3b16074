"""Convert between netpbm-kit images and Pillow images.

Example:
    from netpbm_kit.interop import to_pil

    to_pil(netpbm_kit.load("photo.ppm")).show()
"""

from typing import Any

try:
    from PIL import Image as PILImage
    HAS_PIL = True
except ImportError:
    HAS_PIL = False

from netpbm_kit.core.grid import PixelGrid
from netpbm_kit.core.image import Image
from netpbm_kit.core.magic import Family, MagicNumber


def _check_pil() -> None:
    """Raise ImportError if PIL is not available."""
    if not HAS_PIL:
        raise ImportError(
            "Pillow is required for image interop. "
            "Install with: uv pip install netpbm-kit[image]"
        )


def _scaled(data: bytes, max_value: int) -> bytes:
    if max_value == 255:
        return bytes(data)
    return bytes(v * 255 // max_value for v in data)


def to_pil(image: Image) -> Any:
    """
    Convert to a Pillow image.

    Bitmaps become mode "1" (set bits black), graymaps "L" and pixmaps
    "RGB"; samples are rescaled to 0-255.
    """
    _check_pil()
    size = image.size()
    if image.family is Family.BITMAP:
        luma = bytes(0 if bit else 255 for bit in image.grid.data)
        return PILImage.frombytes("L", size, luma).convert("1")
    mode = "L" if image.family is Family.GRAYMAP else "RGB"
    return PILImage.frombytes(mode, size, _scaled(image.grid.data, image.max_value))


def from_pil(pil_image: Any, binary: bool = True) -> Image:
    """
    Convert a Pillow image.

    Mode "1" becomes a bitmap, "L" a graymap and every other mode is
    converted to "RGB" for a pixmap, all with max value 255.
    """
    _check_pil()
    width, height = pil_image.size
    if pil_image.mode == "1":
        luma = pil_image.convert("L").tobytes()
        bits = bytearray(0 if v else 1 for v in luma)
        grid = PixelGrid(width, height, Family.BITMAP, bits)
        return Image(MagicNumber.BITMAP_ASCII.with_binary(binary), grid)
    if pil_image.mode == "L":
        grid = PixelGrid(width, height, Family.GRAYMAP, bytearray(pil_image.tobytes()))
        return Image(MagicNumber.GRAYMAP_ASCII.with_binary(binary), grid, 255)
    rgb = pil_image.convert("RGB").tobytes()
    grid = PixelGrid(width, height, Family.PIXMAP, bytearray(rgb))
    return Image(MagicNumber.PIXMAP_ASCII.with_binary(binary), grid, 255)
