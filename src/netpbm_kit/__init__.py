"""
netpbm-kit: Python library for Netpbm images

Read, edit, draw on and write PBM, PGM and PPM files.

Quick Start:
    >>> import netpbm_kit as pnm
    >>> img = pnm.load("photo.ppm")
    >>> img.flip()
    >>> pnm.draw_line(img.grid, (0, 0), (10, 10), pnm.Pixel(255, 0, 0))
    >>> img.set_magic("P6")
    >>> img.save("photo-edited.ppm")

Features:
    - P1-P6 decoding and encoding (ASCII and binary sub-variants)
    - Mutable flat pixel grid with bounds-checked access
    - Transforms: invert, flip, flop, rotate, rescale max value
    - Conversions: pixmap to graymap, graymap/pixmap to bitmap
    - Rasterization: lines, rectangles, circles, triangles (outlined or filled)
"""

__version__ = "0.1.0"

# Core types
from netpbm_kit.core.grid import PixelGrid
from netpbm_kit.core.image import Image
from netpbm_kit.core.magic import Family, MagicNumber
from netpbm_kit.core.pixel import Pixel, Point

# Errors
from netpbm_kit.errors import BoundsViolation, FormatError, NetpbmError

# Convenience functions
from netpbm_kit.codec.netpbm import decode, encode
from netpbm_kit.io.reader import load, load_bytes
from netpbm_kit.io.writer import save

# Drawing
from netpbm_kit.draw import (
    draw_circle,
    draw_filled_circle,
    draw_filled_rectangle,
    draw_filled_triangle,
    draw_line,
    draw_rectangle,
    draw_triangle,
)

__all__ = [
    # Version
    "__version__",
    # Core types
    "PixelGrid",
    "Image",
    "Family",
    "MagicNumber",
    "Pixel",
    "Point",
    # Errors
    "NetpbmError",
    "FormatError",
    "BoundsViolation",
    # I/O
    "decode",
    "encode",
    "load",
    "load_bytes",
    "save",
    # Drawing
    "draw_line",
    "draw_rectangle",
    "draw_filled_rectangle",
    "draw_circle",
    "draw_filled_circle",
    "draw_triangle",
    "draw_filled_triangle",
]
