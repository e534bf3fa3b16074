"""Core data structures for Netpbm images."""

from netpbm_kit.core.grid import PixelGrid
from netpbm_kit.core.image import Image
from netpbm_kit.core.magic import Family, MagicNumber
from netpbm_kit.core.pixel import Pixel, Point

__all__ = ["PixelGrid", "Image", "Family", "MagicNumber", "Pixel", "Point"]
