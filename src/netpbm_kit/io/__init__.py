"""File I/O for Netpbm files."""

from netpbm_kit.io.reader import load, load_bytes
from netpbm_kit.io.writer import save

__all__ = ["load", "load_bytes", "save"]
