"""Load Netpbm files."""

from pathlib import Path

from netpbm_kit.codec.netpbm import decode
from netpbm_kit.core.image import Image


def load(path: str | Path) -> Image:
    """
    Load a Netpbm image from disk.

    The whole file is read before parsing. OSError propagates unchanged;
    malformed content raises FormatError.
    """
    path = Path(path)

    with open(path, 'rb') as f:
        data = f.read()

    image = decode(data)
    image.source_path = path
    return image


def load_bytes(data: bytes) -> Image:
    """Load a Netpbm image from raw bytes."""
    return decode(data)
