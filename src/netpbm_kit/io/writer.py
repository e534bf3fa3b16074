"""Save Netpbm files."""

from pathlib import Path
from typing import TYPE_CHECKING

from netpbm_kit.codec.netpbm import encode

if TYPE_CHECKING:
    from netpbm_kit.core.image import Image


def save(image: "Image", path: str | Path) -> None:
    """
    Save an image to disk.

    The file is encoded in memory and written in one call. A failed write
    leaves whatever reached the disk in place; write to a temporary path
    and rename it if atomic replacement is needed.
    """
    data = encode(image)

    with open(Path(path), 'wb') as f:
        f.write(data)
