"""Image - a Netpbm picture with its header fields."""

from dataclasses import dataclass, field
from pathlib import Path

from netpbm_kit.core.constants import DEFAULT_MAX_VALUE, MAX_SAMPLE_VALUE
from netpbm_kit.core.grid import PixelGrid
from netpbm_kit.core.magic import Family, MagicNumber


@dataclass
class Image:
    """
    Represents a complete Netpbm image.

    Combines the magic number (which fixes both the pixel family and the
    ASCII/binary encoding used on save), the max sample value and the
    pixel grid. Width and height are always those of the grid.
    """
    magic: MagicNumber
    grid: PixelGrid
    max_value: int = DEFAULT_MAX_VALUE
    source_path: Path | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.grid.family is not self.magic.family:
            raise ValueError(
                f"{self.magic} expects a {self.magic.family.value} grid, "
                f"got {self.grid.family.value}"
            )
        if self.magic.family is Family.BITMAP:
            self.max_value = 1
        elif self.max_value == 0:
            # Avoid division by zero when rescaling
            self.max_value = 1
        elif not 0 < self.max_value <= MAX_SAMPLE_VALUE:
            raise ValueError(f"max_value must be 1-{MAX_SAMPLE_VALUE}, got {self.max_value}")
        data = self.grid.data
        if data and max(data) > self.max_value:
            raise ValueError(f"Sample value {max(data)} exceeds max value {self.max_value}")
        self.grid.max_value = self.max_value

    @classmethod
    def new(
        cls,
        magic: MagicNumber | str,
        width: int,
        height: int,
        max_value: int = DEFAULT_MAX_VALUE,
    ) -> "Image":
        """Create a blank image (all samples zero)."""
        magic = MagicNumber.from_tag(magic)
        return cls(magic, PixelGrid(width, height, magic.family), max_value)

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def family(self) -> Family:
        return self.magic.family

    def size(self) -> tuple[int, int]:
        return self.grid.size()

    def set_magic(self, magic: MagicNumber | str) -> None:
        """Re-tag the image, e.g. from P3 to P6, without touching pixels."""
        magic = MagicNumber.from_tag(magic)
        if magic.family is not self.family:
            raise ValueError(f"Cannot re-tag a {self.family.value} image as {magic}")
        self.magic = magic

    # I/O

    @classmethod
    def load(cls, path: str | Path) -> "Image":
        """Load a Netpbm file from disk."""
        from netpbm_kit.io.reader import load
        return load(path)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Image":
        from netpbm_kit.codec.netpbm import decode
        return decode(data)

    def to_bytes(self) -> bytes:
        from netpbm_kit.codec.netpbm import encode
        return encode(self)

    def save(self, path: str | Path) -> None:
        """Save this image to disk in the encoding its magic selects."""
        from netpbm_kit.io.writer import save
        save(self, path)

    # Transforms

    def invert(self) -> None:
        from netpbm_kit.edit.transform import invert
        invert(self)

    def flip(self) -> None:
        """Mirror left to right."""
        from netpbm_kit.edit.transform import flip_horizontal
        flip_horizontal(self)

    def flop(self) -> None:
        """Mirror top to bottom."""
        from netpbm_kit.edit.transform import flip_vertical
        flip_vertical(self)

    def rotate_90_cw(self) -> None:
        from netpbm_kit.edit.transform import rotate_90_clockwise
        rotate_90_clockwise(self)

    def set_max_value(self, max_value: int) -> None:
        from netpbm_kit.edit.transform import rescale_max
        rescale_max(self, max_value)

    def to_graymap(self, binary: bool = False) -> "Image":
        from netpbm_kit.edit.convert import to_graymap
        return to_graymap(self, binary=binary)

    def to_bitmap(self, binary: bool = False) -> "Image":
        from netpbm_kit.edit.convert import to_bitmap
        return to_bitmap(self, binary=binary)
