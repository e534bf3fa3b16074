"""Magic numbers and pixel families of the Netpbm formats."""

from enum import Enum

from netpbm_kit.errors import FormatError


class Family(Enum):
    """Pixel family, fixed per image."""
    BITMAP = "bitmap"     # one bit per pixel (PBM)
    GRAYMAP = "graymap"   # one byte per pixel (PGM)
    PIXMAP = "pixmap"     # three bytes per pixel (PPM)

    @property
    def channels(self) -> int:
        return 3 if self is Family.PIXMAP else 1


class MagicNumber(Enum):
    """The six classic Netpbm magic numbers."""
    BITMAP_ASCII = "P1"
    GRAYMAP_ASCII = "P2"
    PIXMAP_ASCII = "P3"
    BITMAP_BINARY = "P4"
    GRAYMAP_BINARY = "P5"
    PIXMAP_BINARY = "P6"

    @classmethod
    def from_tag(cls, tag: "str | MagicNumber") -> "MagicNumber":
        """Look up a magic number by its tag (e.g. ``"P6"``)."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            raise FormatError(f"Unknown magic number: {tag!r}") from None

    @property
    def family(self) -> Family:
        return _FAMILIES[self]

    @property
    def is_binary(self) -> bool:
        return self in _BINARY

    @property
    def channels(self) -> int:
        return self.family.channels

    def with_binary(self, binary: bool) -> "MagicNumber":
        """Return the ASCII or binary tag of the same family."""
        return _BY_FAMILY[self.family, binary]

    def __str__(self) -> str:
        return self.value


_FAMILIES = {
    MagicNumber.BITMAP_ASCII: Family.BITMAP,
    MagicNumber.BITMAP_BINARY: Family.BITMAP,
    MagicNumber.GRAYMAP_ASCII: Family.GRAYMAP,
    MagicNumber.GRAYMAP_BINARY: Family.GRAYMAP,
    MagicNumber.PIXMAP_ASCII: Family.PIXMAP,
    MagicNumber.PIXMAP_BINARY: Family.PIXMAP,
}

_BINARY = frozenset({
    MagicNumber.BITMAP_BINARY,
    MagicNumber.GRAYMAP_BINARY,
    MagicNumber.PIXMAP_BINARY,
})

_BY_FAMILY = {(magic.family, magic.is_binary): magic for magic in MagicNumber}
