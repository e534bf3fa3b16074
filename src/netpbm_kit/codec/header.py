"""Netpbm header parsing and formatting."""

from dataclasses import dataclass

from netpbm_kit.core.constants import COMMENT_MARKER, MAX_SAMPLE_VALUE, WHITESPACE
from netpbm_kit.core.magic import Family, MagicNumber
from netpbm_kit.errors import FormatError


@dataclass(frozen=True)
class Header:
    """Parsed header fields plus the offset where the payload begins."""
    magic: MagicNumber
    width: int
    height: int
    max_value: int = 1
    offset: int = 0

    @property
    def sample_count(self) -> int:
        """Number of samples in the payload (pixels times channels)."""
        return self.width * self.height * self.magic.channels


def _skip_blanks(data: bytes, pos: int) -> int:
    """Skip whitespace and comment lines starting at pos."""
    while pos < len(data):
        byte = data[pos]
        if byte == COMMENT_MARKER:
            end = data.find(b"\n", pos)
            pos = len(data) if end == -1 else end + 1
        elif byte in WHITESPACE:
            pos += 1
        else:
            break
    return pos


def _next_token(data: bytes, pos: int) -> tuple[bytes, int]:
    pos = _skip_blanks(data, pos)
    if pos >= len(data):
        raise FormatError("Unexpected end of data in header")
    start = pos
    while pos < len(data) and data[pos] not in WHITESPACE and data[pos] != COMMENT_MARKER:
        pos += 1
    return data[start:pos], pos


def _parse_int(token: bytes, name: str) -> int:
    if not token.isdigit():
        raise FormatError(f"Invalid {name}: {token!r}")
    return int(token)


def parse_header(data: bytes) -> Header:
    """
    Parse the header at the start of data.

    Bitmaps carry three tokens (magic, width, height), graymaps and
    pixmaps a fourth (max value). Comment lines are skipped. Exactly one
    whitespace byte after the last token is consumed.
    """
    token, pos = _next_token(data, 0)
    magic = MagicNumber.from_tag(token.decode("ascii", errors="replace"))

    token, pos = _next_token(data, pos)
    width = _parse_int(token, "width")
    token, pos = _next_token(data, pos)
    height = _parse_int(token, "height")

    max_value = 1
    if magic.family is not Family.BITMAP:
        token, pos = _next_token(data, pos)
        max_value = _parse_int(token, "max value")
        if max_value > MAX_SAMPLE_VALUE:
            raise FormatError(
                f"Max value {max_value} exceeds {MAX_SAMPLE_VALUE} (16-bit samples unsupported)"
            )

    if pos < len(data) and data[pos] in WHITESPACE:
        pos += 1

    return Header(magic, width, height, max_value, pos)


def format_header(magic: MagicNumber, width: int, height: int, max_value: int = 1) -> bytes:
    """Render a header: magic, dimensions and (gray/color only) max value, one per line."""
    lines = [str(magic), f"{width} {height}"]
    if magic.family is not Family.BITMAP:
        lines.append(str(max_value))
    return ("\n".join(lines) + "\n").encode("ascii")
