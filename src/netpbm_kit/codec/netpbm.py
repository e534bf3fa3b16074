"""Decode and encode complete Netpbm images."""

import logging
from typing import Callable

from netpbm_kit.codec import bitmap, pixmap
from netpbm_kit.codec.header import Header, format_header, parse_header
from netpbm_kit.core.grid import PixelGrid
from netpbm_kit.core.image import Image
from netpbm_kit.core.magic import MagicNumber

logger = logging.getLogger(__name__)

Decoder = Callable[[bytes, Header], bytearray]
Encoder = Callable[[PixelGrid], bytes]


def _bitmap_ascii(data: bytes, header: Header) -> bytearray:
    return bitmap.decode_ascii(data[header.offset:], header.width, header.height)


def _bitmap_binary(data: bytes, header: Header) -> bytearray:
    return bitmap.decode_binary(data[header.offset:], header.width, header.height)


def _pixmap_ascii(data: bytes, header: Header) -> bytearray:
    return pixmap.decode_ascii(
        data[header.offset:],
        header.width,
        header.height,
        header.magic.channels,
        header.max_value,
    )


def _pixmap_binary(data: bytes, header: Header) -> bytearray:
    return pixmap.decode_binary(
        data,
        header.offset,
        header.width,
        header.height,
        header.magic.channels,
        header.max_value,
    )


DECODERS: dict[MagicNumber, Decoder] = {
    MagicNumber.BITMAP_ASCII: _bitmap_ascii,
    MagicNumber.BITMAP_BINARY: _bitmap_binary,
    MagicNumber.GRAYMAP_ASCII: _pixmap_ascii,
    MagicNumber.GRAYMAP_BINARY: _pixmap_binary,
    MagicNumber.PIXMAP_ASCII: _pixmap_ascii,
    MagicNumber.PIXMAP_BINARY: _pixmap_binary,
}

ENCODERS: dict[MagicNumber, Encoder] = {
    MagicNumber.BITMAP_ASCII: bitmap.encode_ascii,
    MagicNumber.BITMAP_BINARY: bitmap.encode_binary,
    MagicNumber.GRAYMAP_ASCII: pixmap.encode_ascii,
    MagicNumber.GRAYMAP_BINARY: pixmap.encode_binary,
    MagicNumber.PIXMAP_ASCII: pixmap.encode_ascii,
    MagicNumber.PIXMAP_BINARY: pixmap.encode_binary,
}


def decode(data: bytes) -> Image:
    """
    Decode a Netpbm image from raw bytes.

    Raises FormatError if the header or payload is malformed; no partial
    image is ever returned.
    """
    header = parse_header(data)
    logger.debug(
        "Parsed %s header: %dx%d max=%d payload at %d",
        header.magic, header.width, header.height, header.max_value, header.offset,
    )
    samples = DECODERS[header.magic](data, header)
    grid = PixelGrid(header.width, header.height, header.magic.family, samples)
    return Image(header.magic, grid, header.max_value)


def encode(image: Image) -> bytes:
    """
    Encode an image in the family and sub-variant its magic selects.

    Raises ValueError if any sample exceeds the max value.
    """
    data = image.grid.data
    if data and max(data) > image.max_value:
        raise ValueError(f"Sample value {max(data)} exceeds max value {image.max_value}")
    head = format_header(image.magic, image.width, image.height, image.max_value)
    return head + ENCODERS[image.magic](image.grid)
