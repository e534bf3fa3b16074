"""Payload codec for graymaps and pixmaps (P2, P3, P5, P6).

Both families store ``channels`` samples per pixel, one byte each in the
binary variants. The binary payload is taken from the end of the input
rather than from the header offset, which tolerates any single-byte
separator after the max value but misreads files with trailing data.
"""

import logging

from netpbm_kit.core.grid import PixelGrid
from netpbm_kit.errors import FormatError

logger = logging.getLogger(__name__)


def _check_max(samples: bytes | bytearray, max_value: int) -> None:
    if samples and max(samples) > max_value:
        raise FormatError(f"Sample value {max(samples)} exceeds max value {max_value}")


def decode_ascii(
    payload: bytes, width: int, height: int, channels: int, max_value: int
) -> bytearray:
    tokens = payload.split()
    expected = width * height * channels
    if len(tokens) != expected:
        raise FormatError(f"Expected {expected} sample tokens, found {len(tokens)}")
    samples = bytearray(expected)
    for i, token in enumerate(tokens):
        if not token.isdigit():
            raise FormatError(f"Invalid sample token {token!r} at index {i}")
        value = int(token)
        if value > max_value:
            raise FormatError(f"Sample value {value} exceeds max value {max_value}")
        samples[i] = value
    return samples


def decode_binary(
    data: bytes, offset: int, width: int, height: int, channels: int, max_value: int
) -> bytearray:
    """Read the last width*height*channels bytes of data."""
    expected = width * height * channels
    available = len(data) - offset
    if available < expected:
        raise FormatError(
            f"Truncated pixel payload: expected {expected} bytes, got {available}"
        )
    if available > expected:
        logger.debug(
            "Skipping %d byte(s) between header and tail-aligned payload",
            available - expected,
        )
    samples = bytearray(data[len(data) - expected:])
    _check_max(samples, max_value)
    return samples


def encode_ascii(grid: PixelGrid) -> bytes:
    stride = grid.width * grid.channels
    data = grid.data
    lines = []
    for y in range(grid.height):
        row = data[y * stride:(y + 1) * stride]
        lines.append("".join(f"{value} " for value in row) + "\n")
    return "".join(lines).encode("ascii")


def encode_binary(grid: PixelGrid) -> bytes:
    return bytes(grid.data)
