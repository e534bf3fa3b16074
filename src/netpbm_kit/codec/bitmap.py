"""Payload codec for two-value bitmaps (P1 and P4)."""

from netpbm_kit.core.grid import PixelGrid
from netpbm_kit.errors import FormatError


def row_stride(width: int) -> int:
    """Bytes per packed row: ceil(width / 8)."""
    return (width + 7) // 8


def pack_row(bits: bytes | bytearray) -> bytes:
    """Pack one row of 0/1 samples, MSB first, zero-padded to a byte boundary."""
    packed = bytearray(row_stride(len(bits)))
    for x, bit in enumerate(bits):
        if bit:
            packed[x >> 3] |= 0x80 >> (x & 7)
    return bytes(packed)


def unpack_row(packed: bytes, width: int) -> bytearray:
    """Unpack width 0/1 samples from an MSB-first packed row."""
    return bytearray((packed[x >> 3] >> (7 - (x & 7))) & 1 for x in range(width))


def decode_ascii(payload: bytes, width: int, height: int) -> bytearray:
    tokens = payload.split()
    expected = width * height
    if len(tokens) != expected:
        raise FormatError(f"Expected {expected} bitmap tokens, found {len(tokens)}")
    samples = bytearray(expected)
    for i, token in enumerate(tokens):
        if token == b"1":
            samples[i] = 1
        elif token != b"0":
            raise FormatError(f"Invalid bitmap token {token!r} at pixel {i}")
    return samples


def decode_binary(payload: bytes, width: int, height: int) -> bytearray:
    stride = row_stride(width)
    if len(payload) < stride * height:
        raise FormatError(
            f"Truncated bitmap payload: expected {stride * height} bytes, got {len(payload)}"
        )
    samples = bytearray()
    for y in range(height):
        samples.extend(unpack_row(payload[y * stride:(y + 1) * stride], width))
    return samples


def encode_ascii(grid: PixelGrid) -> bytes:
    out = bytearray()
    data = grid.data
    for y in range(grid.height):
        row = data[y * grid.width:(y + 1) * grid.width]
        out.extend(b"".join(b"1 " if bit else b"0 " for bit in row))
        out.extend(b"\n")
    return bytes(out)


def encode_binary(grid: PixelGrid) -> bytes:
    data = grid.data
    return b"".join(
        pack_row(data[y * grid.width:(y + 1) * grid.width])
        for y in range(grid.height)
    )
