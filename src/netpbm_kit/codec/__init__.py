"""Encoding/decoding for Netpbm files."""

from netpbm_kit.codec.header import Header, format_header, parse_header
from netpbm_kit.codec.netpbm import decode, encode

__all__ = ["Header", "parse_header", "format_header", "decode", "encode"]
