"""Exceptions raised by netpbm-kit."""


class NetpbmError(Exception):
    """Base class for all netpbm-kit errors."""


class FormatError(NetpbmError, ValueError):
    """Input bytes are not a valid Netpbm image.

    Raised for unknown magic numbers, malformed header integers, wrong
    pixel token counts, invalid bitmap tokens and truncated payloads.
    """


class BoundsViolation(NetpbmError, IndexError):
    """A pixel coordinate lies outside the grid."""
