"""Shared constants for Netpbm processing."""

# Header comments run from this byte to the end of the line
COMMENT_MARKER = ord("#")

# Header whitespace (space, tab, LF, VT, FF, CR)
WHITESPACE = b" \t\n\v\f\r"

# Samples are stored as single bytes; 16-bit maps are not supported
MAX_SAMPLE_VALUE = 255
DEFAULT_MAX_VALUE = 255

# Bitmap conversion: a pixel is set when its average < max // divisor
BITMAP_THRESHOLD_DIVISOR = 2

# Outline circles are drawn at radius * scale to match the reference renderer
CIRCLE_RADIUS_SCALE = 0.85
CIRCLE_TOLERANCE = 0.5
