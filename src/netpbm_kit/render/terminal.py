"""Render images for the terminal with half-block characters.

Each character cell shows two vertically stacked pixels: the foreground
color paints the top pixel through UPPER_HALF, the background the bottom.
"""

from rich.style import Style
from rich.text import Text

from netpbm_kit.core.image import Image
from netpbm_kit.core.magic import Family

UPPER_HALF = "▀"


def pixel_rgb(image: Image, x: int, y: int) -> tuple[int, int, int]:
    """Display color of a pixel, scaled to 0-255."""
    value = image.grid.get(x, y)
    if image.family is Family.BITMAP:
        # Set bits are black
        return (0, 0, 0) if value else (255, 255, 255)
    scale = 255 / image.max_value
    if image.family is Family.GRAYMAP:
        level = round(value * scale)
        return (level, level, level)
    return tuple(round(c * scale) for c in value)


def render_text(image: Image) -> Text:
    """Build a rich Text of (height + 1) // 2 lines."""
    text = Text()
    for top in range(0, image.height, 2):
        for x in range(image.width):
            fg = pixel_rgb(image, x, top)
            if top + 1 < image.height:
                style = Style(color=f"rgb{fg}", bgcolor=f"rgb{pixel_rgb(image, x, top + 1)}")
            else:
                style = Style(color=f"rgb{fg}")
            text.append(UPPER_HALF, style=style)
        text.append("\n")
    return text
