"""Shared fixtures: small hand-built images of every family."""

from typing import Any

import pytest

from netpbm_kit.core.image import Image
from netpbm_kit.core.magic import Family, MagicNumber
from netpbm_kit.core.pixel import Pixel


def make_image(magic: MagicNumber | str, rows: list[list[Any]], max_value: int = 255) -> Image:
    """Build an image from a list of rows of pixel values."""
    height = len(rows)
    width = len(rows[0]) if rows else 0
    image = Image.new(magic, width, height, max_value)
    for y, row in enumerate(rows):
        for x, value in enumerate(row):
            image.grid.set(x, y, value)
    return image


@pytest.fixture
def bitmap_image() -> Image:
    """3x2 P1 bitmap with rows 1 0 1 / 0 1 0."""
    return make_image("P1", [[1, 0, 1], [0, 1, 0]])


@pytest.fixture
def graymap_image() -> Image:
    """3x2 P2 graymap with max 100."""
    return make_image("P2", [[0, 49, 50], [100, 7, 99]], max_value=100)


@pytest.fixture
def pixmap_image() -> Image:
    """3x2 P3 pixmap with distinct pixels."""
    return make_image("P3", [
        [Pixel(255, 0, 0), Pixel(0, 255, 0), Pixel(0, 0, 255)],
        [Pixel(10, 20, 30), Pixel(255, 255, 255), Pixel(0, 0, 0)],
    ])


@pytest.fixture(params=["P1", "P2", "P3", "P4", "P5", "P6"])
def any_image(request: pytest.FixtureRequest) -> Image:
    """One image per magic number, with non-trivial content."""
    magic = MagicNumber(request.param)
    if magic.channels == 3:
        rows = [
            [Pixel(x * 20, y * 30, (x + y) % 8) for x in range(5)]
            for y in range(4)
        ]
        return make_image(magic, rows, max_value=200)
    if magic.family is Family.GRAYMAP:
        rows = [[(x * 7 + y * 11) % 64 for x in range(5)] for y in range(4)]
        return make_image(magic, rows, max_value=63)
    rows = [[(x + y) % 3 == 0 for x in range(11)] for y in range(4)]
    return make_image(magic, rows)
