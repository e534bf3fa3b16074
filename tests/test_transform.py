"""Tests for transforms and conversions."""

import pytest

from netpbm_kit.core.image import Image
from netpbm_kit.core.magic import Family, MagicNumber
from netpbm_kit.core.pixel import Pixel
from netpbm_kit.edit.convert import to_bitmap, to_graymap
from netpbm_kit.edit.transform import (
    flip_horizontal,
    flip_vertical,
    invert,
    rescale_max,
    rotate_90_clockwise,
)

from conftest import make_image


class TestInvert:
    """Tests for invert."""

    def test_bitmap_negation(self, bitmap_image: Image) -> None:
        invert(bitmap_image)
        assert list(bitmap_image.grid.rows()) == [[False, True, False], [True, False, True]]

    def test_max_minus_value(self, graymap_image: Image) -> None:
        invert(graymap_image)
        assert list(graymap_image.grid.rows()) == [[100, 51, 50], [0, 93, 1]]

    def test_pixmap(self) -> None:
        image = make_image("P3", [[Pixel(0, 10, 200)]], max_value=200)
        image.invert()
        assert image.grid.get(0, 0) == Pixel(200, 190, 0)

    def test_sample_above_max_leaves_image_unchanged(self, graymap_image: Image) -> None:
        graymap_image.grid.data[1] = 200
        before = bytes(graymap_image.grid.data)
        with pytest.raises(ValueError):
            invert(graymap_image)
        assert bytes(graymap_image.grid.data) == before

    def test_involution(self, any_image: Image) -> None:
        original = any_image.grid.copy()
        invert(any_image)
        invert(any_image)
        assert any_image.grid == original


class TestFlip:
    """Tests for horizontal and vertical mirroring."""

    def test_flip_horizontal(self, pixmap_image: Image) -> None:
        flip_horizontal(pixmap_image)
        assert list(pixmap_image.grid.rows())[0] == [
            Pixel(0, 0, 255), Pixel(0, 255, 0), Pixel(255, 0, 0),
        ]

    def test_flip_vertical(self, graymap_image: Image) -> None:
        flip_vertical(graymap_image)
        assert list(graymap_image.grid.rows()) == [[100, 7, 99], [0, 49, 50]]

    def test_odd_dimensions_keep_middle(self) -> None:
        image = make_image("P2", [[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        image.flip()
        image.flop()
        assert list(image.grid.rows()) == [[9, 8, 7], [6, 5, 4], [3, 2, 1]]

    def test_involutions(self, any_image: Image) -> None:
        original = any_image.grid.copy()
        flip_horizontal(any_image)
        flip_horizontal(any_image)
        assert any_image.grid == original
        flip_vertical(any_image)
        flip_vertical(any_image)
        assert any_image.grid == original


class TestRotate:
    """Tests for rotate_90_clockwise."""

    def test_quarter_turn(self, graymap_image: Image) -> None:
        rotate_90_clockwise(graymap_image)
        assert graymap_image.size() == (2, 3)
        assert list(graymap_image.grid.rows()) == [[100, 0], [7, 49], [99, 50]]

    def test_keeps_max_value(self, graymap_image: Image) -> None:
        rotate_90_clockwise(graymap_image)
        assert graymap_image.grid.max_value == 100

    def test_four_turns_restore(self, any_image: Image) -> None:
        original = any_image.grid.copy()
        for _ in range(4):
            any_image.rotate_90_cw()
        assert any_image.size() == original.size()
        assert any_image.grid == original


class TestRescaleMax:
    """Tests for rescale_max."""

    def test_truncating_scale(self, graymap_image: Image) -> None:
        rescale_max(graymap_image, 10)
        assert graymap_image.max_value == 10
        assert list(graymap_image.grid.rows()) == [[0, 4, 5], [10, 0, 9]]

    def test_zero_becomes_one(self, graymap_image: Image) -> None:
        graymap_image.set_max_value(0)
        assert graymap_image.max_value == 1
        assert list(graymap_image.grid.rows()) == [[0, 0, 0], [1, 0, 0]]

    def test_scale_up(self) -> None:
        image = make_image("P3", [[Pixel(1, 2, 3)]], max_value=3)
        image.set_max_value(255)
        assert image.grid.get(0, 0) == Pixel(85, 170, 255)

    def test_bitmap_untouched(self, bitmap_image: Image) -> None:
        before = bitmap_image.grid.copy()
        rescale_max(bitmap_image, 7)
        assert bitmap_image.max_value == 1
        assert bitmap_image.grid == before

    def test_above_byte_rejected(self, graymap_image: Image) -> None:
        with pytest.raises(ValueError):
            rescale_max(graymap_image, 300)

    def test_sample_above_max_leaves_image_unchanged(self, graymap_image: Image) -> None:
        graymap_image.grid.data[1] = 200
        before = bytes(graymap_image.grid.data)
        with pytest.raises(ValueError):
            rescale_max(graymap_image, 200)
        assert bytes(graymap_image.grid.data) == before
        assert graymap_image.max_value == 100

    def test_grid_follows_new_max(self, graymap_image: Image) -> None:
        rescale_max(graymap_image, 10)
        assert graymap_image.grid.max_value == 10
        with pytest.raises(ValueError):
            graymap_image.grid.set(0, 0, 11)


class TestConvert:
    """Tests for cross-family conversions."""

    def test_to_graymap_average(self, pixmap_image: Image) -> None:
        gray = to_graymap(pixmap_image)
        assert gray.magic is MagicNumber.GRAYMAP_ASCII
        assert gray.max_value == 255
        assert list(gray.grid.rows()) == [[85, 85, 85], [20, 255, 0]]

    def test_to_graymap_leaves_source(self, pixmap_image: Image) -> None:
        before = pixmap_image.grid.copy()
        pixmap_image.to_graymap(binary=True).grid.set(0, 0, 0)
        assert pixmap_image.grid == before
        assert pixmap_image.family is Family.PIXMAP

    def test_to_graymap_binary(self, pixmap_image: Image) -> None:
        assert to_graymap(pixmap_image, binary=True).magic is MagicNumber.GRAYMAP_BINARY

    def test_to_graymap_from_bitmap(self, bitmap_image: Image) -> None:
        with pytest.raises(ValueError):
            to_graymap(bitmap_image)

    def test_to_bitmap_threshold(self, graymap_image: Image) -> None:
        bits = to_bitmap(graymap_image)
        assert bits.magic is MagicNumber.BITMAP_ASCII
        # max 100: averages below 50 are set
        assert list(bits.grid.rows()) == [[True, True, False], [False, True, False]]

    def test_to_bitmap_from_pixmap(self, pixmap_image: Image) -> None:
        bits = pixmap_image.to_bitmap(binary=True)
        assert bits.magic is MagicNumber.BITMAP_BINARY
        # averages 85, 85, 85 / 20, 255, 0 against threshold 127
        assert list(bits.grid.rows()) == [[True, True, True], [True, False, True]]

    def test_to_bitmap_from_bitmap_copies(self, bitmap_image: Image) -> None:
        bits = to_bitmap(bitmap_image)
        assert bits.grid == bitmap_image.grid
        assert bits.grid is not bitmap_image.grid
