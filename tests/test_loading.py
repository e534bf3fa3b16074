"""Tests for loading and saving Netpbm files on disk."""

from pathlib import Path

import pytest

import netpbm_kit as pnm
from netpbm_kit.core.image import Image
from netpbm_kit.errors import FormatError


class TestLoadSave:
    """File round trips through the io layer."""

    def test_save_and_load(self, any_image: Image, tmp_path: Path) -> None:
        path = tmp_path / f"image.{any_image.magic}"
        pnm.save(any_image, path)
        loaded = pnm.load(path)
        assert loaded == any_image
        assert loaded.source_path == path

    def test_image_methods(self, bitmap_image: Image, tmp_path: Path) -> None:
        path = tmp_path / "bits.pbm"
        bitmap_image.save(path)
        assert path.read_bytes() == b"P1\n3 2\n1 0 1 \n0 1 0 \n"
        assert Image.load(path) == bitmap_image

    def test_bytes_helpers(self, pixmap_image: Image) -> None:
        data = pixmap_image.to_bytes()
        assert Image.from_bytes(data) == pixmap_image
        assert pnm.load_bytes(data) == pixmap_image

    def test_demo_workflow(self, tmp_path: Path) -> None:
        """Open, invert, re-tag, save and read back a bitmap."""
        source = tmp_path / "in.pbm"
        source.write_bytes(b"P1\n# demo\n4 2\n1 1 0 0\n0 0 1 1\n")
        image = pnm.load(source)
        image.invert()
        image.set_magic("P4")
        dest = tmp_path / "out.pbm"
        image.save(dest)
        assert dest.read_bytes() == b"P4\n4 2\n\x30\xc0"

    def test_draw_then_save(self, tmp_path: Path) -> None:
        image = Image.new("P6", 4, 4)
        pnm.draw_line(image.grid, (0, 0), (3, 3), pnm.Pixel(255, 0, 0))
        path = tmp_path / "line.ppm"
        image.save(path)
        loaded = pnm.load(path)
        assert loaded.grid.get(2, 2) == pnm.Pixel(255, 0, 0)
        assert loaded.grid.get(2, 1) == pnm.Pixel(0, 0, 0)

    def test_draw_color_above_max(self, tmp_path: Path) -> None:
        image = Image.new("P6", 4, 4, max_value=15)
        with pytest.raises(ValueError):
            pnm.draw_line(image.grid, (0, 0), (3, 3), pnm.Pixel(255, 0, 0))
        assert not any(image.grid.data)

        pnm.draw_line(image.grid, (0, 0), (3, 3), pnm.Pixel(15, 0, 7))
        path = tmp_path / "low.ppm"
        image.save(path)
        loaded = pnm.load(path)
        assert loaded.max_value == 15
        assert loaded.grid == image.grid


class TestErrors:
    """Failures propagate to the caller."""

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            pnm.load(tmp_path / "missing.ppm")

    def test_unwritable_path(self, bitmap_image: Image, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            pnm.save(bitmap_image, tmp_path / "no-such-dir" / "out.pbm")

    def test_malformed_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.ppm"
        path.write_bytes(b"P6\n2 2\n255\n\x00\x00")
        with pytest.raises(FormatError):
            pnm.load(path)
