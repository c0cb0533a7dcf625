"""Tests for decoding files and PIL images into sample arrays."""

import numpy as np
import pytest
from PIL import Image

from ssimulacra.decoder import image_to_array, load_image
from ssimulacra.errors import DecodeError


class TestImageToArray:
    def test_rgb(self):
        arr = image_to_array(Image.new("RGB", (12, 10), (1, 2, 3)))
        assert arr.shape == (10, 12, 3)
        assert arr.dtype == np.uint8
        assert arr[0, 0].tolist() == [1, 2, 3]

    def test_rgba(self):
        arr = image_to_array(Image.new("RGBA", (8, 8), (1, 2, 3, 4)))
        assert arr.shape == (8, 8, 4)

    def test_grayscale_keeps_channel_axis(self):
        arr = image_to_array(Image.new("L", (8, 9), 77))
        assert arr.shape == (9, 8, 1)
        assert np.all(arr == 77)

    def test_gray_alpha_becomes_rgba(self):
        arr = image_to_array(Image.new("LA", (8, 8), (50, 200)))
        assert arr.shape == (8, 8, 4)
        assert arr[0, 0].tolist() == [50, 50, 50, 200]

    def test_palette_without_transparency(self):
        img = Image.new("RGB", (8, 8), (10, 20, 30)).convert("P")
        assert image_to_array(img).shape == (8, 8, 3)

    def test_palette_with_transparency(self):
        img = Image.new("RGB", (8, 8), (10, 20, 30)).convert("P")
        img.info["transparency"] = 0
        assert image_to_array(img).shape == (8, 8, 4)

    def test_bilevel(self):
        arr = image_to_array(Image.new("1", (8, 8), 1))
        assert arr.shape == (8, 8, 1)
        assert np.all(arr == 255)

    def test_sixteen_bit_gray_keeps_high_byte(self):
        wide = np.array([[0, 256, 65535]] * 8, dtype=np.uint16)
        arr = image_to_array(Image.fromarray(wide))
        assert arr.shape == (8, 3, 1)
        assert arr[0, :, 0].tolist() == [0, 1, 255]

    def test_cmyk_becomes_rgb(self):
        arr = image_to_array(Image.new("CMYK", (8, 8), (0, 0, 0, 0)))
        assert arr.shape == (8, 8, 3)


class TestLoadImage:
    def test_round_trip_png(self, tmp_path):
        src = np.random.RandomState(0).randint(0, 256, (16, 20, 3)).astype(np.uint8)
        path = tmp_path / "img.png"
        Image.fromarray(src).save(path)
        assert np.array_equal(load_image(path), src)

    def test_accepts_str_path(self, tmp_path):
        path = tmp_path / "gray.png"
        Image.new("L", (8, 8), 5).save(path)
        assert load_image(str(path)).shape == (8, 8, 1)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DecodeError) as exc_info:
            load_image(tmp_path / "missing.png")
        assert "missing.png" in exc_info.value.path

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "notes.png"
        path.write_text("definitely not a png")
        with pytest.raises(DecodeError) as exc_info:
            load_image(path)
        assert exc_info.value.__cause__ is not None
