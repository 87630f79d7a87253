"""Tests for Pillow-based image I/O and display helpers."""

import os

import numpy as np
import pytest
from PIL import Image

from pixelstretch import PixelBuffer
from pixelstretch.io import (
    default_output_path,
    default_starting_pixel,
    display_size,
    fit_to_display,
    load_image,
    save_image,
    to_pil,
)


@pytest.mark.unit
def test_png_round_trip(buffers, tmp_path):
    buf = buffers.random(7, 5)
    path = tmp_path / "img.png"
    save_image(buf, path)
    assert load_image(path) == buf


@pytest.mark.unit
def test_grayscale_is_converted_to_rgba(tmp_path):
    path = tmp_path / "gray.png"
    Image.fromarray(np.full((3, 2), 77, dtype=np.uint8)).save(path)
    buf = load_image(path)
    assert (buf.width, buf.height) == (2, 3)
    np.testing.assert_array_equal(buf.to_array()[0, 0], [77, 77, 77, 255])


@pytest.mark.unit
def test_jpeg_drops_alpha(buffers, tmp_path):
    path = tmp_path / "img.jpg"
    save_image(buffers.random(4, 4), path)
    buf = load_image(path)
    assert (buf.width, buf.height) == (4, 4)
    assert np.all(buf.to_array()[..., 3] == 255)


@pytest.mark.unit
def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image(tmp_path / "nope.png")


@pytest.mark.unit
def test_to_pil_mode(buffers):
    img = to_pil(buffers.random(3, 2))
    assert img.mode == "RGBA"
    assert img.size == (3, 2)


@pytest.mark.unit
def test_default_output_path():
    assert default_output_path("photo.png") == "stretched_photo.png"
    assert default_output_path(os.path.join("a", "b", "c.jpg")) == os.path.join("a", "b", "stretched_c.jpg")


@pytest.mark.unit
def test_default_starting_pixel():
    assert default_starting_pixel(640, 480) == 240
    assert default_starting_pixel(5, 9) == 2
    assert default_starting_pixel(1, 1) == 0


@pytest.mark.unit
def test_display_size():
    assert display_size(500, 400) == (500, 400)
    assert display_size(1200, 600) == (600, 300)
    assert display_size(300, 1500) == (120, 600)
    assert display_size(601, 1) == (600, 1)
    assert display_size(100, 50, max_size=10) == (10, 5)
    with pytest.raises(ValueError):
        display_size(10, 10, max_size=0)


@pytest.mark.unit
def test_fit_to_display(buffers):
    buf = buffers.random(40, 20)
    small = fit_to_display(buf, max_size=10)
    assert (small.width, small.height) == (10, 5)
    assert fit_to_display(buf, max_size=40) is buf
    assert isinstance(small, PixelBuffer)
