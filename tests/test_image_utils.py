"""Tests for the Pillow-backed content provider."""

import os

import pytest
from PIL import Image

from zoomview.image_utils import (
    decode_image,
    list_images,
    read_image_dimensions,
    resolve_start_image,
    target_size,
    is_supported_image,
)


@pytest.fixture
def wide_png(tmp_path):
    path = tmp_path / "wide.png"
    Image.new("RGB", (40, 20), (200, 10, 10)).save(path)
    return str(path)


def test_read_dimensions(wide_png, tmp_path):
    assert read_image_dimensions(wide_png) == (40, 20)
    bogus = tmp_path / "bogus.png"
    bogus.write_bytes(b"not an image")
    assert read_image_dimensions(str(bogus)) is None


def test_decode_native_size(wide_png):
    content = decode_image(wide_png)
    assert content.size == (40, 20)
    assert content.png_bytes.startswith(b"\x89PNG")
    assert content.path == wide_png


def test_decode_to_target_width(wide_png):
    content = decode_image(wide_png, target_width=20)
    assert content.size == (20, 10)


def test_target_size():
    assert target_size(600, 300, None) == (600, 300)
    assert target_size(600, 300, 300) == (300, 150)
    assert target_size(3, 1000, 1) == (1, 333)


def test_list_and_resolve(tmp_path, wide_png):
    (tmp_path / "notes.txt").write_text("x")
    Image.new("RGB", (5, 5)).save(tmp_path / "a.jpg")
    images = list_images(str(tmp_path))
    assert [os.path.basename(p) for p in images] == ["a.jpg", "wide.png"]

    assert resolve_start_image(str(tmp_path)).endswith("a.jpg")
    assert resolve_start_image(wide_png) == wide_png
    assert resolve_start_image(str(tmp_path / "missing.png")) is None
    assert resolve_start_image(None) is None


def test_resolve_skips_unreadable_images(tmp_path, wide_png):
    bogus = tmp_path / "a_broken.png"
    bogus.write_bytes(b"not an image")
    assert resolve_start_image(str(tmp_path)) == wide_png
    assert resolve_start_image(str(bogus)) is None

    bogus.unlink()
    (tmp_path / "wide.png").write_bytes(b"also not an image")
    assert resolve_start_image(str(tmp_path)) is None


def test_supported_extensions():
    assert is_supported_image("photo.JPG")
    assert not is_supported_image("clip.mp4")
