# tests/utils/test_image.py

import numpy as np
import pytest
from PIL import Image

from tilemash.components import PixelBuffer
from tilemash.errors import UnsupportedFormatError
from tilemash.types import TextureFormat
from tilemash.utils.image import (
    buffer_from_array,
    buffer_from_image,
    buffer_to_array,
    buffer_to_image,
)
from tests.test_utils import BLUE, GREEN, RED, create_image


def test_buffer_to_array_shares_memory() -> None:
    image = create_image((2, 1), [RED, GREEN])
    arr = buffer_to_array(image)
    assert arr.shape == (1, 2, 4)
    assert arr.dtype == np.uint8
    arr[0, 1] = [0, 0, 255, 255]
    assert image.get_pixel(1, 0) == BLUE


def test_buffer_from_array_copies() -> None:
    arr = np.zeros((2, 3, 4), dtype=np.uint8)
    arr[1, 2] = list(RED)
    buffer = buffer_from_array(arr)
    assert buffer.size == (3, 2)
    assert buffer.get_pixel(2, 1) == RED
    arr[1, 2] = 0
    assert buffer.get_pixel(2, 1) == RED


def test_buffer_from_array_two_dimensional_single_channel() -> None:
    arr = np.array([[1, 2], [3, 4]], dtype=np.uint8)
    buffer = buffer_from_array(arr, TextureFormat.R8_UNORM)
    assert bytes(buffer.data) == bytes([1, 2, 3, 4])


def test_buffer_from_array_channel_mismatch_fails() -> None:
    with pytest.raises(UnsupportedFormatError):
        buffer_from_array(np.zeros((2, 2, 3), dtype=np.uint8))


def test_buffer_to_image_rgba() -> None:
    image = buffer_to_image(create_image((2, 1), [RED, GREEN]))
    assert image.mode == "RGBA"
    assert image.size == (2, 1)
    assert image.getpixel((0, 0)) == (255, 0, 0, 255)
    assert image.getpixel((1, 0)) == (0, 255, 0, 255)


def test_bgra_channels_are_swapped_both_ways() -> None:
    bgra_red = PixelBuffer.filled(1, 1, bytes([0, 0, 255, 255]), TextureFormat.BGRA8_UNORM)
    image = buffer_to_image(bgra_red)
    assert image.getpixel((0, 0)) == (255, 0, 0, 255)
    back = buffer_from_image(image, TextureFormat.BGRA8_UNORM)
    assert back == bgra_red


def test_buffer_from_image_converts_mode() -> None:
    rgb = Image.new("RGB", (3, 2), (0, 0, 255))
    buffer = buffer_from_image(rgb)
    assert buffer.format == TextureFormat.RGBA8_UNORM_SRGB
    assert buffer.size == (3, 2)
    assert all(pixel == BLUE for _, _, pixel in buffer.pixels())


def test_grayscale_round_trip() -> None:
    gray = PixelBuffer(2, 1, bytearray([10, 200]), TextureFormat.R8_UNORM)
    image = buffer_to_image(gray)
    assert image.mode == "L"
    assert buffer_from_image(image, TextureFormat.R8_UNORM) == gray


def test_float_formats_have_no_pillow_mode() -> None:
    buffer = PixelBuffer.blank(1, 1, TextureFormat.RGBA16_FLOAT)
    with pytest.raises(UnsupportedFormatError):
        buffer_to_image(buffer)
    with pytest.raises(UnsupportedFormatError):
        buffer_from_image(Image.new("RGBA", (1, 1)), TextureFormat.RGBA32_FLOAT)
