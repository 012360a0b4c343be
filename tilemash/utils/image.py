"""Conversions between pixel buffers and Pillow / NumPy.

These adapters are the glue to a Python host that keeps decoded images as
``PIL.Image.Image`` or ``numpy`` arrays. They never decode files themselves.
"""

from typing import Dict

import numpy as np
import numpy.typing as npt
from PIL import Image

from tilemash.components import DEFAULT_TEXTURE_FORMAT, PixelBuffer
from tilemash.errors import UnsupportedFormatError
from tilemash.types import TextureFormat

# Type aliases for clarity
UInt8Array = npt.NDArray[np.uint8]

_PIL_MODES: Dict[TextureFormat, str] = {
    TextureFormat.RGBA8_UNORM_SRGB: "RGBA",
    TextureFormat.RGBA8_UNORM: "RGBA",
    TextureFormat.BGRA8_UNORM_SRGB: "RGBA",
    TextureFormat.BGRA8_UNORM: "RGBA",
    TextureFormat.R8_UNORM: "L",
    TextureFormat.RG8_UNORM: "LA",
}

_BGRA_FORMATS = (TextureFormat.BGRA8_UNORM_SRGB, TextureFormat.BGRA8_UNORM)


def buffer_to_array(buffer: PixelBuffer) -> UInt8Array:
    """Return an (H, W, bpp) ``uint8`` view sharing memory with ``buffer``.

    Writes through the view modify the buffer.
    """
    flat: UInt8Array = np.frombuffer(buffer.data, dtype=np.uint8)
    return flat.reshape(buffer.height, buffer.width, buffer.bytes_per_pixel)


def buffer_from_array(
    array: UInt8Array, format: TextureFormat = DEFAULT_TEXTURE_FORMAT
) -> PixelBuffer:
    """Copy an (H, W, C) ``uint8`` array into a new buffer.

    A 2-D array is accepted for single-channel formats.
    """
    arr = np.asarray(array, dtype=np.uint8)
    if arr.ndim == 2:
        arr = arr[..., np.newaxis]
    if arr.ndim != 3 or arr.shape[2] != format.bytes_per_pixel:
        raise UnsupportedFormatError(
            f"Array of shape {arr.shape} does not hold {format} pixels"
        )
    height, width = arr.shape[:2]
    return PixelBuffer(width, height, bytearray(np.ascontiguousarray(arr).tobytes()), format)


def buffer_to_image(buffer: PixelBuffer) -> Image.Image:
    """Convert a buffer to a Pillow image (RGBA, L or LA)."""
    mode = _PIL_MODES.get(buffer.format)
    if mode is None:
        raise UnsupportedFormatError(f"No Pillow mode for format {buffer.format}")
    arr = buffer_to_array(buffer)
    if buffer.format in _BGRA_FORMATS:
        arr = arr[..., [2, 1, 0, 3]]
    if mode == "L":
        arr = arr[..., 0]
    return Image.fromarray(np.ascontiguousarray(arr))


def buffer_from_image(
    image: Image.Image, format: TextureFormat = DEFAULT_TEXTURE_FORMAT
) -> PixelBuffer:
    """Convert any Pillow image into a new buffer of ``format``."""
    mode = _PIL_MODES.get(format)
    if mode is None:
        raise UnsupportedFormatError(f"No Pillow mode for format {format}")
    if image.mode != mode:
        image = image.convert(mode)
    arr: UInt8Array = np.array(image, dtype=np.uint8)
    if format in _BGRA_FORMATS:
        arr = arr[..., [2, 1, 0, 3]]
    return buffer_from_array(arr, format)
