"""Common type aliases and enumerations.

``PixelMapper`` and ``PixelFilter`` are the extension points used by the pixel
mapping operations; ``TextureFormat`` fixes the byte layout of every buffer.
"""

from enum import StrEnum, auto
from typing import Callable

Handle = int

PixelBytes = bytes

PixelMapper = Callable[[int, int, PixelBytes], PixelBytes]
PixelFilter = Callable[[PixelBytes], bool]


class TextureFormat(StrEnum):
    """Pixel formats a buffer can carry (channel order and width per pixel)."""

    RGBA8_UNORM_SRGB = auto()
    RGBA8_UNORM = auto()
    BGRA8_UNORM_SRGB = auto()
    BGRA8_UNORM = auto()
    R8_UNORM = auto()
    RG8_UNORM = auto()
    RGBA16_FLOAT = auto()
    RGBA32_FLOAT = auto()

    @property
    def bytes_per_pixel(self) -> int:
        return _BYTES_PER_PIXEL[self]

    @property
    def is_core(self) -> bool:
        """True for the 4-byte-per-pixel formats every operation supports."""
        return self.bytes_per_pixel == CORE_BYTES_PER_PIXEL


CORE_BYTES_PER_PIXEL = 4

_BYTES_PER_PIXEL = {
    TextureFormat.RGBA8_UNORM_SRGB: 4,
    TextureFormat.RGBA8_UNORM: 4,
    TextureFormat.BGRA8_UNORM_SRGB: 4,
    TextureFormat.BGRA8_UNORM: 4,
    TextureFormat.R8_UNORM: 1,
    TextureFormat.RG8_UNORM: 2,
    TextureFormat.RGBA16_FLOAT: 8,
    TextureFormat.RGBA32_FLOAT: 16,
}
