"""Per-pixel texture transforms.

A *pixel mapper* maps ``(x, y, pixel) -> pixel``. Mappers are applied to every
pixel exactly once in raster order; they should be pure functions of their
inputs so results do not depend on visiting order.

Besides plain callables, two mapper values are provided:

* :class:`CustomMapper` wraps a pixel-only function ``fn(pixel) -> pixel``.
* :class:`StampMapper` (built by :func:`map_from_texture`) replaces pixels a
  filter accepts with the matching pixel of a *stamp* texture, repeating the
  stamp when it is smaller than the target.

Only 4-byte-per-pixel buffers are accepted.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from tilemash.assets import ImageProvider, resolve_all
from tilemash.components import PixelBuffer
from tilemash.errors import UnsupportedFormatError
from tilemash.types import Handle, PixelBytes, PixelFilter, PixelMapper
from tilemash.utils.addressing import local_pixel_offset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CustomMapper:
    """Adapt a coordinate-free ``fn(pixel) -> pixel`` to a pixel mapper."""

    fn: Callable[[PixelBytes], PixelBytes]

    def __call__(self, x: int, y: int, pixel: PixelBytes) -> PixelBytes:
        return self.fn(pixel)


@dataclass(frozen=True, eq=False)
class StampMapper:
    """Take pixels from ``stamp`` wherever ``filter`` accepts the target pixel.

    The stamp is a mutable buffer, so mappers compare and hash by identity.

    Attributes:
        stamp: Texture sampled at ``(x % stamp.width, y % stamp.height)``.
        filter: Predicate over the target pixel; rejected pixels pass through.
    """

    stamp: PixelBuffer
    filter: PixelFilter

    def __call__(self, x: int, y: int, pixel: PixelBytes) -> PixelBytes:
        if not self.filter(pixel):
            return pixel
        return self.stamp.get_pixel(x % self.stamp.width, y % self.stamp.height)


def map_from_texture(stamp: PixelBuffer, filter: PixelFilter) -> StampMapper:
    """Build a mapper that stamps ``stamp`` onto pixels ``filter`` accepts."""
    if stamp.width == 0 or stamp.height == 0:
        raise ValueError("Stamp texture must not be empty")
    _require_core_format(stamp)
    return StampMapper(stamp=stamp, filter=filter)


def color_filter(color: PixelBytes) -> PixelFilter:
    """Filter accepting exactly the pixels equal to ``color``."""
    target = bytes(color)

    def _matches(pixel: PixelBytes) -> bool:
        return pixel == target

    return _matches


def modify_texture(texture: PixelBuffer, mapper: PixelMapper) -> None:
    """Apply ``mapper`` to every pixel of ``texture`` in place.

    Raises:
        UnsupportedFormatError: If ``texture`` is not a 4-byte format.
        ValueError: If the mapper returns a pixel of the wrong length.
    """
    _require_core_format(texture)
    bpp = texture.bytes_per_pixel
    data = texture.data
    logger.debug("Mapping %dx%d texture in place", texture.width, texture.height)
    for y in range(texture.height):
        for x in range(texture.width):
            index = local_pixel_offset(x, y, bpp, texture.width)
            new_pixel = mapper(x, y, bytes(data[index : index + bpp]))
            if len(new_pixel) != bpp:
                raise ValueError(
                    f"Pixel mapper returned {len(new_pixel)} bytes at ({x}, {y}), "
                    f"expected {bpp}"
                )
            data[index : index + bpp] = new_pixel


def map_to_new_texture(texture: PixelBuffer, mapper: PixelMapper) -> PixelBuffer:
    """Return a mapped copy of ``texture``; the original is left untouched."""
    _require_core_format(texture)
    new_texture = texture.copy()
    modify_texture(new_texture, mapper)
    return new_texture


def modify_texture_handle(
    provider: ImageProvider, handle: Handle, mapper: PixelMapper
) -> None:
    """Apply ``mapper`` in place to the image stored under ``handle``."""
    (texture,) = resolve_all(provider, [handle])
    modify_texture(texture, mapper)


def map_texture_handle(
    provider: ImageProvider, handle: Handle, mapper: PixelMapper
) -> Handle:
    """Store a mapped copy of the image under ``handle``; return the new handle."""
    (texture,) = resolve_all(provider, [handle])
    return provider.store(map_to_new_texture(texture, mapper))


def _require_core_format(texture: PixelBuffer) -> None:
    if not texture.format.is_core:
        raise UnsupportedFormatError(
            f"Pixel mapping only supports 4-byte pixels, got '{texture.format}'"
        )
