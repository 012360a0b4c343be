"""Flat pixel buffer.

A :class:`PixelBuffer` owns a row-major ``bytearray`` with no row padding and
no header; the top row comes first. Pixel ``(x, y)`` occupies the
``bytes_per_pixel`` bytes starting at ``(y * width + x) * bytes_per_pixel``
(see :func:`tilemash.utils.addressing.local_pixel_offset`).

Buffers handed in to an operation are only read for the duration of that call;
buffers returned by an operation are fresh allocations owned by the caller.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from tilemash.errors import BufferSizeError
from tilemash.types import PixelBytes, TextureFormat
from tilemash.utils.addressing import local_pixel_offset

DEFAULT_TEXTURE_FORMAT = TextureFormat.RGBA8_UNORM_SRGB


@dataclass(eq=False)
class PixelBuffer:
    """Mutable pixel storage.

    Attributes:
        width: Width in pixels.
        height: Height in pixels.
        data: Raw bytes, ``width * height * bytes_per_pixel`` long.
        format: Pixel format; determines ``bytes_per_pixel``.
    """

    width: int
    height: int
    data: bytearray
    format: TextureFormat = DEFAULT_TEXTURE_FORMAT

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise BufferSizeError(
                f"Buffer dimensions must be non-negative, got {self.width}x{self.height}"
            )
        if not isinstance(self.data, bytearray):
            self.data = bytearray(self.data)
        expected = self.width * self.height * self.bytes_per_pixel
        if len(self.data) != expected:
            raise BufferSizeError(
                f"Buffer of {self.width}x{self.height} {self.format} pixels needs "
                f"{expected} bytes, got {len(self.data)}"
            )

    # -------- Construction --------

    @classmethod
    def blank(
        cls, width: int, height: int, format: TextureFormat = DEFAULT_TEXTURE_FORMAT
    ) -> "PixelBuffer":
        """Return an all-zero (fully transparent) buffer."""
        return cls(width, height, bytearray(width * height * format.bytes_per_pixel), format)

    @classmethod
    def filled(
        cls,
        width: int,
        height: int,
        pixel: PixelBytes,
        format: TextureFormat = DEFAULT_TEXTURE_FORMAT,
    ) -> "PixelBuffer":
        """Return a buffer with every pixel set to ``pixel``."""
        _check_pixel_length(pixel, format.bytes_per_pixel)
        return cls(width, height, bytearray(bytes(pixel) * (width * height)), format)

    @classmethod
    def from_pixels(
        cls,
        width: int,
        height: int,
        pixels: Iterable[PixelBytes],
        format: TextureFormat = DEFAULT_TEXTURE_FORMAT,
    ) -> "PixelBuffer":
        """Build a buffer from pixels listed top-left first, row by row."""
        bpp = format.bytes_per_pixel
        data = bytearray()
        for pixel in pixels:
            _check_pixel_length(pixel, bpp)
            data += bytes(pixel)
        return cls(width, height, data, format)

    # -------- Accessors --------

    @property
    def bytes_per_pixel(self) -> int:
        return self.format.bytes_per_pixel

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def row_stride(self) -> int:
        """Number of bytes in one row."""
        return self.width * self.bytes_per_pixel

    def get_pixel(self, x: int, y: int) -> PixelBytes:
        start = self._offset(x, y)
        return bytes(self.data[start : start + self.bytes_per_pixel])

    def set_pixel(self, x: int, y: int, pixel: PixelBytes) -> None:
        _check_pixel_length(pixel, self.bytes_per_pixel)
        start = self._offset(x, y)
        self.data[start : start + self.bytes_per_pixel] = pixel

    def row(self, y: int) -> bytes:
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} out of range for height {self.height}")
        start = y * self.row_stride
        return bytes(self.data[start : start + self.row_stride])

    def pixels(self) -> Iterator[Tuple[int, int, PixelBytes]]:
        """Yield ``(x, y, pixel)`` for every pixel in raster order."""
        bpp = self.bytes_per_pixel
        for y in range(self.height):
            for x in range(self.width):
                start = local_pixel_offset(x, y, bpp, self.width)
                yield x, y, bytes(self.data[start : start + bpp])

    def copy(self) -> "PixelBuffer":
        """Return a deep copy; the clone never shares bytes with ``self``."""
        return PixelBuffer(self.width, self.height, bytearray(self.data), self.format)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self.size == other.size
            and self.format == other.format
            and self.data == other.data
        )

    # -------- Internal helpers --------

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel {(x, y)} out of bounds for buffer {self.width}x{self.height}"
            )
        return local_pixel_offset(x, y, self.bytes_per_pixel, self.width)


def _check_pixel_length(pixel: PixelBytes, bpp: int) -> None:
    if len(pixel) != bpp:
        raise ValueError(f"Expected a {bpp}-byte pixel, got {len(pixel)} bytes")
