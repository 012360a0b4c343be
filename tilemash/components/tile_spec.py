from dataclasses import dataclass

from tilemash.components.buffer import PixelBuffer
from tilemash.types import TextureFormat


@dataclass(frozen=True)
class TileSpec:
    """Shape every tile handed to a tile-map compositor must have.

    Attributes:
        format: Expected pixel format of every tile and of the output; a
            format name string is converted to :class:`TextureFormat`.
        tile_width: Expected tile width in pixels.
        tile_height: Expected tile height in pixels.
    """

    format: TextureFormat
    tile_width: int
    tile_height: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "format", TextureFormat(self.format))
        if self.tile_width <= 0 or self.tile_height <= 0:
            raise ValueError(
                f"Tile size must be positive, got {self.tile_width}x{self.tile_height}"
            )

    @property
    def bytes_per_pixel(self) -> int:
        return self.format.bytes_per_pixel

    @property
    def row_stride(self) -> int:
        """Bytes in one row of a single tile."""
        return self.tile_width * self.bytes_per_pixel

    def matches(self, buffer: PixelBuffer) -> bool:
        return (
            buffer.format == self.format
            and buffer.width == self.tile_width
            and buffer.height == self.tile_height
        )
