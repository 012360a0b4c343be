"""Tile-map compositor.

Stitches equally sized tiles placed on an integer grid into one texture. The
grid's Y axis points up: the row of tiles with the largest ``y`` becomes the
top rows of the output, the smallest ``y`` the bottom rows. Cells inside the
bounding box that hold no tile stay zero (transparent).

Two entry points:

* :meth:`TileMapTextureCreator.compose` works on resolved buffers and returns
  a new :class:`PixelBuffer`.
* :meth:`TileMapTextureCreator.create_tile_map_texture` resolves handles via an
  :class:`~tilemash.assets.ImageProvider`, composes, and stores the result,
  returning its handle.
"""

import logging
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from tilemash.assets import ImageProvider, resolve_all
from tilemash.components import GridPosition, PixelBuffer, TileSpec
from tilemash.config import DEFAULT_CONFIG
from tilemash.errors import FormatMismatchError
from tilemash.types import Handle, TextureFormat
from tilemash.utils.addressing import local_pixel_offset, placed_pixel_offset
from tilemash.utils.bounds import grid_bounds

logger = logging.getLogger(__name__)

TilePlacements = Union[
    Mapping[GridPosition, Handle], Iterable[Tuple[GridPosition, Handle]]
]


class TileMapTextureCreator:
    """Creates tile-map textures for one fixed :class:`TileSpec`."""

    spec: TileSpec

    def __init__(
        self,
        texture_format: Union[TextureFormat, str, None] = None,
        tile_width: Optional[int] = None,
        tile_height: Optional[int] = None,
    ):
        self.spec = TileSpec(
            format=DEFAULT_CONFIG.texture_format
            if texture_format is None
            else texture_format,
            tile_width=DEFAULT_CONFIG.tile_width if tile_width is None else tile_width,
            tile_height=DEFAULT_CONFIG.tile_height
            if tile_height is None
            else tile_height,
        )

    @classmethod
    def from_spec(cls, spec: TileSpec) -> "TileMapTextureCreator":
        return cls(spec.format, spec.tile_width, spec.tile_height)

    def compose(self, textures: Mapping[GridPosition, PixelBuffer]) -> PixelBuffer:
        """Combine tiles keyed by grid position into one buffer.

        Raises:
            FormatMismatchError: If any tile differs from :attr:`spec`.
            EmptyInputError: If ``textures`` is empty.
        """
        for position, texture in textures.items():
            self._check_tile(position, texture)

        bounds = grid_bounds(textures.keys())
        spec = self.spec
        out_width = bounds.span_x * spec.tile_width
        out_height = bounds.span_y * spec.tile_height
        output = PixelBuffer.blank(out_width, out_height, spec.format)

        logger.debug(
            "Composing %d tiles into a %dx%d tile map (%d x %d cells)",
            len(textures),
            out_width,
            out_height,
            bounds.span_x,
            bounds.span_y,
        )

        for position, texture in textures.items():
            cell_x, cell_y = bounds.cell(position)
            self._copy_tile(output, texture, cell_x, cell_y)

        return output

    def create_tile_map_texture(
        self, provider: ImageProvider, placements: TilePlacements
    ) -> Handle:
        """Resolve, compose and store a tile map; return the new handle.

        ``placements`` may be a mapping or an iterable of pairs; a repeated
        position keeps the last handle given for it.

        Raises:
            UnresolvedHandleError: If any handle is not loaded yet.
            FormatMismatchError: If any tile differs from :attr:`spec`.
            EmptyInputError: If no placements are given.
        """
        position_handles: Dict[GridPosition, Handle] = dict(
            placements.items() if isinstance(placements, Mapping) else placements
        )
        buffers = resolve_all(provider, position_handles.values())
        textures = dict(zip(position_handles.keys(), buffers))
        return provider.store(self.compose(textures))

    # -------- Internal helpers --------

    def _check_tile(self, position: GridPosition, texture: PixelBuffer) -> None:
        if texture.format != self.spec.format:
            raise FormatMismatchError(
                f"Not all textures have the configured texture format "
                f"'{self.spec.format}': tile at ({position.x}, {position.y}) "
                f"is '{texture.format}'."
            )
        if not self.spec.matches(texture):
            raise FormatMismatchError(
                f"Not all textures have the configured tile size "
                f"{self.spec.tile_width}x{self.spec.tile_height}: tile at "
                f"({position.x}, {position.y}) is {texture.width}x{texture.height}."
            )

    def _copy_tile(
        self, output: PixelBuffer, texture: PixelBuffer, cell_x: int, cell_y: int
    ) -> None:
        spec = self.spec
        bpp = spec.bytes_per_pixel
        stride = spec.row_stride
        for local_y in range(spec.tile_height):
            src = local_pixel_offset(0, local_y, bpp, spec.tile_width)
            dst = placed_pixel_offset(
                cell_x,
                cell_y,
                0,
                local_y,
                spec.tile_width,
                spec.tile_height,
                bpp,
                output.width,
            )
            output.data[dst : dst + stride] = texture.data[src : src + stride]


def create_tile_map_texture(
    provider: ImageProvider,
    placements: TilePlacements,
    spec: Optional[TileSpec] = None,
) -> Handle:
    """Module-level shortcut for a one-off :class:`TileMapTextureCreator`."""
    creator = TileMapTextureCreator.from_spec(spec or DEFAULT_CONFIG.tile_spec())
    return creator.create_tile_map_texture(provider, placements)
