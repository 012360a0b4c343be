"""Compositing operations.

* :mod:`tilemash.operations.tile_map` - uniform tiles on an integer grid.
* :mod:`tilemash.operations.mashup` - depth-ordered layers at pixel offsets.
* :mod:`tilemash.operations.modification` - per-pixel transforms and stamping.

Each operation has a buffer-level function that returns a new
:class:`~tilemash.components.PixelBuffer` and a provider-level function that
resolves handles and stores its result.
"""

from .mashup import mash_buffers, mash_textures
from .modification import (
    CustomMapper,
    StampMapper,
    color_filter,
    map_from_texture,
    map_texture_handle,
    map_to_new_texture,
    modify_texture,
    modify_texture_handle,
)
from .tile_map import TileMapTextureCreator, create_tile_map_texture

__all__ = [
    "CustomMapper",
    "StampMapper",
    "TileMapTextureCreator",
    "color_filter",
    "create_tile_map_texture",
    "map_from_texture",
    "map_texture_handle",
    "map_to_new_texture",
    "mash_buffers",
    "mash_textures",
    "modify_texture",
    "modify_texture_handle",
]
