"""tilemash
========

Pixel-buffer compositing for building composite textures from smaller ones:

* tile maps stitched from uniform tiles on an integer grid,
* "mashups" layering textures at pixel offsets by depth,
* per-pixel transforms, including stamping pixels from a second texture.

Images live in an external store addressed by handles (see
:class:`tilemash.assets.ImageProvider`); the operations resolve handles for the
duration of one call and store exactly one new image per successful call.

Typical use::

    from tilemash import ImageAssets, GridPosition, TileMapTextureCreator

    assets = ImageAssets()
    grass = assets.store(grass_tile)
    creator = TileMapTextureCreator(tile_width=16, tile_height=16)
    handle = creator.create_tile_map_texture(assets, {GridPosition(0, 0): grass})
"""

from tilemash.assets import ImageAssets, ImageProvider, resolve_all
from tilemash.components import GridPosition, Offset, PixelBuffer, TileSpec
from tilemash.config import DEFAULT_CONFIG, CompositorConfig, load_config
from tilemash.errors import (
    BufferSizeError,
    EmptyInputError,
    FormatMismatchError,
    TextureError,
    UnresolvedHandleError,
    UnsupportedFormatError,
)
from tilemash.operations import (
    CustomMapper,
    StampMapper,
    TileMapTextureCreator,
    color_filter,
    create_tile_map_texture,
    map_from_texture,
    map_texture_handle,
    map_to_new_texture,
    mash_buffers,
    mash_textures,
    modify_texture,
    modify_texture_handle,
)
from tilemash.types import Handle, PixelBytes, PixelFilter, PixelMapper, TextureFormat

__all__ = [
    "BufferSizeError",
    "CompositorConfig",
    "CustomMapper",
    "DEFAULT_CONFIG",
    "EmptyInputError",
    "FormatMismatchError",
    "GridPosition",
    "Handle",
    "ImageAssets",
    "ImageProvider",
    "Offset",
    "PixelBuffer",
    "PixelBytes",
    "PixelFilter",
    "PixelMapper",
    "StampMapper",
    "TextureError",
    "TextureFormat",
    "TileMapTextureCreator",
    "TileSpec",
    "UnresolvedHandleError",
    "UnsupportedFormatError",
    "color_filter",
    "create_tile_map_texture",
    "load_config",
    "map_from_texture",
    "map_texture_handle",
    "map_to_new_texture",
    "mash_buffers",
    "mash_textures",
    "modify_texture",
    "modify_texture_handle",
    "resolve_all",
]
