"""tilemash.components
=====================

Value types shared by every operation:

* :class:`PixelBuffer` - the flat, row-major pixel storage.
* :class:`GridPosition` - a tile cell key for the tile-map compositor.
* :class:`Offset` - a pixel placement plus depth for the mashup compositor.
* :class:`TileSpec` - the per-compositor tile shape contract.

Import them from here::

    from tilemash.components import PixelBuffer, GridPosition
"""

from .buffer import DEFAULT_TEXTURE_FORMAT, PixelBuffer
from .placement import GridPosition, Offset
from .tile_spec import TileSpec

__all__ = [
    "DEFAULT_TEXTURE_FORMAT",
    "GridPosition",
    "Offset",
    "PixelBuffer",
    "TileSpec",
]
