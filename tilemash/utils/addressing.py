"""Linear byte addressing inside flat pixel buffers.

All functions here are pure integer arithmetic so each can be tested on its
own. Grid-to-cell translation (including the tile map's inverted Y axis) is
kept apart from byte addressing: ``placed_pixel_offset`` only ever sees cell
coordinates that are already row-ordered with row 0 at the top.
"""

from typing import Tuple


def local_pixel_offset(x: int, y: int, bpp: int, width: int) -> int:
    """Byte offset of pixel ``(x, y)`` in a buffer ``width`` pixels wide."""
    return (y * width + x) * bpp


def placed_pixel_offset(
    cell_x: int,
    cell_y: int,
    local_x: int,
    local_y: int,
    tile_w: int,
    tile_h: int,
    bpp: int,
    out_width: int,
) -> int:
    """Byte offset of a tile-local pixel once its tile is placed in a grid.

    Arguments:
        cell_x: Column of the tile's cell (0 at left).
        cell_y: Row of the tile's cell (0 at top).
        local_x: Pixel column inside the tile.
        local_y: Pixel row inside the tile.
        tile_w: Tile width in pixels.
        tile_h: Tile height in pixels.
        bpp: Bytes per pixel.
        out_width: Width of the output buffer in pixels.
    """
    return local_pixel_offset(
        cell_x * tile_w + local_x, cell_y * tile_h + local_y, bpp, out_width
    )


def grid_to_cell(x: int, y: int, min_x: int, max_y: int) -> Tuple[int, int]:
    """Translate a grid position into a (column, row) output cell.

    The grid's Y axis points up while buffer rows grow downward, so the
    largest grid ``y`` becomes row 0.
    """
    return (x - min_x, max_y - y)
