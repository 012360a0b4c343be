"""Layer compositor ("mashup").

Overlays textures of any size at pixel offsets. Layers are drawn back to front
in ascending ``z`` order (stable, so equal depths keep their input order) and
each drawn pixel overwrites all four bytes below it; there is no alpha
blending. Pixels no layer covers stay zero.

Only 4-byte-per-pixel formats are accepted. Mixed 4-byte formats are not
reconciled; the output simply takes ``output_format``.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from tilemash.assets import ImageProvider, resolve_all
from tilemash.components import Offset, PixelBuffer
from tilemash.config import DEFAULT_CONFIG
from tilemash.errors import EmptyInputError, UnsupportedFormatError
from tilemash.types import Handle, TextureFormat
from tilemash.utils.addressing import local_pixel_offset
from tilemash.utils.bounds import layer_extent, sort_by_depth

logger = logging.getLogger(__name__)

Layer = Tuple[Offset, PixelBuffer]


def mash_buffers(
    layers: Iterable[Layer], output_format: Optional[TextureFormat] = None
) -> PixelBuffer:
    """Composite resolved layers into a new buffer.

    Raises:
        EmptyInputError: If ``layers`` is empty.
        UnsupportedFormatError: If any layer or ``output_format`` is not a
            4-byte-per-pixel format.
    """
    layers = list(layers)
    if not layers:
        raise EmptyInputError("No texture handles were provided")
    output_format = output_format or DEFAULT_CONFIG.output_format
    if not output_format.is_core:
        raise UnsupportedFormatError(
            f"Mashup output must be a 4-byte format, got '{output_format}'"
        )
    for offset, texture in layers:
        if not texture.format.is_core:
            raise UnsupportedFormatError(
                f"Mashup only supports 4-byte pixels; layer at "
                f"({offset.x}, {offset.y}, {offset.z}) is '{texture.format}'"
            )

    ordered = sort_by_depth(layers)
    width, height = layer_extent(ordered)
    output = PixelBuffer.blank(width, height, output_format)

    logger.debug("Mashing %d layers into a %dx%d texture", len(ordered), width, height)

    for offset, texture in ordered:
        _draw_layer(output, offset, texture)

    return output


def mash_textures(
    provider: ImageProvider,
    placements: Iterable[Tuple[Offset, Handle]],
    output_format: Optional[TextureFormat] = None,
) -> Handle:
    """Resolve, composite and store layered textures; return the new handle.

    Raises:
        UnresolvedHandleError: Listing every handle that is not loaded yet.
        EmptyInputError: If ``placements`` is empty.
        UnsupportedFormatError: If any layer is not a 4-byte format.
    """
    placements = list(placements)
    buffers = resolve_all(provider, (handle for _, handle in placements))
    layers: List[Layer] = [
        (offset, buffer) for (offset, _), buffer in zip(placements, buffers)
    ]
    return provider.store(mash_buffers(layers, output_format))


def _draw_layer(output: PixelBuffer, offset: Offset, texture: PixelBuffer) -> None:
    bpp = output.bytes_per_pixel
    stride = texture.row_stride
    for y in range(texture.height):
        src = local_pixel_offset(0, y, bpp, texture.width)
        dst = local_pixel_offset(offset.x, offset.y + y, bpp, output.width)
        output.data[dst : dst + stride] = texture.data[src : src + stride]
