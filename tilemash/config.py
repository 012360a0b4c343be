"""Compositor configuration.

A :class:`CompositorConfig` bundles the defaults the operations fall back to
when a caller does not pass them explicitly. Configs are frozen value objects;
derive variants with :func:`dataclasses.replace`.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping

from tilemash.components import DEFAULT_TEXTURE_FORMAT, TileSpec
from tilemash.types import TextureFormat

DEFAULT_TILE_SIZE = 16


@dataclass(frozen=True)
class CompositorConfig:
    """Defaults shared by the compositors.

    Attributes:
        texture_format: Format every tile-map tile must carry.
        tile_width: Tile width in pixels.
        tile_height: Tile height in pixels.
        output_format: Format assigned to mashup output.
    """

    texture_format: TextureFormat = DEFAULT_TEXTURE_FORMAT
    tile_width: int = DEFAULT_TILE_SIZE
    tile_height: int = DEFAULT_TILE_SIZE
    output_format: TextureFormat = DEFAULT_TEXTURE_FORMAT

    def tile_spec(self) -> TileSpec:
        return TileSpec(
            format=self.texture_format,
            tile_width=self.tile_width,
            tile_height=self.tile_height,
        )


DEFAULT_CONFIG = CompositorConfig()


def load_config(values: Mapping[str, Any]) -> CompositorConfig:
    """Build a config from a plain mapping (e.g. parsed JSON or TOML).

    Format fields accept either a :class:`TextureFormat` or its string value.
    Missing keys keep their defaults.

    Raises:
        ValueError: On unknown keys or format names.
    """
    known = {f.name for f in fields(CompositorConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")

    kwargs = dict(values)
    for key in ("texture_format", "output_format"):
        if key in kwargs:
            kwargs[key] = TextureFormat(kwargs[key])
    for key in ("tile_width", "tile_height"):
        if key in kwargs:
            kwargs[key] = int(kwargs[key])
    return CompositorConfig(**kwargs)
