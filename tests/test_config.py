# tests/test_config.py

from dataclasses import replace

import pytest

from tilemash.components import TileSpec
from tilemash.config import (
    DEFAULT_CONFIG,
    DEFAULT_TILE_SIZE,
    CompositorConfig,
    load_config,
)
from tilemash.types import TextureFormat


def test_default_config() -> None:
    assert DEFAULT_CONFIG.texture_format == TextureFormat.RGBA8_UNORM_SRGB
    assert DEFAULT_CONFIG.output_format == TextureFormat.RGBA8_UNORM_SRGB
    assert DEFAULT_CONFIG.tile_width == DEFAULT_TILE_SIZE
    assert DEFAULT_CONFIG.tile_height == DEFAULT_TILE_SIZE


def test_tile_spec_from_config() -> None:
    config = replace(DEFAULT_CONFIG, tile_width=8, tile_height=4)
    assert config.tile_spec() == TileSpec(TextureFormat.RGBA8_UNORM_SRGB, 8, 4)


def test_load_config_parses_strings() -> None:
    config = load_config(
        {"texture_format": "r8_unorm", "tile_width": "32", "tile_height": 8}
    )
    assert config == CompositorConfig(
        texture_format=TextureFormat.R8_UNORM, tile_width=32, tile_height=8
    )


def test_load_config_empty_mapping_gives_defaults() -> None:
    assert load_config({}) == DEFAULT_CONFIG


def test_load_config_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError):
        load_config({"tile_depth": 3})


def test_load_config_rejects_unknown_format() -> None:
    with pytest.raises(ValueError):
        load_config({"output_format": "cmyk"})


def test_bytes_per_pixel_per_format() -> None:
    assert TextureFormat.RGBA8_UNORM_SRGB.bytes_per_pixel == 4
    assert TextureFormat.RG8_UNORM.bytes_per_pixel == 2
    assert TextureFormat.RGBA32_FLOAT.bytes_per_pixel == 16
    assert TextureFormat.BGRA8_UNORM.is_core
    assert not TextureFormat.RGBA16_FLOAT.is_core
