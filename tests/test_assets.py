# tests/test_assets.py

import pytest

from tilemash.assets import ImageAssets, resolve_all
from tilemash.errors import UnresolvedHandleError
from tests.test_utils import GREEN, RED, solid_image


def test_store_and_resolve() -> None:
    assets = ImageAssets()
    red = solid_image((1, 1), RED)
    handle = assets.store(red)
    assert assets.resolve(handle) is red
    assert handle in assets
    assert len(assets) == 1


def test_store_returns_fresh_handles() -> None:
    assets = ImageAssets()
    a = assets.store(solid_image((1, 1), RED))
    b = assets.store(solid_image((1, 1), RED))
    assert a != b
    assert assets.handles() == sorted([a, b])


def test_each_store_allocates_its_own_handles() -> None:
    first = ImageAssets()
    second = ImageAssets()
    a = first.store(solid_image((1, 1), RED))
    b = first.reserve()
    c = second.store(solid_image((1, 1), GREEN))
    assert (a, b) == (0, 1)
    assert c == 0
    assert first.resolve(c) is not second.resolve(c)


def test_insert_rejects_unknown_handle() -> None:
    assets = ImageAssets()
    with pytest.raises(KeyError):
        assets.insert(42, solid_image((1, 1), RED))
    assert len(assets) == 0


def test_insert_replaces_stored_image() -> None:
    assets = ImageAssets()
    handle = assets.store(solid_image((1, 1), RED))
    green = solid_image((1, 1), GREEN)
    assets.insert(handle, green)
    assert assets.resolve(handle) is green


def test_reserved_handle_resolves_to_none_until_inserted() -> None:
    assets = ImageAssets()
    handle = assets.reserve()
    assert assets.resolve(handle) is None
    assert not assets.is_loaded(handle)
    assert handle in assets.pending

    green = solid_image((1, 1), GREEN)
    assets.insert(handle, green)
    assert assets.resolve(handle) is green
    assert handle not in assets.pending


def test_remove() -> None:
    assets = ImageAssets()
    red = solid_image((1, 1), RED)
    handle = assets.store(red)
    assert assets.remove(handle) is red
    assert assets.resolve(handle) is None
    assert assets.remove(handle) is None


def test_snapshot_is_unaffected_by_later_changes() -> None:
    assets = ImageAssets()
    first = assets.store(solid_image((1, 1), RED))
    snapshot = assets.snapshot()
    second = assets.store(solid_image((1, 1), GREEN))
    assets.remove(first)
    assert first in snapshot
    assert second not in snapshot


def test_resolve_all_preserves_order() -> None:
    assets = ImageAssets()
    red = solid_image((1, 1), RED)
    green = solid_image((1, 1), GREEN)
    r = assets.store(red)
    g = assets.store(green)
    resolved = resolve_all(assets, [g, r, g])
    assert resolved[0] is green
    assert resolved[1] is red
    assert resolved[2] is green


def test_resolve_all_reports_every_missing_handle() -> None:
    assets = ImageAssets()
    loaded = assets.store(solid_image((1, 1), RED))
    missing = [assets.reserve(), assets.reserve()]
    with pytest.raises(UnresolvedHandleError) as exc_info:
        resolve_all(assets, [missing[0], loaded, missing[1]])
    assert exc_info.value.handles == tuple(missing)
    assert "Not all textures are loaded yet" in str(exc_info.value)
