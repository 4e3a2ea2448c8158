"""
Tests for asset loading and descriptor construction.
"""

from PIL import Image
import pytest

from scatter_layout.assets import (
    AssetSource,
    build_asset_pool,
    build_descriptor,
    find_image_files,
    load_image_assets,
    max_effective_radius,
)


def test_landscape_asset_scaled_to_max_size():
    desc = build_descriptor(AssetSource("wide.png", 400, 200), max_size=100)

    assert desc.base_width == pytest.approx(100)
    assert desc.base_height == pytest.approx(50)
    assert desc.effective_radius == pytest.approx(50)


def test_portrait_asset_uses_longer_side_for_radius():
    desc = build_descriptor(AssetSource("tall.png", 30, 60), max_size=120)

    assert desc.base_width == pytest.approx(60)
    assert desc.base_height == pytest.approx(120)
    assert desc.effective_radius == pytest.approx(60)


def test_small_assets_are_scaled_up():
    desc = build_descriptor(AssetSource("icon.png", 10, 10), max_size=50)
    assert desc.base_width == pytest.approx(50)


def test_pool_preserves_order_and_identity():
    sources = [AssetSource("a", 10, 10), AssetSource("a", 10, 10)]
    pool = build_asset_pool(sources, max_size=20)

    assert [d.source for d in pool] == sources
    # Identical sources still give distinct assets
    assert pool[0] != pool[1]
    assert len({pool[0], pool[1]}) == 2


def test_max_effective_radius(make_pool):
    assert max_effective_radius(make_pool(5, 40, 12)) == pytest.approx(40)


def test_load_image_assets_reads_sizes_and_skips_bad_files(tmp_path):
    Image.new("RGB", (64, 32)).save(tmp_path / "a.png")
    Image.new("RGBA", (10, 20)).save(tmp_path / "b.png")
    (tmp_path / "broken.png").write_bytes(b"not an image")
    (tmp_path / "notes.txt").write_text("ignored")

    files = find_image_files(tmp_path)
    assert [f.name for f in files] == ["a.png", "b.png", "broken.png"]

    sources = load_image_assets(files)
    assert [(s.ref.name, s.width, s.height) for s in sources] == [
        ("a.png", 64.0, 32.0),
        ("b.png", 10.0, 20.0),
    ]


def test_find_image_files_missing_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        find_image_files(tmp_path / "missing")
