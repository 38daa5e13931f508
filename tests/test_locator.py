# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for reconciling catalog assets against source references."""

from __future__ import annotations

from pathlib import Path

import pytest

from assetchecker.config import CheckerConfig
from assetchecker.locator import AssetLocator, reconcile
from assetchecker.models import CatalogEntry, Results

SOURCE_PATH = "/work/ExampleProject"
CATALOG = "/work/ExampleProject/Assets.xcassets"


def _locator(memory_fs, **kwargs) -> AssetLocator:
    options = {"catalog": CATALOG, "generator_prefixes": ("Asset",)}
    options.update(kwargs)
    return AssetLocator(SOURCE_PATH, fs=memory_fs, **options)


def _add_assets(memory_fs, names) -> None:
    for name in names:
        memory_fs.add_dir(f"{CATALOG}/{name}.imageset")


def test_init_with_single_catalog(memory_fs) -> None:
    locator = AssetLocator(SOURCE_PATH, catalog="Assets.xcassets", fs=memory_fs)

    assert locator.source_path == SOURCE_PATH
    assert locator.asset_catalog_paths == ("Assets.xcassets",)
    assert locator.ignored_names == ()
    assert locator.generator_prefixes == ()


def test_init_reads_ignore_file(memory_fs) -> None:
    memory_fs.add_file("/work/.assetcheckerignore", "ignored-asset\nsecond-ignored-asset")

    locator = _locator(memory_fs)

    assert locator.ignored_names == ("ignored-asset", "second-ignored-asset")


def test_init_prefers_explicit_ignore_names(memory_fs) -> None:
    memory_fs.add_file("/work/.assetcheckerignore", "ignored-asset")

    locator = _locator(memory_fs, ignored_names=["ignored-name"])

    assert locator.ignored_names == ("ignored-name",)


def test_init_discovers_catalogs(memory_fs) -> None:
    memory_fs.add_file(f"{SOURCE_PATH}/test.swift")
    memory_fs.add_dir(f"{SOURCE_PATH}/Images.xcassets")
    memory_fs.add_dir(f"{SOURCE_PATH}/Resources/Assets.xcassets")

    locator = AssetLocator(SOURCE_PATH, fs=memory_fs)

    assert locator.asset_catalog_paths == ("Images.xcassets", "Resources/Assets.xcassets")


def test_discovered_catalogs_are_inventoried_from_source(memory_fs) -> None:
    catalog = f"{SOURCE_PATH}/Resources/Assets.xcassets"
    memory_fs.add_dir(f"{catalog}/orphan.imageset")

    results = AssetLocator(SOURCE_PATH, fs=memory_fs).check_assets()

    assert results.unused_assets == (CatalogEntry(asset="orphan", catalog=catalog),)


def test_unused_assets_without_sources(memory_fs) -> None:
    _add_assets(memory_fs, ["test_asset_1", "test-asset_2", "testAsset3"])

    results = _locator(memory_fs).check_assets()

    assert results.unused_assets == (
        CatalogEntry(asset="test_asset_1", catalog=CATALOG),
        CatalogEntry(asset="test-asset_2", catalog=CATALOG),
        CatalogEntry(asset="testAsset3", catalog=CATALOG),
    )
    assert results.broken_assets == {}


def test_all_references_resolve(memory_fs, source_file_content, referenced_assets) -> None:
    _add_assets(memory_fs, referenced_assets)
    memory_fs.add_file(f"{SOURCE_PATH}/SourceFile.swift", source_file_content)

    results = _locator(memory_fs).check_assets()

    assert results.unused_assets == ()
    assert results.broken_assets == {}
    assert not results.has_broken_assets


def test_broken_assets_without_catalog_entries(memory_fs, source_file_content) -> None:
    source_file = f"{SOURCE_PATH}/SourceFile.swift"
    memory_fs.add_file(source_file, source_file_content)

    results = _locator(memory_fs).check_assets()

    expected = (source_file,)
    assert results.unused_assets == ()
    assert dict(results.broken_assets) == {
        "literal-image": expected,
        "named-image": expected,
        "named-objc-image": expected,
        "storyboard-image": expected,
        "rswiftImage": expected,
        "swiftGenImage": expected,
        "resourceImage": expected,
        "swiftui-image": expected,
        "swiftuiKitImage": expected,
        "swiftUIResourceImage": expected,
    }
    assert results.broken_count == 10


def test_generator_reference_without_prefix_leaves_asset_unused(memory_fs) -> None:
    _add_assets(memory_fs, ["swift-gen-image"])
    memory_fs.add_file(f"{SOURCE_PATH}/View.swift", "let image = Asset.swiftGenImage.image")

    results = _locator(memory_fs, generator_prefixes=()).check_assets()

    assert results.unused_assets == (CatalogEntry(asset="swift-gen-image", catalog=CATALOG),)
    assert results.broken_assets == {}


def test_ignore_pattern_suppresses_both_directions(memory_fs) -> None:
    _add_assets(memory_fs, ["legacy-unused", "kept"])
    memory_fs.add_file(
        f"{SOURCE_PATH}/View.swift",
        'UIImage(named: "kept")\nUIImage(named: "legacy-missing")',
    )

    results = _locator(memory_fs, ignored_names=["^legacy-"]).check_assets()

    assert results.unused_assets == ()
    assert results.broken_assets == {}


def test_explicit_ignored_name_counts_as_used(memory_fs) -> None:
    _add_assets(memory_fs, ["app_icon"])

    results = _locator(memory_fs, ignored_names=["AppIcon"]).check_assets()

    assert results.unused_assets == ()


def test_check_assets_reflects_current_filesystem(memory_fs) -> None:
    _add_assets(memory_fs, ["late"])
    locator = _locator(memory_fs)
    assert locator.check_assets().unused_assets

    memory_fs.add_file(f"{SOURCE_PATH}/Late.swift", 'Image("late")')

    assert locator.check_assets().unused_assets == ()


def test_reconcile_preserves_usage_order() -> None:
    results = reconcile(
        [CatalogEntry(asset="present", catalog="C")],
        {"zeta": ["z.swift"], "Present": ["p.swift"], "alpha": ["a.swift", "b.swift"]},
        [],
    )

    assert list(results.broken_assets) == ["zeta", "alpha"]
    assert results.broken_assets["alpha"] == ("a.swift", "b.swift")
    assert results.unused_assets == ()


def test_results_are_immutable() -> None:
    results = Results(broken_assets={"x": ["a.swift"]})

    with pytest.raises(TypeError):
        results.broken_assets["y"] = ("b.swift",)  # type: ignore[index]


def test_from_config_uses_cli_settings(tmp_path: Path, memory_fs) -> None:
    config = CheckerConfig(source=tmp_path, catalog=Path("Shared.xcassets"), swiftgen_enums=("Asset",))

    locator = AssetLocator.from_config(config, fs=memory_fs)

    assert locator.source_path == str(tmp_path)
    assert locator.asset_catalog_paths == ("Shared.xcassets",)
    assert locator.generator_prefixes == ("Asset",)
