# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from helpers.memory_fs import InMemoryFileSystem

SOURCE_FILE_CONTENT = """\
class UsingAssets {
    let imageLiteral = #imageLiteral(resourceName: "literal-image")
    let imageNamed = UIImage(named: "named-image")
    let imageNamedObjc = [UIImage imageNamed:@"named-objc-image"]
    let imageStoryboard = <image name="storyboard-image"/>
    let imageRswift = R.image.rswiftImage()
    let imageSwiftgen = Asset.swiftGenImage.image
    let imageResource = UIImage(resource: .resourceImage)
    let imageSwiftUI = Image("swiftui-image")
    let imageSwiftResource = Image(.swiftUIResourceImage)
    let imageSwiftUIKit = Image(uiImage: .swiftuiKitImage)
}
"""

REFERENCED_ASSETS = (
    "literal-image",
    "named-image",
    "named-objc-image",
    "storyboard-image",
    "rswift-image",
    "swift-gen-image",
    "resource-image",
    "swiftui-image",
    "swiftui-kit-image",
    "swiftui-resource-image",
)


@pytest.fixture
def memory_fs() -> InMemoryFileSystem:
    """Return an empty in-memory filesystem rooted at ``/work``."""

    return InMemoryFileSystem()


@pytest.fixture
def source_file_content() -> str:
    """Return Swift source exercising every builtin reference style."""

    return SOURCE_FILE_CONTENT


@pytest.fixture
def referenced_assets() -> tuple[str, ...]:
    """Return catalog names matching every reference in ``source_file_content``."""

    return REFERENCED_ASSETS


@pytest.fixture
def ios_project(tmp_path: Path) -> Path:
    """Create an on-disk project with one catalog and one Swift file."""

    project = tmp_path / "App"
    catalog = project / "Resources" / "Assets.xcassets"
    for name in ("used-icon", "orphan-icon"):
        (catalog / f"{name}.imageset").mkdir(parents=True)
        (catalog / f"{name}.imageset" / "Contents.json").write_text("{}", encoding="utf-8")
    sources = project / "Sources"
    sources.mkdir()
    (sources / "View.swift").write_text('let icon = UIImage(named: "used-icon")\n', encoding="utf-8")
    return project
