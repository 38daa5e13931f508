# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core package metadata and the public asset checking API."""

from __future__ import annotations

from importlib import metadata

from .errors import AssetCheckerError, BrokenAssetsFound
from .locator import AssetLocator
from .models import CatalogEntry, Results, UsageMap

__all__ = [
    "AssetCheckerError",
    "AssetLocator",
    "BrokenAssetsFound",
    "CatalogEntry",
    "Results",
    "UsageMap",
    "__version__",
]

try:
    __version__ = metadata.version("asset-checker")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
