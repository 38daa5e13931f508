# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render check results as compiler-style diagnostics."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import BrokenAssetsFound
from .logging import OutputStyle, error_at, fail, info, ok, warn_at
from .models import Results

UNUSED_TAG = "[Asset Unused]"
MISSING_TAG = "[Asset Missing]"


def broken_location(name: str, paths: Sequence[str]) -> str:
    """Return the first referencing file, or the name itself when none is known."""

    return paths[0] if paths else name


def render_results(
    results: Results,
    *,
    source_path: str,
    catalog_paths: Sequence[str],
    style: OutputStyle,
) -> None:
    """Print the search header, one diagnostic per finding and a summary.

    Unused assets are warnings located at their catalog; broken assets are
    errors located at the first file referencing them.

    Args:
        results: Outcome of :meth:`AssetLocator.check_assets`.
        source_path: Scanned source root.
        catalog_paths: Catalogs inventoried during the run.
        style: Emoji and colour preferences.
    """

    info(f"Searching sources in {source_path} for assets in {list(catalog_paths)}", style)
    for entry in results.unused_assets:
        warn_at(entry.catalog, f"{UNUSED_TAG} {entry.asset}", style)
    for name, paths in results.broken_assets.items():
        error_at(broken_location(name, paths), f"{MISSING_TAG} {name}", style)

    if results.has_broken_assets:
        return
    if results.unused_assets:
        ok(f"No broken assets; {len(results.unused_assets)} unused assets reported", style)
    else:
        ok("All catalog assets are referenced", style)


def report_broken_assets(results: Results, style: OutputStyle) -> None:
    """Print the failure summary and raise when ``results`` has broken assets.

    Raises:
        BrokenAssetsFound: If at least one referenced asset is missing.
    """

    if not results.has_broken_assets:
        return
    error = BrokenAssetsFound(results.broken_count)
    fail(str(error), style)
    raise error


__all__ = ["MISSING_TAG", "UNUSED_TAG", "broken_location", "render_results", "report_broken_assets"]
