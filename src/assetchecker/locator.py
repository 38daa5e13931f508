# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reconcile catalog image sets against the asset references found in source files."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .catalog import discover_catalogs, inventory_catalogs
from .filesystem import FileSystemAccessor, LocalFileSystem
from .matching import IgnoreMatcher, load_ignore_list, normalize_name
from .models import CatalogEntry, Results, UsageMap
from .references import ReferenceScanner, build_patterns, collect_usages

if TYPE_CHECKING:
    from .config import CheckerConfig

LOGGER = logging.getLogger(__name__)


class AssetLocator:
    """Find unused and broken image assets for one source tree.

    Catalog discovery and ignore-list resolution happen when the locator is
    created; :meth:`check_assets` reads the current filesystem contents each
    time it is called.
    """

    def __init__(
        self,
        source_path: str,
        catalog: str | None = None,
        ignored_names: Sequence[str] = (),
        ignore_file: str | None = None,
        generator_prefixes: Sequence[str] = (),
        fs: FileSystemAccessor | None = None,
    ) -> None:
        """Resolve catalogs and ignore patterns for ``source_path``.

        Args:
            source_path: Root of the source tree to scan.
            catalog: Explicit catalog path; auto-discovered when ``None``.
            ignored_names: Explicit ignore patterns; when non-empty the ignore
                file is not consulted.
            ignore_file: Ignore file path, defaulting to ``.assetcheckerignore``
                in the current directory.
            generator_prefixes: Enum namespaces of code-generated asset accessors.
            fs: Filesystem accessor; the local filesystem when omitted.
        """

        self._fs: FileSystemAccessor = fs if fs is not None else LocalFileSystem()
        self._source_path = source_path
        self._generator_prefixes = tuple(generator_prefixes)
        self._asset_catalog_paths = discover_catalogs(source_path, catalog, self._fs)
        self._catalogs_discovered = catalog is None
        self._ignored_names = load_ignore_list(tuple(ignored_names), ignore_file, self._fs)

    @classmethod
    def from_config(cls, config: CheckerConfig, fs: FileSystemAccessor | None = None) -> AssetLocator:
        """Build a locator from parsed command-line configuration."""

        return cls(
            source_path=str(config.source),
            catalog=str(config.catalog) if config.catalog is not None else None,
            ignored_names=config.ignore,
            ignore_file=str(config.ignore_file) if config.ignore_file is not None else None,
            generator_prefixes=config.swiftgen_enums,
            fs=fs,
        )

    @property
    def source_path(self) -> str:
        """Return the source tree root."""

        return self._source_path

    @property
    def asset_catalog_paths(self) -> tuple[str, ...]:
        """Return the catalogs inventoried by :meth:`check_assets`.

        Discovered catalogs are relative to :attr:`source_path`; an explicit
        catalog is kept as supplied.
        """

        return self._asset_catalog_paths

    @property
    def ignored_names(self) -> tuple[str, ...]:
        """Return the resolved ignore patterns."""

        return self._ignored_names

    @property
    def generator_prefixes(self) -> tuple[str, ...]:
        """Return the configured generator enum prefixes."""

        return self._generator_prefixes

    def available_assets(self) -> list[CatalogEntry]:
        """Return every image set declared in the resolved catalogs."""

        relative_to = self._source_path if self._catalogs_discovered else None
        return inventory_catalogs(self._asset_catalog_paths, self._fs, relative_to=relative_to)

    def used_assets(self) -> UsageMap:
        """Return the asset names referenced by source files."""

        scanner = ReferenceScanner(build_patterns(self._generator_prefixes))
        return collect_usages(self._source_path, self._fs, scanner)

    def check_assets(self) -> Results:
        """Inventory catalogs, scan sources and compute unused and broken assets.

        Returns:
            Results: Unused catalog entries and broken references.
        """

        available = self.available_assets()
        used = self.used_assets()
        LOGGER.debug(
            "Found %d catalog assets and %d referenced names", len(available), len(used)
        )
        return reconcile(available, used, self._ignored_names)


def reconcile(
    available: Sequence[CatalogEntry],
    used: UsageMap,
    ignored_names: Sequence[str],
) -> Results:
    """Compare catalog assets with referenced names.

    Explicitly ignored names count as used for the unused check, and any name
    matched by an ignore pattern is left out of both lists.

    Args:
        available: Catalog entries in inventory order.
        used: Referenced names mapped to referencing files.
        ignored_names: Ignore patterns.

    Returns:
        Results: Unused entries in inventory order and broken names in usage order.
    """

    is_ignored = IgnoreMatcher(ignored_names)
    available_keys = {normalize_name(entry.asset) for entry in available}
    used_keys = {normalize_name(name) for name in (*used, *ignored_names)}

    unused = tuple(
        entry
        for entry in available
        if normalize_name(entry.asset) not in used_keys and not is_ignored(entry.asset)
    )
    broken = {
        name: tuple(paths)
        for name, paths in used.items()
        if normalize_name(name) not in available_keys and not is_ignored(name)
    }
    return Results(unused_assets=unused, broken_assets=broken)


__all__ = ["AssetLocator", "reconcile"]
