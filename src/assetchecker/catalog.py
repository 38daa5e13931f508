# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Asset catalog discovery and image set inventory."""

from __future__ import annotations

import posixpath
from collections.abc import Iterable
from typing import Final

from .filesystem import FileSystemAccessor, join_path
from .models import CatalogEntry

CATALOG_SUFFIX: Final[str] = ".xcassets"
ASSET_UNIT_SUFFIX: Final[str] = ".imageset"


def discover_catalogs(
    source_path: str,
    explicit_catalog: str | None,
    fs: FileSystemAccessor,
) -> tuple[str, ...]:
    """Return the catalog directories that should be inventoried.

    An explicit catalog is returned as-is without checking that it exists.
    Otherwise every entry under ``source_path`` ending in ``.xcassets`` is
    returned exactly as enumerated, relative to ``source_path``.

    Args:
        source_path: Root of the source tree.
        explicit_catalog: Catalog path supplied by the caller, if any.
        fs: Filesystem accessor used for enumeration.

    Returns:
        tuple[str, ...]: Catalog paths, possibly empty.
    """

    if explicit_catalog is not None:
        return (explicit_catalog,)
    return tuple(entry for entry in fs.enumerate(source_path) if entry.endswith(CATALOG_SUFFIX))


def inventory_catalogs(
    catalog_paths: Iterable[str],
    fs: FileSystemAccessor,
    *,
    relative_to: str | None = None,
) -> list[CatalogEntry]:
    """Return one :class:`CatalogEntry` per image set found in ``catalog_paths``.

    Duplicated names across catalogs are kept as separate entries.

    Args:
        catalog_paths: Catalog directories to enumerate.
        fs: Filesystem accessor used for enumeration.
        relative_to: Directory discovered catalog entries are relative to.
            Each catalog is enumerated (and reported) as ``<relative_to>/<catalog>``.

    Returns:
        list[CatalogEntry]: Image sets in enumeration order.
    """

    entries: list[CatalogEntry] = []
    for listed in catalog_paths:
        catalog = join_path(relative_to, listed) if relative_to is not None else listed
        for entry in fs.enumerate(catalog):
            if not entry.endswith(ASSET_UNIT_SUFFIX):
                continue
            entries.append(CatalogEntry(asset=asset_name_from_entry(entry), catalog=catalog))
    return entries


def asset_name_from_entry(entry: str) -> str:
    """Strip the folder path and ``.imageset`` suffix from a catalog entry."""

    leaf = posixpath.basename(entry.rstrip("/"))
    return leaf[: -len(ASSET_UNIT_SUFFIX)]


__all__ = [
    "ASSET_UNIT_SUFFIX",
    "CATALOG_SUFFIX",
    "asset_name_from_entry",
    "discover_catalogs",
    "inventory_catalogs",
]
