# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Value objects shared between catalog inventory, reference scanning and reporting."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

UsageMap = dict[str, list[str]]
"""Asset name mapped to the files referencing it, in discovery order."""


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """Describe one image set declared inside an asset catalog.

    Attributes:
        asset: Asset name without the ``.imageset`` suffix.
        catalog: Catalog directory the asset was found in.
    """

    asset: str
    catalog: str


@dataclass(frozen=True, slots=True)
class Results:
    """Outcome of a single asset check run.

    Attributes:
        unused_assets: Catalog entries no source file refers to, in catalog order.
        broken_assets: Referenced asset names missing from every catalog,
            mapped to the files referencing them.
    """

    unused_assets: tuple[CatalogEntry, ...] = ()
    broken_assets: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {name: tuple(paths) for name, paths in self.broken_assets.items()}
        object.__setattr__(self, "unused_assets", tuple(self.unused_assets))
        object.__setattr__(self, "broken_assets", MappingProxyType(frozen))

    @property
    def broken_count(self) -> int:
        """Return the number of distinct broken asset names."""

        return len(self.broken_assets)

    @property
    def has_broken_assets(self) -> bool:
        """Return ``True`` when at least one referenced asset is missing."""

        return bool(self.broken_assets)


__all__ = ["CatalogEntry", "Results", "UsageMap"]
