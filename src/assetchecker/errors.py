# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised at the asset checker boundary."""

from __future__ import annotations


class AssetCheckerError(RuntimeError):
    """Base class for asset checker failures surfaced to users."""


class BrokenAssetsFound(AssetCheckerError):
    """Raised when source files reference assets missing from every catalog."""

    def __init__(self, count: int) -> None:
        """Create the error for ``count`` broken asset names.

        Args:
            count: Number of distinct broken asset names found.
        """

        super().__init__(f"There were {count} broken assets found!")
        self.count = count


__all__ = ("AssetCheckerError", "BrokenAssetsFound")
