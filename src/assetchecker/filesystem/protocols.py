# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Capability interface describing the filesystem operations the checker needs."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystemAccessor(Protocol):
    """Enumerate and read paths without binding the checker to a concrete filesystem."""

    def enumerate(self, root: str) -> Iterable[str]:
        """Yield every entry below ``root`` as a ``/``-separated relative path.

        Directories and files are both reported, in traversal order. A missing
        or unreadable ``root`` yields nothing.
        """

        raise NotImplementedError

    def read_bytes(self, path: str) -> bytes | None:
        """Return the content of ``path`` or ``None`` when it cannot be read."""

        raise NotImplementedError

    def current_directory(self) -> str:
        """Return the directory used to resolve the default ignore file."""

        raise NotImplementedError


__all__ = ["FileSystemAccessor"]
