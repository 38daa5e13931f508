# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``os.walk`` backed implementation of :class:`FileSystemAccessor`."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .protocols import FileSystemAccessor

LOGGER = logging.getLogger(__name__)


def join_path(root: str, relative: str) -> str:
    """Return ``relative`` appended to ``root`` with a single ``/`` separator.

    Args:
        root: Directory the relative entry was enumerated from.
        relative: Entry reported by :meth:`FileSystemAccessor.enumerate`.

    Returns:
        str: Combined path in the same style the caller supplied ``root``.
    """

    if not root:
        return relative
    return f"{root.rstrip('/')}/{relative}" if root != "/" else f"/{relative}"


class LocalFileSystem(FileSystemAccessor):
    """Read the real filesystem, absorbing I/O failures."""

    def __init__(self, *, follow_symlinks: bool = False) -> None:
        """Create an accessor optionally following directory symlinks.

        Args:
            follow_symlinks: When ``True`` descend into symlinked directories.
        """

        self.follow_symlinks = follow_symlinks

    def enumerate(self, root: str) -> Iterator[str]:
        """Yield entries below ``root`` sorted by name at every level.

        Args:
            root: Directory to walk.

        Yields:
            str: ``/``-separated path of each directory and file relative to ``root``.
        """

        base = Path(root)
        if not base.is_dir():
            LOGGER.debug("Skipping enumeration of missing directory %s", root)
            return
        walker = os.walk(base, followlinks=self.follow_symlinks, onerror=_log_walk_error)
        for current, dirnames, filenames in walker:
            dirnames.sort()
            relative_dir = Path(current).relative_to(base)
            for name in dirnames:
                yield (relative_dir / name).as_posix()
            for name in sorted(filenames):
                yield (relative_dir / name).as_posix()

    def read_bytes(self, path: str) -> bytes | None:
        """Return the bytes stored at ``path``; ``None`` when unreadable."""

        try:
            return Path(path).read_bytes()
        except OSError as exc:
            LOGGER.debug("Unable to read %s: %s", path, exc)
            return None

    def current_directory(self) -> str:
        """Return the process working directory."""

        return os.getcwd()


def _log_walk_error(error: OSError) -> None:
    LOGGER.debug("Directory walk error: %s", error)


__all__ = ["LocalFileSystem", "join_path"]
