# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fuzzy asset name comparison and ignore-list handling."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Final

from .filesystem import FileSystemAccessor, join_path

LOGGER = logging.getLogger(__name__)

DEFAULT_IGNORE_FILENAME: Final[str] = ".assetcheckerignore"


def normalize_name(name: str) -> str:
    """Return ``name`` lowercased with every non letter/digit character removed."""

    return "".join(char for char in name if char.isalnum()).lower()


def is_fuzzy_match(left: str, right: str) -> bool:
    """Return ``True`` when both names normalise to the same string.

    ``swift-gen-image``, ``swiftGenImage`` and ``SwiftGenImage`` all match.
    """

    return normalize_name(left) == normalize_name(right)


class IgnoreMatcher:
    """Decide whether an asset name is excluded by the ignore list."""

    def __init__(self, patterns: Sequence[str]) -> None:
        """Compile ``patterns`` once; empty or invalid patterns never match.

        Args:
            patterns: Regular expressions searched anywhere within a name.
        """

        self._patterns = tuple(patterns)
        self._compiled = tuple(
            compiled for compiled in (_compile(pattern) for pattern in self._patterns) if compiled
        )

    @property
    def patterns(self) -> tuple[str, ...]:
        """Return the raw patterns supplied to the matcher."""

        return self._patterns

    def is_ignored(self, name: str) -> bool:
        """Return ``True`` when at least one pattern matches within ``name``."""

        return any(regex.search(name) for regex in self._compiled)

    def __call__(self, name: str) -> bool:
        return self.is_ignored(name)


def _compile(pattern: str) -> re.Pattern[str] | None:
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as exc:
        LOGGER.debug("Ignoring invalid ignore pattern %r: %s", pattern, exc)
        return None


def default_ignore_file(fs: FileSystemAccessor) -> str:
    """Return the ``.assetcheckerignore`` path inside the current directory."""

    return join_path(fs.current_directory(), DEFAULT_IGNORE_FILENAME)


def parse_ignore_text(text: str) -> list[str]:
    """Split ignore file content into one pattern per line.

    Every line break recognised by :meth:`str.splitlines` ends a pattern, so a
    lone ``\\r`` or ``\\u2028`` separates patterns too. Blank lines between
    patterns are kept; a trailing line break does not add an empty pattern.
    """

    return text.splitlines()


def load_ignore_list(
    explicit_names: Sequence[str],
    ignore_file: str | None,
    fs: FileSystemAccessor,
) -> tuple[str, ...]:
    """Resolve the ignore list used for a run.

    A non-empty ``explicit_names`` wins outright and the ignore file is never
    read. Otherwise ``ignore_file`` (or ``.assetcheckerignore`` in the current
    directory) supplies the patterns; an unreadable file yields an empty list.

    Args:
        explicit_names: Names supplied on the command line.
        ignore_file: Optional explicit ignore file path.
        fs: Filesystem accessor used to read the ignore file.

    Returns:
        tuple[str, ...]: Ordered ignore patterns.
    """

    if explicit_names:
        return tuple(explicit_names)
    path = ignore_file if ignore_file is not None else default_ignore_file(fs)
    data = fs.read_bytes(path)
    if data is None:
        return ()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        LOGGER.debug("Ignore file %s is not valid UTF-8", path)
        return ()
    return tuple(parse_ignore_text(text))


__all__ = [
    "DEFAULT_IGNORE_FILENAME",
    "IgnoreMatcher",
    "default_ignore_file",
    "is_fuzzy_match",
    "load_ignore_list",
    "normalize_name",
    "parse_ignore_text",
]
