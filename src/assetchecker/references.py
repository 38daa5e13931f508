# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Extract asset references from Swift, Objective-C and Interface Builder sources."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Final

from .filesystem import FileSystemAccessor, join_path
from .models import UsageMap

LOGGER = logging.getLogger(__name__)

SOURCE_EXTENSIONS: Final[tuple[str, ...]] = (".swift", ".m", ".xib", ".storyboard")

NAME_PATTERN: Final[str] = r"([\w-]+)"
_BOUNDARY: Final[str] = r"(?<![a-zA-Z0-9])"


@dataclass(frozen=True, slots=True)
class ReferencePattern:
    """Compiled expression whose capture group yields a referenced asset name.

    Attributes:
        label: Short identifier describing the reference style.
        regex: Compiled expression applied to whole file contents.
        group: Index of the capture group holding the asset name.
    """

    label: str
    regex: re.Pattern[str]
    group: int = 1

    @classmethod
    def build(cls, label: str, pattern: str, group: int = 1) -> ReferencePattern:
        """Compile ``pattern`` into a :class:`ReferencePattern`."""

        return cls(label=label, regex=re.compile(pattern), group=group)

    def names_in(self, text: str) -> list[str]:
        """Return every asset name matched in ``text``, in match order."""

        return [match.group(self.group) for match in self.regex.finditer(text)]


BUILTIN_PATTERNS: Final[tuple[ReferencePattern, ...]] = (
    ReferencePattern.build("image-literal", rf"#imageLiteral\(resourceName:\s*\"{NAME_PATTERN}\"\)"),
    ReferencePattern.build("uiimage-named", rf"{_BOUNDARY}UIImage\(named:\s*\"{NAME_PATTERN}\"\)"),
    ReferencePattern.build("objc-image-named", rf"{_BOUNDARY}UIImage imageNamed:\s*@\"{NAME_PATTERN}\""),
    # Matches to the end of the line so later attributes are swallowed.
    ReferencePattern.build("storyboard-image", rf"<image name=\"{NAME_PATTERN}\".*"),
    ReferencePattern.build("rswift", rf"R\.image\.{NAME_PATTERN}\(\)"),
    ReferencePattern.build("uiimage-resource", rf"{_BOUNDARY}UIImage\(resource:\s*\.{NAME_PATTERN}\)"),
    ReferencePattern.build("swiftui-named", rf"{_BOUNDARY}Image\(\"{NAME_PATTERN}\"\)"),
    ReferencePattern.build("swiftui-resource", rf"{_BOUNDARY}Image\(\.{NAME_PATTERN}\)"),
    ReferencePattern.build("swiftui-uiimage", rf"{_BOUNDARY}Image\(uiImage:\s*\.{NAME_PATTERN}\)"),
)


def generator_pattern(prefix: str) -> ReferencePattern:
    """Return the ``<prefix>.<name>.image`` pattern for a code-generated asset enum.

    Args:
        prefix: Enum namespace emitted by the generator, for example ``Asset``.

    Returns:
        ReferencePattern: Pattern capturing the enum member name.
    """

    return ReferencePattern.build(
        f"generator:{prefix}",
        rf"{_BOUNDARY}{re.escape(prefix)}\.{NAME_PATTERN}\.image",
    )


def build_patterns(generator_prefixes: Iterable[str] = ()) -> tuple[ReferencePattern, ...]:
    """Return the builtin patterns followed by one pattern per generator prefix."""

    return BUILTIN_PATTERNS + tuple(generator_pattern(prefix) for prefix in generator_prefixes)


class ReferenceScanner:
    """Apply a fixed set of reference patterns to source text."""

    def __init__(self, patterns: Sequence[ReferencePattern]) -> None:
        self._patterns = tuple(patterns)

    @property
    def patterns(self) -> tuple[ReferencePattern, ...]:
        """Return the patterns applied by the scanner."""

        return self._patterns

    def names_in(self, text: str) -> list[str]:
        """Return the names captured by every pattern, pattern by pattern.

        Patterns are evaluated independently so one name can be reported
        several times for the same text.
        """

        names: list[str] = []
        for pattern in self._patterns:
            names.extend(pattern.names_in(text))
        return names


def is_source_file(entry: str) -> bool:
    """Return ``True`` when ``entry`` has one of the scanned source extensions."""

    return entry.endswith(SOURCE_EXTENSIONS)


def collect_usages(
    source_path: str,
    fs: FileSystemAccessor,
    scanner: ReferenceScanner,
) -> UsageMap:
    """Scan every source file under ``source_path`` and map asset names to referencing files.

    Args:
        source_path: Root of the source tree.
        fs: Filesystem accessor used for enumeration and reads.
        scanner: Scanner holding the compiled reference patterns.

    Returns:
        UsageMap: Asset names in discovery order, each with one path per match.
    """

    usages: UsageMap = {}
    for entry in fs.enumerate(source_path):
        if not is_source_file(entry):
            continue
        file_path = join_path(source_path, entry)
        text = _read_text(fs, file_path)
        if text is None:
            continue
        for name in scanner.names_in(text):
            usages.setdefault(name, []).append(file_path)
    return usages


def _read_text(fs: FileSystemAccessor, path: str) -> str | None:
    data = fs.read_bytes(path)
    if data is None:
        return None
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        LOGGER.debug("Skipping %s: content is not valid UTF-8", path)
        return None


__all__ = [
    "BUILTIN_PATTERNS",
    "NAME_PATTERN",
    "SOURCE_EXTENSIONS",
    "ReferencePattern",
    "ReferenceScanner",
    "build_patterns",
    "collect_usages",
    "generator_pattern",
    "is_source_file",
]
