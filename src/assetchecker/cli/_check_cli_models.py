# SPDX-License-Identifier: MIT
"""Typer parameter declarations for the asset check command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

SOURCE_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--source",
        "-s",
        help="The path to the source code you want to check. Defaults to the current directory.",
    ),
]
CATALOG_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--catalog",
        help="The asset catalog to check for extra assets. Omitting this option searches for asset catalogs.",
    ),
]
IGNORE_OPTION = Annotated[
    str | None,
    typer.Option("--ignore", help="Comma-separated asset names (regular expressions) to ignore."),
]
IGNORE_FILE_OPTION = Annotated[
    Path | None,
    typer.Option("--ignore-file", help="Path to the .assetcheckerignore file."),
]
SWIFTGEN_OPTION = Annotated[
    str | None,
    typer.Option(
        "--swiftgen-enums",
        help="Comma-separated names of the SwiftGen enumerations to check against.",
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in console output."),
]
NO_COLOR_OPTION = Annotated[
    bool,
    typer.Option("--no-color", help="Disable colour output (defaults to TTY detection)."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Print debug diagnostics to stderr."),
]

__all__ = [
    "CATALOG_OPTION",
    "NO_COLOR_OPTION",
    "EMOJI_OPTION",
    "IGNORE_FILE_OPTION",
    "IGNORE_OPTION",
    "SOURCE_OPTION",
    "SWIFTGEN_OPTION",
    "VERBOSE_OPTION",
]
