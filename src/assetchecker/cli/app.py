# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point for the asset checker."""

from __future__ import annotations

from typing import Annotated

import typer

from .. import __version__
from ..config import CheckerConfig, ConfigError
from ..errors import BrokenAssetsFound
from ..locator import AssetLocator
from ..logging import enable_verbose_logging
from ..reporting import render_results, report_broken_assets
from ._check_cli_models import (
    CATALOG_OPTION,
    EMOJI_OPTION,
    IGNORE_FILE_OPTION,
    IGNORE_OPTION,
    NO_COLOR_OPTION,
    SOURCE_OPTION,
    SWIFTGEN_OPTION,
    VERBOSE_OPTION,
)

app = typer.Typer(
    name="asset-checker",
    help="AssetChecker 👮‍♀️ finds unused and missing images in asset catalogs.",
    add_completion=False,
    no_args_is_help=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command()
def check(
    source: SOURCE_OPTION = None,
    catalog: CATALOG_OPTION = None,
    ignore: IGNORE_OPTION = None,
    ignore_file: IGNORE_FILE_OPTION = None,
    swiftgen_enums: SWIFTGEN_OPTION = None,
    use_emoji: EMOJI_OPTION = True,
    no_color: NO_COLOR_OPTION = False,
    verbose: VERBOSE_OPTION = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Report unused catalog assets and references to missing assets.

    Raises:
        typer.Exit: Exit status 1 when broken assets are found or the
            configuration is invalid.
    """

    if verbose:
        enable_verbose_logging()
    try:
        config = CheckerConfig.from_cli(
            source=source,
            catalog=catalog,
            ignore=ignore,
            ignore_file=ignore_file,
            swiftgen_enums=swiftgen_enums,
            use_emoji=use_emoji,
            use_color=False if no_color else None,
        )
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--source") from exc

    locator = AssetLocator.from_config(config)
    results = locator.check_assets()
    render_results(
        results,
        source_path=locator.source_path,
        catalog_paths=locator.asset_catalog_paths,
        style=config.output_style,
    )
    try:
        report_broken_assets(results, config.output_style)
    except BrokenAssetsFound as exc:
        raise typer.Exit(code=1) from exc


def main() -> None:
    """Run the Typer application."""

    app()


__all__ = ["app", "main"]
