# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Immutable run configuration built once from command-line input."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .logging import OutputStyle


class ConfigError(ValueError):
    """Raised when configuration input is invalid."""


def split_csv(value: str | None) -> tuple[str, ...]:
    """Split a comma separated option value, trimming items and dropping blanks.

    Args:
        value: Raw option value, possibly ``None``.

    Returns:
        tuple[str, ...]: Non-empty items in their original order.
    """

    if not value:
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())


class CheckerConfig(BaseModel):
    """Settings for one asset check run."""

    model_config = ConfigDict(frozen=True)

    source: Path = Field(default_factory=Path.cwd)
    catalog: Path | None = None
    ignore: tuple[str, ...] = ()
    ignore_file: Path | None = None
    swiftgen_enums: tuple[str, ...] = ()
    use_emoji: bool = True
    use_color: bool | None = None

    @field_validator("source")
    @classmethod
    def _source_must_be_directory(cls, value: Path) -> Path:
        if not value.is_dir():
            raise ValueError(f"source path {value} is not a directory")
        return value

    @property
    def output_style(self) -> OutputStyle:
        """Return the console presentation flags for this run."""

        return OutputStyle(use_emoji=self.use_emoji, use_color=self.use_color)

    @classmethod
    def from_cli(
        cls,
        *,
        source: Path | None,
        catalog: Path | None,
        ignore: str | None,
        ignore_file: Path | None,
        swiftgen_enums: str | None,
        use_emoji: bool = True,
        use_color: bool | None = None,
    ) -> CheckerConfig:
        """Build a configuration from raw Typer parameters.

        A missing ``source`` resolves to the current working directory at call time.

        Raises:
            ConfigError: If the source path is not an existing directory.
        """

        try:
            return cls(
                source=source if source is not None else Path.cwd(),
                catalog=catalog,
                ignore=split_csv(ignore),
                ignore_file=ignore_file,
                swiftgen_enums=split_csv(swiftgen_enums),
                use_emoji=use_emoji,
                use_color=use_color,
            )
        except ValueError as exc:
            raise ConfigError(_first_error_message(exc)) from exc


def _first_error_message(exc: ValueError) -> str:
    errors: Iterable[dict[str, object]] = getattr(exc, "errors", lambda: [])()
    for error in errors:
        message = str(error.get("msg", ""))
        if message:
            return message.removeprefix("Value error, ")
    return str(exc)


__all__ = ["CheckerConfig", "ConfigError", "split_csv"]
