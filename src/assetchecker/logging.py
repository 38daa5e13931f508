# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console output for asset check runs: status lines and located diagnostics."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Final, Literal

from rich.console import Console
from rich.text import Text

PACKAGE_LOGGER = logging.getLogger("assetchecker")

Severity = Literal["warning", "error"]

_SEVERITY_STYLES: Final[dict[str, str]] = {"warning": "yellow", "error": "bold red"}
_STATUS_MARKERS: Final[dict[str, tuple[str, str]]] = {
    "info": ("ℹ️ ", "cyan"),
    "ok": ("✅ ", "green"),
    "fail": ("❌ ", "red"),
}


@dataclass(frozen=True, slots=True)
class OutputStyle:
    """Presentation flags shared by every line printed during a run.

    Attributes:
        use_emoji: Prefix status lines with emoji markers.
        use_color: Force colour on or off; ``None`` follows TTY detection.
    """

    use_emoji: bool = True
    use_color: bool | None = None

    @property
    def color_enabled(self) -> bool:
        """Return ``True`` when styled output should be written."""

        if self.use_color is None:
            return _stdout_is_tty()
        return self.use_color


def _stdout_is_tty() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=4)
def _console(color: bool) -> Console:
    # Consoles resolve sys.stdout on every print, so a cached instance follows redirection.
    return Console(
        color_system="auto" if color else None,
        no_color=not color,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def _emit(text: Text, style: OutputStyle) -> None:
    _console(style.color_enabled).print(text)


def format_diagnostic(location: str, severity: Severity, message: str) -> str:
    """Return an Xcode-style ``<location>:: <severity>: <message>`` line."""

    return f"{location}:: {severity}: {message}"


def diagnostic(location: str, severity: Severity, message: str, style: OutputStyle) -> None:
    """Print one located diagnostic, colouring the severity label when enabled."""

    text = Text(format_diagnostic(location, severity, message))
    if style.color_enabled:
        start = len(location) + 3
        text.stylize(_SEVERITY_STYLES[severity], start, start + len(severity) + 1)
    _emit(text, style)


def warn_at(location: str, message: str, style: OutputStyle) -> None:
    """Print a ``warning`` diagnostic attributed to ``location``."""

    diagnostic(location, "warning", message, style)


def error_at(location: str, message: str, style: OutputStyle) -> None:
    """Print an ``error`` diagnostic attributed to ``location``."""

    diagnostic(location, "error", message, style)


def _status(kind: str, message: str, style: OutputStyle) -> None:
    marker, colour = _STATUS_MARKERS[kind]
    prefix = marker if style.use_emoji else ""
    text = Text(f"{prefix}{message}")
    if style.color_enabled:
        text.stylize(colour)
    _emit(text, style)


def info(message: str, style: OutputStyle) -> None:
    """Print a progress line such as the search header."""

    _status("info", message, style)


def ok(message: str, style: OutputStyle) -> None:
    """Print the success summary."""

    _status("ok", message, style)


def fail(message: str, style: OutputStyle) -> None:
    """Print a failing summary line."""

    _status("fail", message, style)


def enable_verbose_logging() -> None:
    """Stream the package's debug diagnostics to stderr."""

    if getattr(PACKAGE_LOGGER, "_assetchecker_verbose_configured", False):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    PACKAGE_LOGGER.addHandler(handler)
    PACKAGE_LOGGER.setLevel(logging.DEBUG)
    PACKAGE_LOGGER.propagate = False
    setattr(PACKAGE_LOGGER, "_assetchecker_verbose_configured", True)


__all__ = [
    "OutputStyle",
    "Severity",
    "diagnostic",
    "enable_verbose_logging",
    "error_at",
    "fail",
    "format_diagnostic",
    "info",
    "ok",
    "warn_at",
]
