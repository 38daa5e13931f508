# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem access used by catalog inventory and reference scanning."""

from __future__ import annotations

from .local import LocalFileSystem, join_path
from .protocols import FileSystemAccessor

__all__ = ["FileSystemAccessor", "LocalFileSystem", "join_path"]
