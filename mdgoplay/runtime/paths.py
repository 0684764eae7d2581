# Copyright (c) Meta Platforms, Inc. and affiliates.
# Modifications copyright (c) 2025 Logan Martel.
# Adapted from https://github.com/meta-pytorch/KernelAgent (Apache-2.0).

"""Temporary source file locations."""

from __future__ import annotations

import tempfile
import uuid

from pathlib import Path
from typing import Optional

from mdgoplay.languages.base import LanguagePlugin


def temp_source_path(
    plugin: LanguagePlugin,
    *,
    temp_dir: Optional[Path] = None,
    unique: bool = False,
) -> Path:
    """Return where the snippet is written before running.

    The default is a fixed ``main<ext>`` in the system temp directory,
    shared by every invocation. ``unique`` adds a random suffix so
    overlapping runs do not overwrite each other.
    """

    base = (
        Path(temp_dir) if temp_dir is not None else Path(tempfile.gettempdir())
    )
    if unique:
        return base / f"main-{uuid.uuid4().hex[:8]}{plugin.file_extension}"
    return base / plugin.source_filename


def write_source(path: Path, code: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(code, encoding="utf-8")
    return path


__all__ = ["temp_source_path", "write_source"]
