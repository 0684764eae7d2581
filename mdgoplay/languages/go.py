"""Go language plugin that shells out to `go run`."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from mdgoplay.languages.base import LanguagePlugin


class GoLanguagePlugin(LanguagePlugin):
    """Runs Go snippets with the system `go` toolchain."""

    language_name = "go"
    fence_tag = "go"
    file_extension = ".go"
    default_binary = "go"

    def command(
        self, source_path: Path, *, binary: Optional[str] = None
    ) -> List[str]:
        return [binary or self.default_binary, "run", str(source_path)]


__all__ = ["GoLanguagePlugin"]
