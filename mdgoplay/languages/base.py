"""Base language plugin interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional


class LanguagePlugin(ABC):
    """Describes how fenced blocks of one language are recognised and run."""

    language_name: str = "unknown"
    fence_tag: str = ""
    file_extension: str = ""
    default_binary: str = ""

    @property
    def name(self) -> str:
        return self.language_name

    @property
    def source_filename(self) -> str:
        return f"main{self.file_extension}"

    @abstractmethod
    def command(
        self, source_path: Path, *, binary: Optional[str] = None
    ) -> List[str]:
        """Return the argv that runs ``source_path``."""
