"""Line-oriented document model used by the locator and splicer."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Protocol

from mdgoplay.constants import EOL_CRLF, EOL_LF


@dataclass(frozen=True)
class Cursor:
    """Zero-based cursor position."""

    line: int = 0
    column: int = 0


class Document(Protocol):
    """Minimal editing surface the core reads from and inserts into."""

    @property
    def line_count(self) -> int:
        ...

    @property
    def eol(self) -> str:
        ...

    @property
    def path(self) -> Optional[Path]:
        ...

    def line_at(self, index: int) -> str:
        """Return the text of a line without its line break."""
        ...

    def insert(self, line: int, column: int, text: str) -> None:
        """Insert text at a position as a single edit."""
        ...


def detect_eol(text: str) -> str:
    return EOL_CRLF if EOL_CRLF in text else EOL_LF


class TextDocument:
    """In-memory document, optionally backed by a file on disk.

    Lines are split the way editors count them: a trailing line break
    yields a final empty line, and ``\\r`` before ``\\n`` belongs to the
    line break rather than the line text.
    """

    def __init__(
        self,
        text: str = "",
        *,
        path: Optional[str | Path] = None,
        eol: Optional[str] = None,
    ) -> None:
        self._text = text
        self._path = Path(path) if path is not None else None
        self._eol = eol or detect_eol(text)
        self.version = 1
        self._reindex()

    def _reindex(self) -> None:
        raw_lines = self._text.split("\n")
        self._lines = [
            raw[:-1] if raw.endswith("\r") else raw for raw in raw_lines
        ]
        self._starts: List[int] = []
        offset = 0
        for raw in raw_lines:
            self._starts.append(offset)
            offset += len(raw) + 1

    @classmethod
    def from_lines(
        cls,
        lines: List[str],
        *,
        eol: str = EOL_LF,
        path: Optional[str | Path] = None,
    ) -> "TextDocument":
        return cls(eol.join(lines), path=path, eol=eol)

    @classmethod
    def load(cls, path: str | Path) -> "TextDocument":
        """Read a UTF-8 file, preserving its line endings."""

        path = Path(path)
        with path.open("r", encoding="utf-8", newline="") as handle:
            text = handle.read()
        return cls(text, path=path)

    def save(self, path: Optional[str | Path] = None) -> Path:
        target = Path(path) if path is not None else self._path
        if target is None:
            raise ValueError("Document has no path to save to")
        with target.open("w", encoding="utf-8", newline="") as handle:
            handle.write(self._text)
        self._path = target
        return target

    @property
    def text(self) -> str:
        return self._text

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def eol(self) -> str:
        return self._eol

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, index: int) -> str:
        if index < 0 or index >= self.line_count:
            raise IndexError(f"line {index} out of range")
        return self._lines[index]

    def offset_at(self, line: int, column: int = 0) -> int:
        """Translate a position into a string offset (clamped to the line)."""

        if line < 0:
            raise IndexError(f"line {line} out of range")
        if line >= len(self._lines):
            return len(self._text)
        return self._starts[line] + min(column, len(self._lines[line]))

    def insert(self, line: int, column: int, text: str) -> None:
        if line >= self.line_count:
            # Past the last line: start a new line instead of gluing the
            # insertion onto the final line's text.
            prefix = "" if self._text.endswith("\n") else self._eol
            self._text = self._text + prefix + text
        else:
            offset = self.offset_at(line, column)
            self._text = self._text[:offset] + text + self._text[offset:]
        self._reindex()
        self.version += 1


@dataclass
class EditorContext:
    """The active document together with the user's cursor."""

    document: Document
    cursor: Cursor = field(default_factory=Cursor)


__all__ = [
    "Cursor",
    "Document",
    "EditorContext",
    "TextDocument",
    "detect_eol",
]
