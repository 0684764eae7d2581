"""Cursor-relative fenced block detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mdgoplay.constants import DEFAULT_FENCE, DEFAULT_LANGUAGE
from mdgoplay.document import Document
from mdgoplay.exceptions import BlockNotFoundError


@dataclass(frozen=True)
class CodeBlock:
    """A located block: its code and where results belong."""

    code: str
    start_line: int
    end_line: int

    @property
    def insert_line(self) -> int:
        return self.end_line + 1


def _scan_up(
    document: Document, cursor_line: int, marker: str
) -> Optional[int]:
    for index in range(cursor_line, -1, -1):
        if document.line_at(index).startswith(marker):
            return index
    return None


def _scan_down(
    document: Document, cursor_line: int, marker: str
) -> Optional[int]:
    for index in range(cursor_line, document.line_count):
        if document.line_at(index).startswith(marker):
            return index
    return None


def locate_block(
    document: Document,
    cursor_line: int,
    *,
    language: str = DEFAULT_LANGUAGE,
    fence: str = DEFAULT_FENCE,
) -> CodeBlock:
    """Find the fenced block around ``cursor_line``.

    The opening fence (``fence + language``) is searched from the cursor
    line upward and the closing fence from the cursor line downward. The
    two scans are independent, so a cursor sitting on the opening fence
    matches that same line as the closing fence.
    """

    if cursor_line < 0 or cursor_line >= document.line_count:
        raise BlockNotFoundError(
            f"cursor line {cursor_line} is outside the document"
        )

    opening = _scan_up(document, cursor_line, fence + language)
    if opening is None:
        raise BlockNotFoundError(
            f"no '{fence}{language}' fence at or above line {cursor_line}"
        )
    start_line = opening + 1

    end_line = _scan_down(document, cursor_line, fence)
    if end_line is None:
        raise BlockNotFoundError(
            f"no closing '{fence}' fence at or below line {cursor_line}"
        )

    # Crossed scans select the same lines an editor range would once its
    # endpoints are swapped.
    first, last = sorted((start_line, end_line))
    eol = document.eol
    code = "".join(
        document.line_at(index) + eol for index in range(first, last)
    )
    return CodeBlock(code=code, start_line=start_line, end_line=end_line)


__all__ = ["CodeBlock", "locate_block"]
