"""Insertion of captured output after a located block."""

from __future__ import annotations

from mdgoplay.constants import DEFAULT_FENCE
from mdgoplay.document import Document


def format_result_block(
    output: str, eol: str, fence: str = DEFAULT_FENCE
) -> str:
    return f"{fence}{eol}{output}{eol}{fence}{eol}"


def splice_result(
    document: Document,
    target_line: int,
    output: str,
    *,
    fence: str = DEFAULT_FENCE,
) -> str:
    """Insert ``output`` as a fenced block at column 0 of ``target_line``.

    Returns the inserted text.
    """

    text = format_result_block(output, document.eol, fence)
    document.insert(target_line, 0, text)
    return text


__all__ = ["format_result_block", "splice_result"]
