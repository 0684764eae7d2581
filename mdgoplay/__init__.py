"""markdown-goplay package entry point."""

from .document import Cursor, EditorContext, TextDocument
from .exceptions import (
    BlockNotFoundError,
    ExecutionError,
    GoPlayConfigError,
    GoPlayError,
)
from .locator import CodeBlock, locate_block
from .orchestrator import MarkdownGoPlay, resolve_workdir
from .splicer import splice_result

__all__ = [
    "BlockNotFoundError",
    "CodeBlock",
    "Cursor",
    "EditorContext",
    "ExecutionError",
    "GoPlayConfigError",
    "GoPlayError",
    "MarkdownGoPlay",
    "TextDocument",
    "locate_block",
    "resolve_workdir",
    "splice_result",
]
