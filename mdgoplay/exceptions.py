"""Custom exceptions for markdown-goplay."""

from __future__ import annotations

from typing import Optional, Sequence


class GoPlayError(RuntimeError):
    """Base exception for block execution failures."""


class GoPlayConfigError(GoPlayError):
    """Raised when configuration is invalid."""


class BlockNotFoundError(GoPlayError):
    """Raised when no fenced block encloses the cursor line."""


class ExecutionError(GoPlayError):
    """Raised when the runtime exits nonzero, times out or fails to spawn."""

    def __init__(
        self,
        message: str,
        *,
        returncode: Optional[int] = None,
        stderr: str = "",
        command: Sequence[str] = (),
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
        self.command = tuple(command)
