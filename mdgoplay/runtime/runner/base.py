"""Execution runner interfaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Protocol


@dataclass
class RunResult:
    success: bool
    output: str = ""
    error: Optional[str] = None
    returncode: Optional[int] = None
    command: List[str] = field(default_factory=list)


class ExecutionRunner(Protocol):
    def run(self, code: str, cwd: Path) -> str:
        """Execute code in ``cwd`` and return its standard output.

        Raises ``ExecutionError`` when the runtime fails.
        """
        ...
