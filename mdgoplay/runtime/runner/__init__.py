"""Runtime runner exports."""

from .base import ExecutionRunner, RunResult
from .subprocess_runner import SubprocessRunner

__all__ = [
    "ExecutionRunner",
    "RunResult",
    "SubprocessRunner",
]
