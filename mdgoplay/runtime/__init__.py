"""Runtime helpers: temp source files and subprocess runners."""

from .paths import temp_source_path, write_source
from .runner import ExecutionRunner, RunResult, SubprocessRunner

__all__ = [
    "ExecutionRunner",
    "RunResult",
    "SubprocessRunner",
    "temp_source_path",
    "write_source",
]
