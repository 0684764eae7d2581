# Copyright (c) Meta Platforms, Inc. and affiliates.
# Modifications copyright (c) 2025 Logan Martel.
# Adapted from https://github.com/meta-pytorch/KernelAgent (Apache-2.0).

"""Runner that writes a snippet to disk and invokes the language runtime."""

from __future__ import annotations

import logging
import subprocess

from pathlib import Path
from typing import Optional

from mdgoplay.exceptions import ExecutionError
from mdgoplay.languages.base import LanguagePlugin
from mdgoplay.logging import OutputLog
from mdgoplay.runtime.paths import temp_source_path, write_source

from .base import ExecutionRunner, RunResult

LOGGER = logging.getLogger(__name__)


class SubprocessRunner(ExecutionRunner):
    """Runs ``<binary> run <temp-file>`` and captures its output.

    The call blocks until the runtime exits. ``timeout_s`` is ``None`` by
    default, so a hung runtime hangs the invocation.
    """

    def __init__(
        self,
        plugin: LanguagePlugin,
        output_log: OutputLog,
        *,
        binary: Optional[str] = None,
        temp_dir: Optional[Path] = None,
        unique_temp_files: bool = False,
        timeout_s: Optional[float] = None,
    ) -> None:
        self.plugin = plugin
        self.output_log = output_log
        self.binary = binary
        self.temp_dir = temp_dir
        self.unique_temp_files = unique_temp_files
        self.timeout_s = timeout_s

    def execute(self, code: str, cwd: Path) -> RunResult:
        """Run the snippet and report the outcome without raising."""

        self.output_log.clear()
        source_path = write_source(
            temp_source_path(
                self.plugin,
                temp_dir=self.temp_dir,
                unique=self.unique_temp_files,
            ),
            code,
        )
        argv = self.plugin.command(source_path, binary=self.binary)
        self.output_log.append_line(" ".join(argv))
        LOGGER.info("Running %s in %s", " ".join(argv), cwd)
        try:
            proc = subprocess.run(
                argv,
                cwd=str(cwd),
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout_s,
            )
        except subprocess.TimeoutExpired:
            return RunResult(
                success=False,
                error=f"timed out after {self.timeout_s}s",
                command=argv,
            )
        except OSError as exc:
            return RunResult(
                success=False,
                error=f"failed to start {argv[0]}: {exc}",
                command=argv,
            )
        if proc.returncode != 0:
            return RunResult(
                success=False,
                output=proc.stdout,
                error=proc.stderr,
                returncode=proc.returncode,
                command=argv,
            )
        return RunResult(
            success=True,
            output=proc.stdout,
            returncode=proc.returncode,
            command=argv,
        )

    def run(self, code: str, cwd: Path) -> str:
        result = self.execute(code, cwd)
        if not result.success:
            error = result.error or ""
            self.output_log.append(error)
            self.output_log.show()
            LOGGER.warning(
                "%s exited with %s", result.command[0], result.returncode
            )
            raise ExecutionError(
                error.strip() or f"exit status {result.returncode}",
                returncode=result.returncode,
                stderr=error,
                command=result.command,
            )
        self.output_log.append_line(result.output)
        return result.output


__all__ = ["SubprocessRunner"]
