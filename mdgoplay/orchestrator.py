"""Execute-and-splice workflow for the fenced block under the cursor."""

from __future__ import annotations

import logging

from pathlib import Path
from typing import Optional

from mdgoplay.configuration import GoPlaySettings
from mdgoplay.constants import (
    NOT_FOUND_MESSAGE,
    OUTCOME_FAILED,
    OUTCOME_NOT_FOUND,
    OUTCOME_SKIPPED,
    OUTCOME_SPLICED,
    STATE_IDLE,
    STATE_LOCATING,
    STATE_RUNNING,
    STATE_SPLICING,
)
from mdgoplay.document import Document, EditorContext
from mdgoplay.exceptions import BlockNotFoundError, ExecutionError
from mdgoplay.languages import LanguagePlugin, load_language_plugin
from mdgoplay.locator import locate_block
from mdgoplay.logging import OutputLog
from mdgoplay.notifications import ConsoleNotifier, Notifier
from mdgoplay.runtime.runner import ExecutionRunner, SubprocessRunner
from mdgoplay.splicer import splice_result

LOGGER = logging.getLogger(__name__)


def resolve_workdir(settings: GoPlaySettings, document: Document) -> Path:
    """Configured override if set, else the document's own directory."""

    if settings.workdir is not None:
        return Path(settings.workdir)
    if document.path is not None:
        return Path(document.path).resolve().parent
    return Path.cwd()


class MarkdownGoPlay:
    """Locates, runs and splices one block per ``run`` call."""

    def __init__(
        self,
        settings: Optional[GoPlaySettings] = None,
        *,
        output_log: Optional[OutputLog] = None,
        notifier: Optional[Notifier] = None,
        plugin: Optional[LanguagePlugin] = None,
        runner: Optional[ExecutionRunner] = None,
    ) -> None:
        self.settings = settings or GoPlaySettings()
        self.output_log = output_log or OutputLog()
        self.notifier = notifier or ConsoleNotifier()
        self.plugin = plugin or load_language_plugin(self.settings.language)
        runtime = self.settings.runtime
        self.runner = runner or SubprocessRunner(
            self.plugin,
            self.output_log,
            binary=runtime.binary,
            temp_dir=runtime.temp_dir,
            unique_temp_files=runtime.unique_temp_files,
            timeout_s=runtime.timeout_s,
        )
        self.state = STATE_IDLE

    def run(self, context: Optional[EditorContext]) -> str:
        """Handle one invocation and return its outcome label."""

        if context is None:
            return OUTCOME_SKIPPED
        document = context.document
        try:
            self.state = STATE_LOCATING
            try:
                block = locate_block(
                    document,
                    context.cursor.line,
                    language=self.plugin.fence_tag,
                    fence=self.settings.fence,
                )
            except BlockNotFoundError as exc:
                LOGGER.info(
                    "No block at line %d: %s", context.cursor.line, exc
                )
                self.notifier.show_error(
                    NOT_FOUND_MESSAGE.format(language=self.plugin.fence_tag)
                )
                return OUTCOME_NOT_FOUND

            cwd = resolve_workdir(self.settings, document)
            self.state = STATE_RUNNING
            try:
                output = self.runner.run(block.code, cwd)
            except ExecutionError as exc:
                LOGGER.info("Execution failed: %s", exc)
                return OUTCOME_FAILED

            self.state = STATE_SPLICING
            splice_result(
                document, block.insert_line, output, fence=self.settings.fence
            )
            LOGGER.info(
                "Inserted %d char(s) of output at line %d",
                len(output),
                block.insert_line,
            )
            return OUTCOME_SPLICED
        finally:
            self.state = STATE_IDLE


__all__ = ["MarkdownGoPlay", "resolve_workdir"]
