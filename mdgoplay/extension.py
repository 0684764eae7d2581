"""Activation glue: exposes the orchestrator as a parameterless command."""

from __future__ import annotations

import logging

from typing import Callable, Dict, Optional

from mdgoplay.configuration import GoPlaySettings
from mdgoplay.constants import EXECUTE_CURSOR_COMMAND
from mdgoplay.document import EditorContext
from mdgoplay.logging import OutputLog
from mdgoplay.notifications import Notifier
from mdgoplay.orchestrator import MarkdownGoPlay

LOGGER = logging.getLogger(__name__)

COMMANDS: Dict[str, Callable[[], None]] = {}


def register_command(name: str, handler: Callable[[], None]) -> None:
    """Register or override a command handler."""

    COMMANDS[name] = handler


def unregister_command(name: str) -> None:
    COMMANDS.pop(name, None)


def execute_command(name: str) -> None:
    try:
        handler = COMMANDS[name]
    except KeyError as exc:
        raise KeyError(f"Command '{name}' is not registered") from exc
    handler()


def activate(
    context_provider: Callable[[], Optional[EditorContext]],
    *,
    settings: Optional[GoPlaySettings] = None,
    output_log: Optional[OutputLog] = None,
    notifier: Optional[Notifier] = None,
) -> MarkdownGoPlay:
    """Build the orchestrator and bind it to the execute-cursor command.

    ``context_provider`` is asked for the active editor each time the
    command fires; returning ``None`` makes the command a no-op.
    """

    play = MarkdownGoPlay(
        settings, output_log=output_log, notifier=notifier
    )

    def _execute_cursor() -> None:
        play.run(context_provider())

    register_command(EXECUTE_CURSOR_COMMAND, _execute_cursor)
    LOGGER.debug("Registered command %s", EXECUTE_CURSOR_COMMAND)
    return play


def deactivate() -> None:
    unregister_command(EXECUTE_CURSOR_COMMAND)


__all__ = [
    "COMMANDS",
    "activate",
    "deactivate",
    "execute_command",
    "register_command",
    "unregister_command",
]
