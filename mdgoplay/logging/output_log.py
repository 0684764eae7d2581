"""Clearable diagnostic log shown to the user on execution failures."""

from __future__ import annotations

import logging
import threading

from typing import Callable, List, Optional

from mdgoplay.constants import OUTPUT_LOG_NAME


class OutputLog:
    """Append/clear text sink with a visibility flag.

    Every append is mirrored to the ``mdgoplay.output`` logger. ``on_show``
    is called with the full log text whenever the log is revealed.
    """

    def __init__(
        self,
        name: str = OUTPUT_LOG_NAME,
        *,
        on_show: Optional[Callable[[str], None]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.name = name
        self.on_show = on_show
        self.visible = False
        self._chunks: List[str] = []
        self._lock = threading.Lock()
        self._logger = logger or logging.getLogger("mdgoplay.output")

    @property
    def text(self) -> str:
        with self._lock:
            return "".join(self._chunks)

    def append(self, text: str) -> None:
        if not text:
            return
        with self._lock:
            self._chunks.append(text)
        self._logger.debug("[%s] %s", self.name, text.rstrip("\n"))

    def append_line(self, text: str) -> None:
        self.append(f"{text}\n")

    def clear(self) -> None:
        with self._lock:
            self._chunks.clear()

    def show(self) -> None:
        self.visible = True
        if self.on_show is not None:
            self.on_show(self.text)


__all__ = ["OutputLog"]
