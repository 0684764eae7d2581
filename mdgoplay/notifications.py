"""User-facing notifications."""

from __future__ import annotations

import sys

from typing import List, Protocol, TextIO


class Notifier(Protocol):
    def show_error(self, message: str) -> None:
        ...


class ConsoleNotifier:
    """Prints notifications to a stream (stderr by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def show_error(self, message: str) -> None:
        print(f"error: {message}", file=self.stream or sys.stderr)


class RecordingNotifier:
    """Collects notifications in memory; used by embedders and tests."""

    def __init__(self) -> None:
        self.errors: List[str] = []

    def show_error(self, message: str) -> None:
        self.errors.append(message)


__all__ = ["ConsoleNotifier", "Notifier", "RecordingNotifier"]
