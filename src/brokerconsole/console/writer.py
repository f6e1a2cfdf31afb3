"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Diagnostic output writers and the process-wide global writer.
"""

from __future__ import annotations

import logging
import sys
from threading import Lock
from typing import Protocol, TextIO


class OutputWriter(Protocol):
    """Write-only text channel receiving one diagnostic line per call."""

    def print_line(self, text: str) -> None:
        """Emit one line of diagnostic output."""
        ...


class StreamOutputWriter:
    """Write diagnostic lines to a text stream (stdout by default)."""

    def __init__(self, *, output: TextIO | None = None) -> None:
        self._output = output
        self._lock = Lock()

    def print_line(self, text: str) -> None:
        out = self._output or sys.stdout
        with self._lock:
            out.write(f"{text}\n")
            out.flush()


class LoggingOutputWriter:
    """Forward diagnostic lines to a stdlib logger."""

    def __init__(
        self, *, logger: logging.Logger | None = None, level: int = logging.WARNING
    ) -> None:
        self._logger = logger or logging.getLogger("brokerconsole.console")
        self._level = level

    def print_line(self, text: str) -> None:
        self._logger.log(self._level, "%s", text)


_GLOBAL_WRITER: OutputWriter = StreamOutputWriter()
_LOCK = Lock()


def instantiate(writer: OutputWriter) -> None:
    """Install the process-wide writer used when no writer is injected."""
    global _GLOBAL_WRITER
    with _LOCK:
        _GLOBAL_WRITER = writer


def get_writer() -> OutputWriter:
    with _LOCK:
        return _GLOBAL_WRITER


def print_line(text: str) -> None:
    """Write one line through the global writer."""
    get_writer().print_line(text)
