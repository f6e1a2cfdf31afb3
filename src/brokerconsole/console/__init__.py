"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Diagnostic sink for console tooling.
"""

from .writer import (
    LoggingOutputWriter,
    OutputWriter,
    StreamOutputWriter,
    get_writer,
    instantiate,
    print_line,
)

__all__ = [
    "OutputWriter",
    "StreamOutputWriter",
    "LoggingOutputWriter",
    "instantiate",
    "get_writer",
    "print_line",
]
