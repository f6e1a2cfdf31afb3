"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Exception hierarchy shared across brokerconsole modules.
"""

from __future__ import annotations


class BrokerConsoleError(RuntimeError):
    """Base brokerconsole error."""


class TransformError(BrokerConsoleError):
    """Raised when a field cannot be read while transforming one object."""


class MalformedObjectNameError(ValueError):
    """Raised when a bean identity string cannot be parsed."""


class SettingsError(ValueError):
    """Raised for invalid filter settings."""
