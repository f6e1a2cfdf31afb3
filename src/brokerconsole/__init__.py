"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

brokerconsole: flatten broker management beans and queued messages into
ordered property maps for console display and export.
"""

from .errors import BrokerConsoleError, MalformedObjectNameError, SettingsError, TransformError
from .filters import MapTransformFilter, ResultTransformFilter, StaticQueryFilter
from .settings import INT32_MAX, FilterSettings

__all__ = [
    "BrokerConsoleError",
    "TransformError",
    "MalformedObjectNameError",
    "SettingsError",
    "FilterSettings",
    "INT32_MAX",
    "MapTransformFilter",
    "ResultTransformFilter",
    "StaticQueryFilter",
]
