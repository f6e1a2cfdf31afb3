"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Query filter package.

Provides the ``QueryFilter`` chain seam, a ``ResultTransformFilter`` base,
and the ``MapTransformFilter`` that flattens beans and messages into
property maps.

Quick start::

    from brokerconsole.filters import MapTransformFilter, StaticQueryFilter
    from brokerconsole.messaging import Queue, TextMessage

    source = StaticQueryFilter([TextMessage(destination=Queue("orders"), text="hi")])
    rows = MapTransformFilter(source).query([])
"""

from .base import QueryFilter, ResultTransformFilter, StaticQueryFilter
from .bytes_rendering import get_chunk_renderer, iter_chunk_spans
from .map_transform import MapTransformFilter, PropertyMap, qualified_type_name
from .metrics import (
    TRANSFORM_COUNTERS,
    NoOpTransformMetrics,
    PrometheusTransformMetrics,
    TransformMetrics,
)

__all__ = [
    "QueryFilter",
    "ResultTransformFilter",
    "StaticQueryFilter",
    "MapTransformFilter",
    "PropertyMap",
    "qualified_type_name",
    "iter_chunk_spans",
    "get_chunk_renderer",
    "TRANSFORM_COUNTERS",
    "TransformMetrics",
    "NoOpTransformMetrics",
    "PrometheusTransformMetrics",
]
