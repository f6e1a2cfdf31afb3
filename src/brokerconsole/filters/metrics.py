"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Metrics adapters for map transform observability.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from prometheus_client import REGISTRY, CollectorRegistry, Counter

TRANSFORMED_TOTAL = "map_transform_total"
UNSUPPORTED_TOTAL = "map_transform_unsupported_total"
FAILED_TOTAL = "map_transform_failed_total"

# Counter name -> (label name, help text).
TRANSFORM_COUNTERS: dict[str, tuple[str, str]] = {
    TRANSFORMED_TOTAL: ("kind", "Objects flattened into property maps, by shape."),
    UNSUPPORTED_TOTAL: ("type", "Objects with no registered map transform, by type."),
    FAILED_TOTAL: ("kind", "Transforms aborted by a field read failure, by shape."),
}


class TransformMetrics(Protocol):
    """Minimal metrics interface for transform instrumentation."""

    def incr(
        self, name: str, value: int = 1, *, tags: Mapping[str, str] | None = None
    ) -> None:
        """Increment a counter metric."""


class NoOpTransformMetrics:
    """Default metrics sink when no metrics backend is provided."""

    def incr(
        self, name: str, value: int = 1, *, tags: Mapping[str, str] | None = None
    ) -> None:
        _ = name
        _ = value
        _ = tags


class PrometheusTransformMetrics(TransformMetrics):
    """
    Prometheus counters for the map transform filter.

    Every counter in ``TRANSFORM_COUNTERS`` is registered up front with its
    single label, so a scrape shows all three even before the first event.
    """

    def __init__(
        self,
        *,
        namespace: str = "brokerconsole",
        registry: CollectorRegistry | None = None,
    ) -> None:
        target = registry if registry is not None else REGISTRY
        self._counters: dict[str, tuple[Counter, str]] = {}
        for name, (label, documentation) in TRANSFORM_COUNTERS.items():
            counter = Counter(
                name=name,
                documentation=documentation,
                namespace=namespace,
                labelnames=(label,),
                registry=target,
            )
            self._counters[name] = (counter, label)

    def incr(
        self, name: str, value: int = 1, *, tags: Mapping[str, str] | None = None
    ) -> None:
        entry = self._counters.get(name)
        if entry is None:
            raise ValueError(f"Unknown transform metric '{name}'")
        counter, label = entry
        label_value = (tags or {}).get(label)
        if label_value is None:
            raise ValueError(f"Metric '{name}' requires a '{label}' tag")
        counter.labels(str(label_value)).inc(value)
