from __future__ import annotations

import io

import pytest
from prometheus_client import CollectorRegistry

from brokerconsole import TransformError
from brokerconsole.console import StreamOutputWriter
from brokerconsole.filters import (
    TRANSFORM_COUNTERS,
    MapTransformFilter,
    PrometheusTransformMetrics,
)
from brokerconsole.management import Attribute, AttributeList, OBJECT_NAME_ATTRIBUTE
from brokerconsole.messaging import TextMessage


class _Metrics:
    def __init__(self) -> None:
        self.counts: dict[str, int] = {}
        self.tags: list[dict[str, str]] = []

    def incr(self, name, value=1, *, tags=None):
        self.counts[name] = self.counts.get(name, 0) + value
        self.tags.append(dict(tags or {}))


def test_transform_metrics_counters_are_emitted():
    metrics = _Metrics()
    transformer = MapTransformFilter(
        writer=StreamOutputWriter(output=io.StringIO()), metrics=metrics
    )

    transformer.transform_element(TextMessage(text="x"))
    transformer.transform_element(3.5)
    with pytest.raises(TransformError):
        transformer.transform_element(AttributeList([Attribute(OBJECT_NAME_ATTRIBUTE, 1)]))

    assert metrics.counts == {
        "map_transform_total": 1,
        "map_transform_unsupported_total": 1,
        "map_transform_failed_total": 1,
    }
    assert {"kind": "TextMessage"} in metrics.tags
    assert {"type": "builtins.float"} in metrics.tags
    assert {"kind": "AttributeList"} in metrics.tags


def test_prometheus_metrics_adapter_counts_by_label():
    registry = CollectorRegistry()
    metrics = PrometheusTransformMetrics(namespace="test", registry=registry)
    transformer = MapTransformFilter(metrics=metrics)

    transformer.transform_element(TextMessage(text="a"))
    transformer.transform_element(TextMessage(text="b"))

    value = registry.get_sample_value(
        "test_map_transform_total", {"kind": "TextMessage"}
    )
    assert value == 2.0


def test_prometheus_metrics_registers_declared_counters_only():
    registry = CollectorRegistry()
    metrics = PrometheusTransformMetrics(namespace="decl", registry=registry)

    metrics.incr("map_transform_unsupported_total", tags={"type": "builtins.int"})
    metrics.incr("map_transform_failed_total", 3, tags={"kind": "MapMessage"})

    assert registry.get_sample_value(
        "decl_map_transform_unsupported_total", {"type": "builtins.int"}
    ) == 1.0
    assert registry.get_sample_value(
        "decl_map_transform_failed_total", {"kind": "MapMessage"}
    ) == 3.0
    assert set(TRANSFORM_COUNTERS) == {
        "map_transform_total",
        "map_transform_unsupported_total",
        "map_transform_failed_total",
    }
    with pytest.raises(ValueError, match="Unknown transform metric"):
        metrics.incr("other_total", tags={"kind": "x"})
    with pytest.raises(ValueError, match="requires a 'kind' tag"):
        metrics.incr("map_transform_total")
