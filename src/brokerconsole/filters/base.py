"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Query filter chain primitives.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Protocol


class QueryFilter(Protocol):
    """One link of a query filter chain."""

    def query(self, queries: list[Any]) -> list[Any]:
        """Run the queries and return the resulting objects."""
        ...


class StaticQueryFilter:
    """Terminal filter that answers every query with a fixed result list."""

    def __init__(self, results: Iterable[Any]) -> None:
        self._results = list(results)

    def query(self, queries: list[Any]) -> list[Any]:
        _ = queries
        return list(self._results)


class ResultTransformFilter(ABC):
    """
    Filter that transforms every result produced by the next filter.

    Subclasses implement ``transform_element``; returning ``None`` drops the
    element from the transformed result list.
    """

    def __init__(self, next_filter: QueryFilter | None = None) -> None:
        self._next = next_filter

    @property
    def next_filter(self) -> QueryFilter | None:
        return self._next

    def query(self, queries: list[Any]) -> list[Any]:
        if self._next is None:
            raise RuntimeError(f"{type(self).__name__} has no next filter to query")
        return self.transform_list(self._next.query(queries))

    def transform_list(self, results: Iterable[Any]) -> list[Any]:
        transformed: list[Any] = []
        for element in results:
            out = self.transform_element(element)
            if out is not None:
                transformed.append(out)
        return transformed

    @abstractmethod
    def transform_element(self, obj: Any) -> Any:
        """Transform one result element, or return ``None`` to drop it."""
        ...
