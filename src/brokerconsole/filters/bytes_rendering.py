"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Chunk layout and content rendering for bytes message bodies.
"""

from __future__ import annotations

import base64
from collections.abc import Callable, Iterator
from typing import Any

ChunkRenderer = Callable[[Any, int, int], str]


def iter_chunk_spans(length: int, chunk_size: int) -> Iterator[tuple[int, int, int]]:
    """
    Yield ``(index, start, size)`` for every chunk of a body.

    Indexes start at 1. Every full chunk is yielded first, then one final
    chunk holding ``length % chunk_size`` bytes, which is yielded even when
    it is empty. The total count is ``length // chunk_size + 1``.
    """
    if length < 0:
        raise ValueError(f"Body length must be >= 0, got {length}")
    full_chunks = length // chunk_size
    for i in range(full_chunks):
        yield i + 1, i * chunk_size, chunk_size
    yield full_chunks + 1, full_chunks * chunk_size, length % chunk_size


def _render_text(body: Any, start: int, size: int) -> str:
    return bytes(body[start : start + size]).decode("utf-8", errors="replace")


def _render_base64(body: Any, start: int, size: int) -> str:
    return base64.b64encode(bytes(body[start : start + size])).decode("ascii")


def _render_length(body: Any, start: int, size: int) -> str:
    _ = body
    _ = start
    return str(size)


_RENDERERS: dict[str, ChunkRenderer] = {
    "text": _render_text,
    "base64": _render_base64,
    "length": _render_length,
}


def get_chunk_renderer(name: str) -> ChunkRenderer:
    """Resolve a chunk renderer by its settings name."""
    renderer = _RENDERERS.get(name)
    if renderer is None:
        raise ValueError(f"Unknown bytes rendering '{name}'")
    return renderer
