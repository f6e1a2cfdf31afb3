from __future__ import annotations

import pytest

from brokerconsole.filters import get_chunk_renderer, iter_chunk_spans


def test_chunk_spans_cover_body_with_trailing_remainder():
    assert list(iter_chunk_spans(25, 10)) == [(1, 0, 10), (2, 10, 10), (3, 20, 5)]


def test_chunk_spans_emit_empty_final_chunk():
    assert list(iter_chunk_spans(20, 10)) == [(1, 0, 10), (2, 10, 10), (3, 20, 0)]
    assert list(iter_chunk_spans(0, 10)) == [(1, 0, 0)]


def test_chunk_spans_reject_negative_length():
    with pytest.raises(ValueError, match=">= 0"):
        list(iter_chunk_spans(-1, 10))


def test_renderers_read_only_their_span():
    body = b"hello world"

    assert get_chunk_renderer("text")(body, 6, 5) == "world"
    assert get_chunk_renderer("base64")(body, 0, 5) == "aGVsbG8="
    assert get_chunk_renderer("length")(body, 0, 5) == "5"


def test_unknown_renderer_raises():
    with pytest.raises(ValueError, match="Unknown bytes rendering"):
        get_chunk_renderer("hex")
