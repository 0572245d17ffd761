"""Tests for metadata flattening.

Covers:
- Structure-preserving flattening of plain metadata (no writer calls)
- Inline and block rich text rendered through the writer
- Failure propagation from the writer
- Non-mapping roots
- Re-flattening JSON output as a fixed point
"""

from __future__ import annotations

import json

import pytest
from fakes import FailingWriter, PlainTextWriter

from docmeta.document.base import (
    MetaBlocks,
    MetaBool,
    MetaInlines,
    MetaList,
    MetaMap,
    MetaString,
    to_meta,
)
from docmeta.errors import RenderError
from docmeta.flatten import flatten_metadata
from docmeta.pandoc.ast import para, text_inlines


def _plain_meta() -> dict:
    return {
        "title": MetaString("Hello"),
        "draft": MetaBool(False),
        "tags": MetaList([MetaString("python"), MetaString("pandoc")]),
        "author": MetaMap(
            {
                "name": MetaString("Alice"),
                "links": MetaList([MetaMap({"site": MetaString("https://example.org")})]),
            }
        ),
    }


# ---------------------------------------------------------------------------
# Plain metadata
# ---------------------------------------------------------------------------

def test_plain_metadata_is_isomorphic_without_writer_calls() -> None:
    writer = PlainTextWriter()

    result = flatten_metadata(writer, _plain_meta())

    assert result == {
        "title": "Hello",
        "draft": False,
        "tags": ["python", "pandoc"],
        "author": {"name": "Alice", "links": [{"site": "https://example.org"}]},
    }
    assert writer.calls == []


def test_key_order_is_preserved() -> None:
    meta = {key: MetaString(key) for key in ("zeta", "alpha", "mid")}

    result = flatten_metadata(PlainTextWriter(), meta)

    assert list(result) == ["zeta", "alpha", "mid"]


def test_empty_metadata_flattens_to_empty_object() -> None:
    assert flatten_metadata(PlainTextWriter(), {}) == {}


# ---------------------------------------------------------------------------
# Rich text leaves
# ---------------------------------------------------------------------------

def test_inline_leaf_renders_without_markup() -> None:
    writer = PlainTextWriter()
    meta = {"title": MetaInlines([{"t": "Strong", "c": [{"t": "Str", "c": "x"}]}])}

    assert flatten_metadata(writer, meta) == {"title": "x"}


def test_inline_leaf_is_wrapped_in_single_plain_block() -> None:
    writer = PlainTextWriter()
    inlines = text_inlines("two words")

    flatten_metadata(writer, {"title": MetaInlines(inlines)})

    assert len(writer.calls) == 1
    document = writer.calls[0]
    assert document.meta == {}
    assert document.blocks == [{"t": "Plain", "c": inlines}]


def test_block_leaf_renders_each_block() -> None:
    writer = PlainTextWriter()
    meta = {"abstract": MetaBlocks([para(text_inlines("a")), para(text_inlines("b"))])}

    assert flatten_metadata(writer, meta) == {"abstract": "a\nb"}
    assert writer.calls[0].blocks[0]["t"] == "Para"


def test_nested_rich_leaves_keep_structure() -> None:
    writer = PlainTextWriter()
    meta = {
        "authors": MetaList(
            [
                MetaMap({"name": MetaInlines(text_inlines("Alice Kim")), "lead": MetaBool(True)}),
                MetaMap({"name": MetaInlines(text_inlines("Bob Lee")), "lead": MetaBool(False)}),
            ]
        ),
    }

    result = flatten_metadata(writer, meta)

    assert result == {
        "authors": [
            {"name": "Alice Kim", "lead": True},
            {"name": "Bob Lee", "lead": False},
        ]
    }
    assert len(writer.calls) == 2


def test_one_writer_call_per_rich_leaf() -> None:
    writer = PlainTextWriter()
    meta = {
        "a": MetaInlines(text_inlines("one")),
        "b": MetaBlocks([para(text_inlines("two"))]),
        "c": MetaString("three"),
        "d": MetaList([MetaInlines(text_inlines("four")), MetaInlines(text_inlines("five"))]),
    }

    flatten_metadata(writer, meta)

    assert len(writer.calls) == 4


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

def test_writer_failure_aborts_flatten() -> None:
    writer = FailingWriter("bad inline")
    meta = {
        "title": MetaInlines(text_inlines("Title")),
        "subtitle": MetaInlines(text_inlines("Sub")),
    }

    with pytest.raises(RenderError, match="bad inline"):
        flatten_metadata(writer, meta)

    assert writer.calls == 1


def test_unknown_value_type_is_rejected() -> None:
    with pytest.raises(TypeError, match="Unsupported metadata value"):
        flatten_metadata(PlainTextWriter(), {"when": 42})


# ---------------------------------------------------------------------------
# Roots
# ---------------------------------------------------------------------------

def test_list_root_flattens_to_list() -> None:
    meta = MetaList([MetaString("a"), MetaBool(True)])

    assert flatten_metadata(PlainTextWriter(), meta) == ["a", True]


def test_map_root_flattens_to_object() -> None:
    meta = MetaMap({"title": MetaString("Hello")})

    assert flatten_metadata(PlainTextWriter(), meta) == {"title": "Hello"}


def test_reflattening_json_output_is_fixed_point() -> None:
    writer = PlainTextWriter()
    first = flatten_metadata(writer, _plain_meta())

    reloaded = to_meta(json.loads(json.dumps(first)))
    second = flatten_metadata(writer, reloaded)

    assert second == first
    assert writer.calls == []
