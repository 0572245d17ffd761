"""Conversion between Pandoc's JSON AST and the document tree."""

from __future__ import annotations

import json
from typing import Any, Sequence

from docmeta.document.base import (
    Document,
    Meta,
    MetaBlocks,
    MetaBool,
    MetaInlines,
    MetaList,
    MetaMap,
    MetaString,
    MetaValue,
)
from docmeta.errors import ParseError, RenderError


# ---------------------------------------------------------------------------
# Pandoc JSON -> Document
# ---------------------------------------------------------------------------

def document_from_json(payload: str | dict[str, Any]) -> Document:
    """Build a ``Document`` from Pandoc JSON output (text or already decoded)."""
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except ValueError as exc:
            raise ParseError(f"pandoc produced invalid JSON: {exc}") from exc

    if not isinstance(payload, dict) or "blocks" not in payload:
        raise ParseError("pandoc JSON is missing the 'blocks' field")

    raw_meta = payload.get("meta") or {}
    if not isinstance(raw_meta, dict):
        raise ParseError("pandoc JSON 'meta' is not an object")

    return Document(
        meta={key: meta_value_from_json(value) for key, value in raw_meta.items()},
        blocks=list(payload["blocks"]),
        api_version=payload.get("pandoc-api-version"),
    )


def meta_value_from_json(node: dict[str, Any]) -> MetaValue:
    tag = node.get("t") if isinstance(node, dict) else None
    content = node.get("c") if isinstance(node, dict) else None

    if tag == "MetaMap":
        return MetaMap({key: meta_value_from_json(value) for key, value in content.items()})
    if tag == "MetaList":
        return MetaList([meta_value_from_json(item) for item in content])
    if tag == "MetaBool":
        return MetaBool(bool(content))
    if tag == "MetaString":
        return MetaString(content)
    if tag == "MetaInlines":
        return MetaInlines(list(content))
    if tag == "MetaBlocks":
        return MetaBlocks(list(content))

    raise ParseError(f"unknown pandoc metadata node: {tag!r}")


# ---------------------------------------------------------------------------
# Document -> Pandoc JSON
# ---------------------------------------------------------------------------

def document_to_json(document: Document, api_version: Sequence[int]) -> str:
    """Serialise a ``Document`` as Pandoc JSON input.

    ``document.api_version`` wins over ``api_version`` when the tree was
    read by Pandoc itself.
    """
    meta = document.meta.entries if isinstance(document.meta, MetaMap) else document.meta
    if not isinstance(meta, dict):
        raise RenderError(
            f"cannot serialise a {type(meta).__name__} metadata root; pandoc needs a mapping"
        )

    return json.dumps(
        {
            "pandoc-api-version": list(document.api_version or api_version),
            "meta": meta_to_json(meta),
            "blocks": document.blocks,
        },
        ensure_ascii=False,
    )


def meta_to_json(meta: Meta) -> dict[str, Any]:
    return {key: meta_value_to_json(value) for key, value in meta.items()}


def meta_value_to_json(value: MetaValue) -> dict[str, Any]:
    if isinstance(value, MetaMap):
        return {"t": "MetaMap", "c": meta_to_json(value.entries)}
    if isinstance(value, MetaList):
        return {"t": "MetaList", "c": [meta_value_to_json(item) for item in value.items]}
    if isinstance(value, MetaBool):
        return {"t": "MetaBool", "c": value.value}
    if isinstance(value, MetaString):
        return {"t": "MetaString", "c": value.value}
    if isinstance(value, MetaInlines):
        return {"t": "MetaInlines", "c": value.inlines}
    if isinstance(value, MetaBlocks):
        return {"t": "MetaBlocks", "c": value.blocks}

    raise TypeError(f"Unsupported metadata value: {type(value).__name__}")


# ---------------------------------------------------------------------------
# Node builders
# ---------------------------------------------------------------------------

def plain(inlines: list[Any]) -> dict[str, Any]:
    """A ``Plain`` block: inlines without paragraph wrapping."""
    return {"t": "Plain", "c": inlines}


def para(inlines: list[Any]) -> dict[str, Any]:
    return {"t": "Para", "c": inlines}


def text_inlines(text: str) -> list[dict[str, Any]]:
    """Split text into ``Str``/``Space`` inlines."""
    result: list[dict[str, Any]] = []
    for i, word in enumerate(text.split(" ")):
        if i:
            result.append({"t": "Space"})
        if word:
            result.append({"t": "Str", "c": word})
    return result
