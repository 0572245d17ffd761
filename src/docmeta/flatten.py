"""Flatten document metadata into plain JSON-like values."""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from docmeta.document.base import (
    Document,
    MetaBlocks,
    MetaBool,
    MetaInlines,
    MetaList,
    MetaMap,
    MetaString,
    MetaValue,
    Writer,
)
from docmeta.pandoc.ast import plain

logger = structlog.get_logger(__name__)


def flatten_metadata(writer: Writer, meta: Mapping[str, MetaValue] | MetaValue) -> Any:
    """Flatten metadata into dicts, lists, strings and bools.

    Maps and lists keep their shape and order. Inline and block rich text is
    rendered with ``writer``, one call per leaf, so the writer decides how
    much markup survives (a plain-text writer strips it all). The first
    writer failure aborts the whole flatten.
    """
    if isinstance(meta, Mapping):
        return {key: _flatten_value(writer, value) for key, value in meta.items()}
    return _flatten_value(writer, meta)


def _flatten_value(writer: Writer, value: MetaValue) -> Any:
    if isinstance(value, MetaMap):
        return {key: _flatten_value(writer, item) for key, item in value.entries.items()}

    if isinstance(value, MetaList):
        return [_flatten_value(writer, item) for item in value.items]

    if isinstance(value, (MetaBool, MetaString)):
        return value.value

    if isinstance(value, MetaInlines):
        logger.debug("flatten_render_leaf", kind="inlines", nodes=len(value.inlines))
        return writer.write(Document(blocks=[plain(value.inlines)]))

    if isinstance(value, MetaBlocks):
        logger.debug("flatten_render_leaf", kind="blocks", nodes=len(value.blocks))
        return writer.write(Document(blocks=list(value.blocks)))

    raise TypeError(f"Unsupported metadata value: {type(value).__name__}")
