"""Load source documents into structured values.

Every entry point reads raw text into a ``Document``, flattens its metadata
and, for the ``load``/``convert`` family, renders the body into the reserved
``"content"`` key of the flattened metadata.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, TypeVar

import structlog

from docmeta.decode import decode
from docmeta.document.base import Document, Reader, Writer
from docmeta.errors import ConversionError, MergeError
from docmeta.flatten import flatten_metadata
from docmeta.pandoc.options import (
    DEFAULT_HTML5_OPTIONS,
    DEFAULT_MARKDOWN_OPTIONS,
    PLAIN_TEXT_OPTIONS,
    ReaderOptions,
    WriterOptions,
)
from docmeta.pandoc.reader import PandocReader
from docmeta.pandoc.writer import PandocWriter

T = TypeVar("T")

CONTENT_KEY = "content"

logger = structlog.get_logger(__name__)


@contextmanager
def _tag_source(source: str | None) -> Iterator[None]:
    """Attach ``source`` to conversion errors raised inside the block."""
    try:
        yield
    except ConversionError as exc:
        if exc.source is None:
            exc.source = source
        logger.debug("conversion_failed", stage=exc.stage, error=exc.message, source=source)
        raise


# ---------------------------------------------------------------------------
# Reading + metadata
# ---------------------------------------------------------------------------

def parse_document_and_metadata(
    reader: Reader,
    text: str,
    meta_writer: Writer | None = None,
    *,
    source: str | None = None,
) -> tuple[Document, Any]:
    """Read ``text`` and flatten its metadata.

    Metadata is rendered with ``meta_writer``; by default a plain-text Pandoc
    writer, which drops links, images and inline formatting.
    """
    if meta_writer is None:
        meta_writer = PandocWriter(PLAIN_TEXT_OPTIONS)

    with _tag_source(source):
        document = reader.read(text)
        meta = flatten_metadata(meta_writer, document.meta)

    logger.debug("metadata_flattened", source=source, keys=_keys(meta))
    return document, meta


def parse_document_and_metadata_typed(
    target: type[T],
    reader: Reader,
    text: str,
    meta_writer: Writer | None = None,
    *,
    source: str | None = None,
) -> tuple[Document, T]:
    """Like ``parse_document_and_metadata`` but decodes the metadata into ``target``."""
    document, meta = parse_document_and_metadata(reader, text, meta_writer, source=source)
    with _tag_source(source):
        return document, decode(target, meta)


# ---------------------------------------------------------------------------
# Full load
# ---------------------------------------------------------------------------

def load_using(reader: Reader, writer: Writer, text: str, *, source: str | None = None) -> dict[str, Any]:
    """Read ``text`` with ``reader`` and render it with ``writer``.

    Returns the flattened metadata with the rendered body under ``"content"``
    (overwriting any metadata field of that name). The same writer renders
    rich-text metadata leaves.
    """
    with _tag_source(source):
        document = reader.read(text)
        meta = flatten_metadata(writer, document.meta)
        if not isinstance(meta, dict):
            raise MergeError(
                f"metadata did not flatten to an object (got {type(meta).__name__})"
            )
        body = writer.write(document)

    meta[CONTENT_KEY] = body
    logger.debug("document_loaded", source=source, keys=_keys(meta), length=len(body))
    return meta


def load_using_typed(
    target: type[T],
    reader: Reader,
    writer: Writer,
    text: str,
    *,
    source: str | None = None,
) -> T:
    """Like ``load_using`` but decodes the result into ``target``."""
    value = load_using(reader, writer, text, source=source)
    with _tag_source(source):
        return decode(target, value)


# ---------------------------------------------------------------------------
# Markdown -> HTML with Pandoc
# ---------------------------------------------------------------------------

def convert_markup_to_structured(
    text: str,
    reader_options: ReaderOptions | None = None,
    writer_options: WriterOptions | None = None,
    *,
    source: str | None = None,
) -> dict[str, Any]:
    """Convert Markdown into metadata plus rendered HTML under ``"content"``.

    Without options this uses ``DEFAULT_MARKDOWN_OPTIONS`` and
    ``DEFAULT_HTML5_OPTIONS``.
    """
    reader = PandocReader(reader_options or DEFAULT_MARKDOWN_OPTIONS)
    writer = PandocWriter(writer_options or DEFAULT_HTML5_OPTIONS)
    return load_using(reader, writer, text, source=source)


def convert_markup_to_typed(
    target: type[T],
    text: str,
    reader_options: ReaderOptions | None = None,
    writer_options: WriterOptions | None = None,
    *,
    source: str | None = None,
) -> T:
    value = convert_markup_to_structured(text, reader_options, writer_options, source=source)
    with _tag_source(source):
        return decode(target, value)


def _keys(meta: Any) -> list[str] | None:
    return list(meta) if isinstance(meta, dict) else None
