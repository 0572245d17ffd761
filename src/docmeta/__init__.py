"""Convert markup documents into flattened metadata plus rendered content."""

from .decode import decode
from .document import (
    Document,
    MetaBlocks,
    MetaBool,
    MetaInlines,
    MetaList,
    MetaMap,
    MetaString,
    MetaValue,
    Reader,
    Writer,
)
from .errors import ConversionError, DecodeError, MergeError, ParseError, RenderError
from .flatten import flatten_metadata
from .loader import (
    CONTENT_KEY,
    convert_markup_to_structured,
    convert_markup_to_typed,
    load_using,
    load_using_typed,
    parse_document_and_metadata,
    parse_document_and_metadata_typed,
)
from .log import configure_logging
from .pandoc import (
    DEFAULT_HTML5_OPTIONS,
    DEFAULT_MARKDOWN_OPTIONS,
    PLAIN_TEXT_OPTIONS,
    PandocReader,
    PandocWriter,
    ReaderOptions,
    WriterOptions,
)

__all__ = [
    "CONTENT_KEY",
    "ConversionError",
    "DecodeError",
    "MergeError",
    "ParseError",
    "RenderError",
    "Document",
    "MetaBlocks",
    "MetaBool",
    "MetaInlines",
    "MetaList",
    "MetaMap",
    "MetaString",
    "MetaValue",
    "Reader",
    "Writer",
    "flatten_metadata",
    "decode",
    "convert_markup_to_structured",
    "convert_markup_to_typed",
    "load_using",
    "load_using_typed",
    "parse_document_and_metadata",
    "parse_document_and_metadata_typed",
    "configure_logging",
    "DEFAULT_HTML5_OPTIONS",
    "DEFAULT_MARKDOWN_OPTIONS",
    "PLAIN_TEXT_OPTIONS",
    "PandocReader",
    "PandocWriter",
    "ReaderOptions",
    "WriterOptions",
]
