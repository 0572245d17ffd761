"""Pandoc rendering backend."""

from .options import (
    DEFAULT_HTML5_OPTIONS,
    DEFAULT_MARKDOWN_OPTIONS,
    GITHUB_MARKDOWN_EXTENSIONS,
    PLAIN_TEXT_OPTIONS,
    ReaderOptions,
    WriterOptions,
)
from .reader import PandocReader
from .writer import PandocWriter, pandoc_api_version

__all__ = [
    "DEFAULT_HTML5_OPTIONS",
    "DEFAULT_MARKDOWN_OPTIONS",
    "GITHUB_MARKDOWN_EXTENSIONS",
    "PLAIN_TEXT_OPTIONS",
    "ReaderOptions",
    "WriterOptions",
    "PandocReader",
    "PandocWriter",
    "pandoc_api_version",
]
