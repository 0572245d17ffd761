"""Read source text into a document tree with Pandoc."""

from __future__ import annotations

import pypandoc
import structlog

from docmeta.document.base import Document, to_meta_value
from docmeta.document.frontmatter import load_front_matter, split_front_matter
from docmeta.errors import ParseError

from .ast import document_from_json
from .options import DEFAULT_MARKDOWN_OPTIONS, ReaderOptions

logger = structlog.get_logger(__name__)


class PandocReader:
    """Parse text through ``pandoc -t json`` into a ``Document``."""

    def __init__(self, options: ReaderOptions = DEFAULT_MARKDOWN_OPTIONS) -> None:
        self.options = options

    def read(self, text: str) -> Document:
        if self.options.has_extension("yaml_metadata_block"):
            document = self._read_non_mapping_front_matter(text)
            if document is not None:
                return document
        return self._read(text)

    def _read(self, text: str) -> Document:
        input_format = self.options.format_spec()
        logger.debug("pandoc_read", format=input_format, length=len(text))
        try:
            output = pypandoc.convert_text(
                text,
                "json",
                format=input_format,
                extra_args=list(self.options.extra_args),
            )
        except (RuntimeError, OSError) as exc:
            raise ParseError(str(exc)) from exc
        return document_from_json(output)

    def _read_non_mapping_front_matter(self, text: str) -> Document | None:
        """Keep a list or scalar front matter block as the metadata root.

        Pandoc only accepts a mapping there and would otherwise read the
        block as body text, losing it as metadata.
        """
        raw, body = split_front_matter(text)
        if raw is None:
            return None

        value = load_front_matter(raw)
        if value is None or isinstance(value, dict):
            return None

        logger.warning("front_matter_not_mapping", type=type(value).__name__)
        document = self._read(body)
        document.meta = to_meta_value(value)
        return document
