"""Render document trees to text with Pandoc."""

from __future__ import annotations

import json
from functools import lru_cache

import pypandoc
import structlog

from docmeta.document.base import Document
from docmeta.errors import RenderError

from .ast import document_to_json
from .options import DEFAULT_HTML5_OPTIONS, WriterOptions

logger = structlog.get_logger(__name__)


class PandocWriter:
    """Render a ``Document`` through ``pandoc -f json``."""

    def __init__(self, options: WriterOptions = DEFAULT_HTML5_OPTIONS) -> None:
        self.options = options

    def write(self, document: Document) -> str:
        api_version = document.api_version or pandoc_api_version()
        payload = document_to_json(document, api_version)
        logger.debug("pandoc_write", format=self.options.format, blocks=len(document.blocks))
        try:
            output = pypandoc.convert_text(
                payload,
                self.options.format,
                format="json",
                extra_args=self.options.pandoc_args(),
            )
        except (RuntimeError, OSError) as exc:
            raise RenderError(str(exc)) from exc
        # The pandoc CLI terminates its output with a single newline.
        if output.endswith("\r\n"):
            return output[:-2]
        if output.endswith("\n"):
            return output[:-1]
        return output


@lru_cache(maxsize=None)
def pandoc_api_version() -> tuple[int, ...]:
    """The ``pandoc-api-version`` of the installed Pandoc binary."""
    try:
        output = pypandoc.convert_text("", "json", format="markdown")
    except (RuntimeError, OSError) as exc:
        raise RenderError(f"could not query pandoc: {exc}") from exc
    return tuple(json.loads(output)["pandoc-api-version"])
