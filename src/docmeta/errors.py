"""Failure types shared by every conversion stage."""

from __future__ import annotations

from typing import Any


class ConversionError(Exception):
    """Base class for a failed conversion.

    Attributes:
        stage: Pipeline stage that failed (``parse``, ``render``, ``merge``, ``decode``)
        message: Underlying diagnostic, usually the backend's own text
        source: Label of the document being converted (e.g. its path), if known
    """

    stage = "conversion"

    def __init__(self, message: str, *, source: str | None = None) -> None:
        self.message = message
        self.source = source
        super().__init__(message)

    def __str__(self) -> str:
        where = f" for {self.source}" if self.source else ""
        return f"{self.stage} failed{where}: {self.message}"


class ParseError(ConversionError):
    """Raised when raw text cannot be read into a document tree."""

    stage = "parse"


class RenderError(ConversionError):
    """Raised when a writer fails on the body or on a metadata leaf."""

    stage = "render"


class MergeError(ConversionError):
    """Raised when flattened metadata is not an object."""

    stage = "merge"


class DecodeError(ConversionError):
    """
    Raised when a structured value does not fit the requested type.

    Attributes:
        errors: Field-level diagnostics, one dict per failing field
    """

    stage = "decode"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        source: str | None = None,
    ) -> None:
        self.errors = errors or []
        super().__init__(message, source=source)
