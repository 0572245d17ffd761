"""Core document tree shared by readers, writers and the flattener."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, Union


@dataclass(slots=True)
class MetaMap:
    entries: dict[str, MetaValue] = field(default_factory=dict)


@dataclass(slots=True)
class MetaList:
    items: list[MetaValue] = field(default_factory=list)


@dataclass(slots=True)
class MetaBool:
    value: bool


@dataclass(slots=True)
class MetaString:
    value: str


@dataclass(slots=True)
class MetaInlines:
    """Inline rich text (a single line of emphasis, links, code spans...)."""

    inlines: list[Any] = field(default_factory=list)


@dataclass(slots=True)
class MetaBlocks:
    """Block rich text (whole paragraphs, lists...)."""

    blocks: list[Any] = field(default_factory=list)


MetaValue = Union[MetaMap, MetaList, MetaBool, MetaString, MetaInlines, MetaBlocks]

Meta = dict[str, MetaValue]


@dataclass(slots=True)
class Document:
    """A parsed source document.

    ``meta`` is normally a key -> value mapping. Readers whose front matter
    may legitimately be something else keep that value here as a single
    ``MetaValue`` so the loader can reject it instead of losing it.
    """

    meta: Meta | MetaValue = field(default_factory=dict)
    blocks: list[Any] = field(default_factory=list)
    api_version: list[int] | None = None


class Reader(Protocol):
    def read(self, text: str) -> Document:  # pragma: no cover - structural protocol
        """Read raw source text into a document tree."""


class Writer(Protocol):
    def write(self, document: Document) -> str:  # pragma: no cover - structural protocol
        """Render a document tree to text."""


def to_meta_value(value: Any) -> MetaValue:
    """Convert a plain Python value (as loaded from YAML or JSON) into a ``MetaValue``.

    Strings stay plain ``MetaString`` leaves; numbers, dates and other
    scalars are stringified. ``None`` becomes an empty string.
    """
    if isinstance(value, Mapping):
        return MetaMap({str(key): to_meta_value(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return MetaList([to_meta_value(item) for item in value])
    if isinstance(value, bool):
        return MetaBool(value)
    if value is None:
        return MetaString("")
    return MetaString(str(value))


def to_meta(value: Mapping[str, Any]) -> Meta:
    """Convert a plain mapping into a metadata mapping."""
    return {str(key): to_meta_value(item) for key, item in value.items()}
