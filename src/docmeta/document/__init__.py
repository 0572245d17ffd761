"""Document model package."""

from .base import (
    Document,
    Meta,
    MetaBlocks,
    MetaBool,
    MetaInlines,
    MetaList,
    MetaMap,
    MetaString,
    MetaValue,
    Reader,
    Writer,
    to_meta,
    to_meta_value,
)
from .frontmatter import load_front_matter, split_front_matter

__all__ = [
    "Document",
    "Meta",
    "MetaBlocks",
    "MetaBool",
    "MetaInlines",
    "MetaList",
    "MetaMap",
    "MetaString",
    "MetaValue",
    "Reader",
    "Writer",
    "to_meta",
    "to_meta_value",
    "load_front_matter",
    "split_front_matter",
]
