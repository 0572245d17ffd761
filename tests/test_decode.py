from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import BaseModel
from typing_extensions import TypedDict

from docmeta.decode import decode
from docmeta.errors import DecodeError


class Author(BaseModel):
    name: str
    email: str | None = None


class Page(BaseModel):
    title: str
    draft: bool = False
    authors: list[Author] = []
    content: str


@dataclass
class Summary:
    title: str
    content: str


class Card(TypedDict):
    title: str


def test_decode_model_with_nested_values() -> None:
    value = {
        "title": "Hello",
        "draft": True,
        "authors": [{"name": "Alice"}, {"name": "Bob", "email": "bob@example.org"}],
        "content": "<p>Hi</p>",
    }

    page = decode(Page, value)

    assert page.title == "Hello"
    assert page.draft is True
    assert [a.name for a in page.authors] == ["Alice", "Bob"]
    assert page.authors[1].email == "bob@example.org"


def test_decode_dataclass_ignores_extra_fields() -> None:
    summary = decode(Summary, {"title": "T", "content": "C", "tags": ["x"]})

    assert summary == Summary(title="T", content="C")


def test_decode_typed_dict_and_generic_types() -> None:
    assert decode(Card, {"title": "x"}) == {"title": "x"}
    assert decode(dict[str, list[str]], {"tags": ["a"]}) == {"tags": ["a"]}


def test_missing_field_reports_field_path() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode(Page, {"title": "Hello"})

    err = excinfo.value
    assert err.stage == "decode"
    assert "content" in err.message
    assert "Page" in err.message
    assert [tuple(e["loc"]) for e in err.errors] == [("content",)]


def test_wrong_nested_type_reports_nested_path() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode(Page, {"title": "Hello", "content": "", "authors": [{"name": ["not", "a", "string"]}]})

    assert "authors.0.name" in excinfo.value.message


def test_non_object_root_reports_root() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode(Page, ["not", "an", "object"])

    assert excinfo.value.errors
