"""Decode structured values into caller-defined types."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from docmeta.errors import DecodeError

T = TypeVar("T")


@lru_cache(maxsize=128)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def decode(target: type[T], value: Any) -> T:
    """Validate ``value`` against ``target`` (a model, dataclass, TypedDict...).

    Raises ``DecodeError`` listing every failing field.
    """
    try:
        return _adapter(target).validate_python(value)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in errors
        )
        raise DecodeError(
            f"value does not match {getattr(target, '__name__', repr(target))}: {details}",
            errors=errors,
        ) from exc
