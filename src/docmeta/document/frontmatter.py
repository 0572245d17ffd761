"""Leading YAML front matter handling."""

from __future__ import annotations

import re
from typing import Any

import structlog
import yaml

from docmeta.errors import ParseError

logger = structlog.get_logger(__name__)

_FRONTMATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(?![ \t]*\r?\n)(?P<frontmatter>.*?)\r?\n(?:---|\.\.\.)[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)


def split_front_matter(text: str) -> tuple[str | None, str]:
    """Split a leading ``---`` YAML block from the body.

    Returns ``(None, text)`` when the text has no front matter. As with
    Pandoc, the opening fence must not be followed by a blank line (that is
    a horizontal rule) and the closing fence may be ``---`` or ``...``.
    """
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return None, text
    return match.group("frontmatter"), text[match.end():]


def load_front_matter(raw: str, *, source: str | None = None) -> Any:
    """Parse a front matter block as YAML."""
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        logger.warning("front_matter_invalid", error=str(exc), source=source)
        raise ParseError(f"invalid YAML front matter: {exc}", source=source) from exc
