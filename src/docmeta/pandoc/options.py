"""Reader and writer configuration for the Pandoc backend."""

from __future__ import annotations

from dataclasses import dataclass

# Extensions Pandoc enables for GitHub-flavoured Markdown.
GITHUB_MARKDOWN_EXTENSIONS: tuple[str, ...] = (
    "pipe_tables",
    "raw_html",
    "fenced_code_blocks",
    "backtick_code_blocks",
    "gfm_auto_identifiers",
    "autolink_bare_uris",
    "space_in_atx_header",
    "intraword_underscores",
    "strikeout",
    "task_lists",
    "emoji",
    "footnotes",
    "shortcut_reference_links",
    "angle_brackets_escapable",
    "lists_without_preceding_blankline",
)

# Extensions docmeta relies on that Pandoc turns on by default for a base
# input format (``pandoc --list-extensions=<format>``).
DEFAULT_EXTENSIONS: dict[str, frozenset[str]] = {
    "markdown": frozenset({"yaml_metadata_block"}),
    "markdown_mmd": frozenset({"yaml_metadata_block"}),
    "markdown_github": frozenset({"yaml_metadata_block"}),
    "gfm": frozenset({"yaml_metadata_block"}),
    "commonmark_x": frozenset({"yaml_metadata_block"}),
}


@dataclass(frozen=True, slots=True)
class ReaderOptions:
    format: str = "markdown"
    extensions: tuple[str, ...] = ()
    disabled_extensions: tuple[str, ...] = ()
    extra_args: tuple[str, ...] = ()

    def format_spec(self) -> str:
        """Pandoc input format string, e.g. ``markdown_strict+footnotes-smart``."""
        enabled = "".join(f"+{ext}" for ext in dict.fromkeys(self.extensions))
        disabled = "".join(f"-{ext}" for ext in dict.fromkeys(self.disabled_extensions))
        return f"{self.format}{enabled}{disabled}"

    def has_extension(self, name: str) -> bool:
        """Whether ``name`` is active: listed, or on by default for the base format."""
        if name in self.disabled_extensions:
            return False
        return name in self.extensions or name in DEFAULT_EXTENSIONS.get(self.format, frozenset())


@dataclass(frozen=True, slots=True)
class WriterOptions:
    format: str = "html5"
    highlight_style: str | None = None
    extra_args: tuple[str, ...] = ()

    def pandoc_args(self) -> list[str]:
        args: list[str] = []
        if self.highlight_style:
            args.append(f"--highlight-style={self.highlight_style}")
        args.extend(self.extra_args)
        return args


# Markdown with a YAML metadata block, attributes on fenced code, heading ids
# and the GitHub extension bundle. Starts from the strict dialect so only the
# listed extensions are active.
DEFAULT_MARKDOWN_OPTIONS = ReaderOptions(
    format="markdown_strict",
    extensions=(
        "yaml_metadata_block",
        "fenced_code_attributes",
        "auto_identifiers",
        *GITHUB_MARKDOWN_EXTENSIONS,
    ),
)

DEFAULT_HTML5_OPTIONS = WriterOptions(format="html5", highlight_style="tango")

PLAIN_TEXT_OPTIONS = WriterOptions(format="plain")
