"""
Table rendering for Proglist.

Turns the ordered list of annotated programs into plain text, tab-separated
values, or a Markdown table laid out for a fixed terminal
width.
"""

import enum
import textwrap
from typing import List, Sequence

from proglist_py.enricher import ProgramEntry

DEFAULT_WIDTH = 80

# Room for the "**" emphasis markers on both sides of a name.
MARKDOWN_EMPHASIS = 4

MIN_DESCRIPTION_WIDTH = 20


class OutputFormat(str, enum.Enum):
    """Supported output modes."""

    TEXT = "text"
    TSV = "tsv"
    MARKDOWN = "markdown"


def name_column_width(
    entries: Sequence[ProgramEntry], fmt: OutputFormat = OutputFormat.TEXT
) -> int:
    """Width of the name column: longest name plus one space of padding."""
    longest = max((len(entry.name) for entry in entries), default=0)
    width = longest + 1
    if fmt is OutputFormat.MARKDOWN:
        width += MARKDOWN_EMPHASIS
    return width


def description_column_width(name_width: int, width: int = DEFAULT_WIDTH) -> int:
    """Width left for descriptions, never below ``MIN_DESCRIPTION_WIDTH``."""
    return max(width - name_width, MIN_DESCRIPTION_WIDTH)


def wrap_description(text: str, name_width: int, desc_width: int) -> List[str]:
    """
    Word-wrap *text* into the description column.

    Each line is indented by *name_width* spaces so it starts one column past
    the name column.
    """
    indent = " " * name_width
    return [indent + line for line in textwrap.wrap(text, width=desc_width)]


def _row(label: str, package: str, name_width: int) -> str:
    return f"{label:<{name_width}}Package:{package}"


def render_text(
    entries: Sequence[ProgramEntry], width: int = DEFAULT_WIDTH
) -> List[str]:
    name_width = name_column_width(entries, OutputFormat.TEXT)
    desc_width = description_column_width(name_width, width)
    lines: List[str] = []
    for entry in entries:
        lines.append(_row(entry.name, entry.package, name_width))
        lines.extend(wrap_description(entry.description, name_width, desc_width))
    return lines


def _tsv_field(value: str) -> str:
    return " ".join(value.replace("\t", " ").splitlines())


def render_tsv(entries: Sequence[ProgramEntry]) -> List[str]:
    """One ``name<TAB>package<TAB>description`` line per entry, no header."""
    return [
        "\t".join(
            _tsv_field(field)
            for field in (entry.name, entry.package, entry.description)
        )
        for entry in entries
    ]


def render_markdown(
    entries: Sequence[ProgramEntry], title: str, width: int = DEFAULT_WIDTH
) -> List[str]:
    """
    Render a Markdown table under a setext title.

    The header divider has one dash run per column, each as wide as its
    column and separated by a single space. Name rows and their wrapped
    descriptions follow directly and a full-width dash line closes the table.
    """
    name_width = name_column_width(entries, OutputFormat.MARKDOWN)
    desc_width = description_column_width(name_width, width)

    lines = [title, "=" * len(title), ""]
    lines.append("-" * name_width + " " + "-" * desc_width)
    for entry in entries:
        lines.append(_row(f"**{entry.name}**", entry.package, name_width))
        lines.extend(wrap_description(entry.description, name_width, desc_width))
    lines.append("-" * width)
    return lines


def render(
    entries: Sequence[ProgramEntry],
    fmt: OutputFormat = OutputFormat.TEXT,
    title: str = "",
    width: int = DEFAULT_WIDTH,
) -> List[str]:
    """Render *entries* in the requested format, one string per output line."""
    if fmt is OutputFormat.TSV:
        return render_tsv(entries)
    if fmt is OutputFormat.MARKDOWN:
        return render_markdown(entries, title, width)
    return render_text(entries, width)
