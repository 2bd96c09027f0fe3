"""Markdown transcoders for tables and definition lists.

Both transcoders read text straight from the element tree, so their output
does not depend on how the generic converter rendered the children.
"""

from __future__ import annotations

from functools import reduce

from bs4 import Tag

# (markdown so far, text of the most recent term)
DefinitionAccumulator = tuple[str, str]


def _cell_text(cell: Tag, escape_pipes: bool) -> str:
    text = cell.get_text().strip()
    if escape_pipes:
        text = text.replace("|", "\\|")
    return text


def _row_cells(row: Tag, escape_pipes: bool) -> list[str]:
    return [_cell_text(cell, escape_pipes) for cell in row.find_all(["th", "td"])]


def _format_row(cells: list[str]) -> str:
    return f"| {' | '.join(cells)} |"


def table_to_markdown(table: Tag, escape_pipes: bool = False) -> str:
    """
    Convert a table element into a pipe-delimited Markdown table.

    The first row is the header. The separator has one ``---`` group per
    header cell; later rows are emitted with whatever cells they carry,
    without padding or truncation.

    Args:
        table: A ``table`` element
        escape_pipes: Escape literal ``|`` characters inside cells

    Returns:
        Markdown fragment framed by newlines, or "" when the table has no rows
    """
    rows = table.find_all("tr")
    if not rows:
        return ""

    header = _row_cells(rows[0], escape_pipes)
    lines = [
        _format_row(header),
        "|" + "|".join("---" for _ in header) + "|",
    ]
    lines.extend(_format_row(_row_cells(row, escape_pipes)) for row in rows[1:])
    return "\n" + "\n".join(lines) + "\n"


def _append_definition_item(acc: DefinitionAccumulator, item: Tag) -> DefinitionAccumulator:
    markdown, term = acc
    text = item.get_text().strip()

    if item.name == "dt":
        if text:
            markdown += f"**{text}:**"
        return markdown, text

    if item.name == "dd" and text:
        return markdown + f" {text}\n", term

    return acc


def definition_list_to_markdown(dl: Tag) -> str:
    """
    Convert a definition list into bold-term lines.

    Only direct ``dt``/``dd`` children are read; anything else is skipped.
    Each non-empty pair renders as ``**Term:** Definition``. A term with no
    following definition is left as a bare ``**Term:**`` label.

    Args:
        dl: A ``dl`` element

    Returns:
        Markdown fragment framed by a leading blank line and a trailing newline
    """
    markdown, _ = reduce(_append_definition_item, dl.find_all(recursive=False), ("", ""))
    return "\n\n" + markdown + "\n"
