"""Whitespace clean-up shared by the conversion strategies."""

import re


def clean_markdown(markdown: str) -> str:
    """
    Normalize converter output.

    Collapses runs of blank lines, strips trailing whitespace from each line
    and ends non-empty output with a single newline. Empty output stays "".
    """
    markdown = re.sub(r"\n{3,}", "\n\n", markdown)
    markdown = "\n".join(line.rstrip() for line in markdown.split("\n"))
    markdown = markdown.strip()
    return markdown + "\n" if markdown else ""
