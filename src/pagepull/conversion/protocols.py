"""Protocol definitions for content conversion."""

from typing import Protocol


class HtmlConverter(Protocol):
    """
    Protocol for converting a rendered HTML document to Markdown.

    Implementations must be stateless across calls: each call parses its
    own document tree and discards it when the Markdown string is built.
    """

    def convert(self, html: str, main_only: bool = False) -> str:
        """
        Convert HTML to Markdown.

        Args:
            html: Complete HTML document (or fragment) as a string
            main_only: Drop header, footer and nav regions before converting

        Returns:
            Markdown string ("" for empty or fully filtered input)
        """
        ...
