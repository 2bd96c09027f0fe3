"""Rule-based conversion: removal rules plus table and definition-list overrides."""

from __future__ import annotations

import logging

from bs4 import Tag
from markdownify import MarkdownConverter

from ..models.config import Strategy
from .cleanup import clean_markdown
from .filters import exclusion_set, parse_html, prune
from .transcoders import definition_list_to_markdown, table_to_markdown

logger = logging.getLogger(__name__)


class RuleMarkdownConverter(MarkdownConverter):
    """markdownify converter with custom rules for tables and definition lists."""

    def __init__(self, escape_table_pipes: bool = False, **options):
        super().__init__(**options)
        self._escape_table_pipes = escape_table_pipes

    def convert_table(self, el: Tag, text: str, parent_tags: set[str]) -> str:
        return table_to_markdown(el, escape_pipes=self._escape_table_pipes)

    def convert_dl(self, el: Tag, text: str, parent_tags: set[str]) -> str:
        return definition_list_to_markdown(el)


class RulesStrategy:
    """
    Converts HTML to Markdown by registering explicit rules on markdownify.

    Excluded tags are pruned from the tree first; tables and definition
    lists are rendered by the dedicated transcoders; everything else uses
    markdownify's defaults.

    Example:
        strategy = RulesStrategy()
        markdown = strategy.convert(html_string, main_only=True)
    """

    name = Strategy.RULES

    def __init__(self, heading_style: str = "atx", escape_table_pipes: bool = False):
        """
        Initialize the strategy.

        Args:
            heading_style: markdownify heading style ('atx', 'atx_closed', 'underlined')
            escape_table_pipes: Escape '|' in table cell text
        """
        self._converter = RuleMarkdownConverter(
            escape_table_pipes=escape_table_pipes,
            heading_style=heading_style,
        )

    def convert(self, html: str, main_only: bool = False) -> str:
        """
        Convert HTML to Markdown.

        Args:
            html: HTML document or fragment
            main_only: Drop header, footer and nav before converting

        Returns:
            Markdown string
        """
        soup = parse_html(html)
        prune(soup, exclusion_set(main_only))
        markdown = clean_markdown(self._converter.convert_soup(soup))
        logger.debug(f"{self.name.value} strategy produced {len(markdown)} chars (main_only={main_only})")
        return markdown
