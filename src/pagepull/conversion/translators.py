"""Translator-table conversion: per-tag rendering directives on markdownify."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional

from bs4 import Tag
from markdownify import MarkdownConverter

from ..models.config import Strategy
from .cleanup import clean_markdown
from .filters import ALWAYS_EXCLUDED_TAGS, BOILERPLATE_TAGS, parse_html

logger = logging.getLogger(__name__)

# (element, rendered children) -> replacement content
Postprocess = Callable[[Tag, str], str]
ConvertFn = Callable[..., str]


@dataclass(frozen=True)
class TagDirective:
    """
    How a single tag kind is rendered.

    Attributes:
        prefix: Text placed before the content
        postfix: Text placed after the content
        surrounding_newlines: Wrap the result in blank lines (block element)
        preserve_whitespace: Keep leading/trailing whitespace of the content
        ignore: Emit nothing for the element or its descendants
        postprocess: Replace the rendered children before prefix/postfix apply
    """

    prefix: str = ""
    postfix: str = ""
    surrounding_newlines: bool = False
    preserve_whitespace: bool = False
    ignore: bool = False
    postprocess: Optional[Postprocess] = None

    def render(self, element: Tag, content: str) -> str:
        """Render an element from its already-converted children."""
        if self.ignore:
            return ""

        if not self.preserve_whitespace:
            content = content.strip()
        if self.postprocess is not None:
            content = self.postprocess(element, content)
        if not content:
            return ""

        rendered = f"{self.prefix}{content}{self.postfix}"
        if self.surrounding_newlines:
            rendered = f"\n\n{rendered}\n\n"
        return rendered


IGNORE = TagDirective(ignore=True)


def head_title(head: Tag, content: str) -> str:
    """Reduce a document head to the text of its title element."""
    title = head.find("title")
    if title is None:
        return ""
    return title.get_text().strip()


BASE_TRANSLATORS: dict[str, TagDirective] = {
    "dl": TagDirective(surrounding_newlines=True),
    "dt": TagDirective(prefix="**", postfix=":** "),
    "dd": TagDirective(postfix="\n"),
    "head": TagDirective(postfix="\n", surrounding_newlines=True, postprocess=head_title),
    **{tag: IGNORE for tag in ALWAYS_EXCLUDED_TAGS},
}


def build_translators(main_only: bool = False) -> dict[str, TagDirective]:
    """
    Build the translator table for one kind of request.

    Args:
        main_only: Mark header, footer and nav as ignored

    Returns:
        Mapping of tag name to directive
    """
    translators = dict(BASE_TRANSLATORS)
    if main_only:
        translators.update({tag: IGNORE for tag in BOILERPLATE_TAGS})
    return translators


def _column_span(cell: Tag) -> int:
    colspan = str(cell.get("colspan", ""))
    if colspan.isdigit():
        return max(1, min(1000, int(colspan)))
    return 1


class DirectiveMarkdownConverter(MarkdownConverter):
    """
    markdownify converter whose per-tag conversion comes from a translator table.

    Tags without a directive keep markdownify's default conversion, which
    includes its own table support.
    """

    def __init__(self, translators: Mapping[str, TagDirective], **options):
        super().__init__(**options)
        self._translators = dict(translators)

    def get_conv_fn(self, tag_name: str) -> Optional[ConvertFn]:
        directive = self._translators.get(tag_name.lower())
        if directive is None:
            return super().get_conv_fn(tag_name)
        return partial(self._apply_directive, directive)

    def convert_tr(self, el: Tag, text: str, parent_tags: set[str]) -> str:
        # The first row of the table is the header even when a caption or
        # colgroup precedes it
        table = el.find_parent("table")
        row = "|" + text + "\n"
        if table is None or table.find("tr") is not el:
            return row
        width = max(1, sum(_column_span(cell) for cell in el.find_all(["td", "th"])))
        return row + "| " + " | ".join(["---"] * width) + " |\n"

    def _apply_directive(
        self,
        directive: TagDirective,
        el: Tag,
        text: str,
        parent_tags: Optional[set[str]] = None,
    ) -> str:
        return directive.render(el, text)


class TranslatorStrategy:
    """
    Converts HTML to Markdown from a tag -> directive translator table.

    Definition lists, the document head and ignored regions are driven by
    TagDirective entries; tables use markdownify's built-in support with the
    first row inferred as the header.

    Example:
        strategy = TranslatorStrategy()
        markdown = strategy.convert(html_string)
    """

    name = Strategy.TRANSLATORS

    def __init__(self, heading_style: str = "atx"):
        """
        Initialize the strategy.

        Args:
            heading_style: markdownify heading style ('atx', 'atx_closed', 'underlined')
        """
        options = {"heading_style": heading_style, "table_infer_header": True}
        self._converters = {
            main_only: DirectiveMarkdownConverter(build_translators(main_only), **options)
            for main_only in (False, True)
        }

    def convert(self, html: str, main_only: bool = False) -> str:
        """
        Convert HTML to Markdown.

        Args:
            html: HTML document or fragment
            main_only: Ignore header, footer and nav regions

        Returns:
            Markdown string
        """
        soup = parse_html(html)
        markdown = clean_markdown(self._converters[main_only].convert_soup(soup))
        logger.debug(f"{self.name.value} strategy produced {len(markdown)} chars (main_only={main_only})")
        return markdown
