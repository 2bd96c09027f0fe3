"""Content conversion for pagepull (HTML to Markdown)."""

from .cleanup import clean_markdown
from .filters import ALWAYS_EXCLUDED_TAGS, BOILERPLATE_TAGS, exclusion_set, parse_html, prune
from .protocols import HtmlConverter
from .rules import RuleMarkdownConverter, RulesStrategy
from .strategies import create_converter, html_to_markdown
from .transcoders import definition_list_to_markdown, table_to_markdown
from .translators import (
    DirectiveMarkdownConverter,
    TagDirective,
    TranslatorStrategy,
    build_translators,
)

__all__ = [
    # Protocols
    "HtmlConverter",
    # Strategies
    "RulesStrategy",
    "TranslatorStrategy",
    "create_converter",
    "html_to_markdown",
    # Building blocks
    "ALWAYS_EXCLUDED_TAGS",
    "BOILERPLATE_TAGS",
    "DirectiveMarkdownConverter",
    "RuleMarkdownConverter",
    "TagDirective",
    "build_translators",
    "clean_markdown",
    "definition_list_to_markdown",
    "exclusion_set",
    "parse_html",
    "prune",
    "table_to_markdown",
]
