"""Strategy selection for HTML to Markdown conversion."""

from __future__ import annotations

from typing import Optional, Union

from ..models.config import ConversionConfig, Strategy
from .protocols import HtmlConverter
from .rules import RulesStrategy
from .translators import TranslatorStrategy


def create_converter(
    strategy: Union[Strategy, str] = Strategy.RULES,
    config: Optional[ConversionConfig] = None,
) -> HtmlConverter:
    """
    Create the converter for a strategy.

    Args:
        strategy: Strategy enum member or its value ('rules', 'translators')
        config: Conversion options (defaults if None)

    Returns:
        An object implementing HtmlConverter

    Raises:
        ValueError: If the strategy name is unknown
    """
    config = config or ConversionConfig()
    strategy = Strategy(strategy)

    if strategy is Strategy.TRANSLATORS:
        return TranslatorStrategy(heading_style=config.heading_style)
    return RulesStrategy(
        heading_style=config.heading_style,
        escape_table_pipes=config.escape_table_pipes,
    )


def html_to_markdown(
    html: str,
    main_only: bool = False,
    strategy: Union[Strategy, str] = Strategy.RULES,
) -> str:
    """
    Convert an HTML string to Markdown in one call.

    Example:
        markdown = html_to_markdown("<dl><dt>Term</dt><dd>Def</dd></dl>")
    """
    return create_converter(strategy).convert(html, main_only=main_only)
