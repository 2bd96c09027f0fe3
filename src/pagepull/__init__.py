"""
pagepull - Fetch web pages and convert rendered HTML to structured Markdown.

Usage:
    from pagepull import Strategy, html_to_markdown

    markdown = html_to_markdown(html, main_only=True, strategy=Strategy.TRANSLATORS)

    service = ContentService()
    markdown = await service.get_markdown("https://docs.example.com", main_only=True)
"""

__version__ = "0.1.0"

from .conversion import (
    HtmlConverter,
    RulesStrategy,
    TranslatorStrategy,
    create_converter,
    html_to_markdown,
)
from .errors import (
    FetchError,
    InputMissingError,
    PagepullError,
    RenderError,
    UnknownToolError,
)
from .models.config import (
    BrowserConfig,
    ConversionConfig,
    NetworkConfig,
    PagepullConfig,
    Strategy,
)
from .service import ContentService

__all__ = [
    "__version__",
    # Conversion
    "HtmlConverter",
    "RulesStrategy",
    "TranslatorStrategy",
    "create_converter",
    "html_to_markdown",
    # Service
    "ContentService",
    # Config
    "BrowserConfig",
    "ConversionConfig",
    "NetworkConfig",
    "PagepullConfig",
    "Strategy",
    # Errors
    "FetchError",
    "InputMissingError",
    "PagepullError",
    "RenderError",
    "UnknownToolError",
]
