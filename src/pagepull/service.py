"""Fetch, render and convert web content."""

from __future__ import annotations

import logging
from typing import Optional, Union

from .conversion import HtmlConverter, create_converter
from .errors import InputMissingError
from .http import AsyncHttpClient, HttpClient
from .models.config import PagepullConfig, Strategy
from .rendering import BrowserRenderer, PageRenderer

logger = logging.getLogger(__name__)


def require_url(url: Optional[str]) -> str:
    """
    Validate a URL argument.

    Raises:
        InputMissingError: If the URL is missing or blank
    """
    if url is None or not str(url).strip():
        raise InputMissingError("url is required")
    return str(url).strip()


async def _fetch_text(client: HttpClient, url: str) -> str:
    response = await client.get(url)
    return client.decode_content(response)


class ContentService:
    """
    The operations behind the tool surface.

    Raw text comes straight from HTTP; everything else goes through the
    browser renderer, and Markdown is produced from the rendered HTML by
    the configured conversion strategy. Failures propagate as exceptions;
    no partial result is ever returned.

    Example:
        service = ContentService(PagepullConfig())
        markdown = await service.get_markdown("https://example.com", main_only=True)
    """

    def __init__(
        self,
        config: Optional[PagepullConfig] = None,
        renderer: Optional[PageRenderer] = None,
        http_client: Optional[HttpClient] = None,
    ):
        """
        Initialize the service.

        Args:
            config: Pagepull configuration (defaults if None)
            renderer: Page renderer (a BrowserRenderer built from config if None)
            http_client: Client for raw text, owned by the caller (a fresh
                AsyncHttpClient per request if None)
        """
        self._config = config or PagepullConfig()
        browser = self._config.browser
        self._renderer = renderer or BrowserRenderer(
            headless=browser.headless,
            timeout=browser.timeout,
            wait_until=browser.wait_until,
            launch_args=browser.launch_args,
            user_agent=self._config.network.user_agent,
        )
        self._http_client = http_client
        self._converters: dict[Strategy, HtmlConverter] = {
            strategy: create_converter(strategy, self._config.conversion) for strategy in Strategy
        }

    @property
    def config(self) -> PagepullConfig:
        return self._config

    def _new_http_client(self) -> AsyncHttpClient:
        network = self._config.network
        return AsyncHttpClient(
            max_retries=network.max_retries,
            max_content_size=network.max_content_size,
            user_agent=network.user_agent,
            proxy=network.proxy,
            default_timeout=network.timeout,
        )

    def default_strategy(self, main_only: bool) -> Strategy:
        """Strategy used when a caller does not choose one."""
        conversion = self._config.conversion
        return conversion.summary_strategy if main_only else conversion.markdown_strategy

    async def get_raw_text(self, url: Optional[str]) -> str:
        """Fetch a URL over HTTP and return its decoded body without rendering."""
        url = require_url(url)
        if self._http_client is not None:
            text = await _fetch_text(self._http_client, url)
        else:
            async with self._new_http_client() as client:
                text = await _fetch_text(client, url)
        logger.info(f"Fetched raw text from {url} ({len(text)} chars)")
        return text

    async def get_rendered_html(self, url: Optional[str]) -> str:
        """Render a URL in the headless browser and return the resulting HTML."""
        url = require_url(url)
        html = await self._renderer.render(url)
        logger.info(f"Rendered {url} ({len(html)} chars)")
        return html

    def convert_html(
        self,
        html: str,
        main_only: bool = False,
        strategy: Union[Strategy, str, None] = None,
    ) -> str:
        """Convert already-rendered HTML with the chosen (or default) strategy."""
        chosen = Strategy(strategy) if strategy is not None else self.default_strategy(main_only)
        return self._converters[chosen].convert(html, main_only=main_only)

    async def get_markdown(
        self,
        url: Optional[str],
        main_only: bool = False,
        strategy: Union[Strategy, str, None] = None,
    ) -> str:
        """
        Render a URL and convert it to Markdown.

        Args:
            url: Page to convert
            main_only: Drop header, footer and nav regions
            strategy: Conversion strategy (per-tool default from config if None)

        Returns:
            Markdown string

        Raises:
            InputMissingError: If url is missing
            RenderError: If the page could not be rendered
        """
        html = await self.get_rendered_html(url)
        markdown = self.convert_html(html, main_only=main_only, strategy=strategy)
        logger.info(f"Converted {url} to {len(markdown)} chars of Markdown (main_only={main_only})")
        return markdown
