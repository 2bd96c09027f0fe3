"""Headless-browser rendering with Playwright."""

from __future__ import annotations

import logging

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from ..errors import RenderError

logger = logging.getLogger(__name__)


class BrowserRenderer:
    """
    Render pages in a short-lived headless Chromium.

    Each call launches its own browser, loads the page, captures the DOM
    and closes the browser again, whether or not rendering succeeded.

    Example:
        renderer = BrowserRenderer(timeout=20.0)
        html = await renderer.render("https://example.com")
    """

    def __init__(
        self,
        headless: bool = True,
        timeout: float = 20.0,
        wait_until: str = "load",
        launch_args: list[str] | None = None,
        user_agent: str | None = None,
    ) -> None:
        """
        Initialize the renderer.

        Args:
            headless: Run browser in headless mode
            timeout: Navigation timeout (seconds)
            wait_until: Wait condition ('load', 'domcontentloaded', 'networkidle', 'commit')
            launch_args: Extra Chromium arguments
            user_agent: Custom user agent
        """
        self._headless = headless
        self._timeout = timeout
        self._wait_until = wait_until
        self._launch_args = list(launch_args) if launch_args is not None else ["--single-process"]
        self._user_agent = user_agent

    async def render(self, url: str) -> str:
        """
        Load a page and return its rendered HTML.

        Args:
            url: URL to render

        Returns:
            HTML of the page after navigation completed

        Raises:
            RenderError: If the browser cannot start or navigation fails
        """
        async with async_playwright() as playwright:
            try:
                browser = await playwright.chromium.launch(
                    headless=self._headless,
                    args=self._launch_args,
                )
            except PlaywrightError as e:
                raise RenderError(url, f"browser launch failed: {e}") from e

            try:
                page = await browser.new_page(user_agent=self._user_agent)
                response = await page.goto(
                    url,
                    timeout=self._timeout * 1000,
                    wait_until=self._wait_until,  # type: ignore[arg-type]
                )
                if response is not None and response.status >= 400:
                    logger.warning(f"Rendered {url} with HTTP status {response.status}")

                html = await page.content()
                logger.debug(f"Rendered {url}: {len(html)} chars")
                return html

            except PlaywrightTimeoutError as e:
                raise RenderError(url, f"navigation timed out after {self._timeout:g}s") from e
            except PlaywrightError as e:
                raise RenderError(url, str(e)) from e
            finally:
                try:
                    await browser.close()
                except PlaywrightError as e:
                    logger.error(f"Error closing browser for {url}: {e}")
