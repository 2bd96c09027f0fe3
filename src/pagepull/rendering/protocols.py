"""Protocol definitions for page rendering."""

from typing import Protocol


class PageRenderer(Protocol):
    """
    Protocol for turning a URL into fully rendered HTML.

    Implementations either return the complete document or raise
    RenderError; partial documents are never returned.
    """

    async def render(self, url: str) -> str:
        """
        Render a page and capture its HTML.

        Args:
            url: Page to load

        Returns:
            Serialized DOM after scripts have run
        """
        ...
