"""MCP tool server exposing pagepull over stdio."""

from __future__ import annotations

import logging
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from . import __version__
from .errors import UnknownToolError
from .models.config import PagepullConfig
from .service import ContentService, require_url

logger = logging.getLogger(__name__)

SERVER_NAME = "pagepull"


def _url_schema(description: str) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "url": {
                "type": "string",
                "description": description,
            }
        },
        "required": ["url"],
    }


TOOLS = [
    Tool(
        name="get_raw_text",
        description=(
            "Retrieves raw text content directly from a URL without browser rendering. "
            "Ideal for structured data formats like JSON, XML, CSV, TSV, or plain text files."
        ),
        inputSchema=_url_schema(
            "URL of the target resource containing raw text content (JSON, XML, CSV, TSV, plain text, etc.)."
        ),
    ),
    Tool(
        name="get_rendered_html",
        description=(
            "Fetches fully rendered HTML content using a headless browser, including "
            "JavaScript-generated content. Use for single-page applications or any page "
            "that needs client-side rendering."
        ),
        inputSchema=_url_schema(
            "URL of the target web page that requires JavaScript execution or dynamic content rendering."
        ),
    ),
    Tool(
        name="get_markdown",
        description=(
            "Converts web page content to well-formatted Markdown, preserving structural "
            "elements like tables and definition lists. Recommended as the default tool "
            "for web content extraction."
        ),
        inputSchema=_url_schema("URL of the web page to convert to Markdown format."),
    ),
    Tool(
        name="get_markdown_summary",
        description=(
            "Extracts and converts the main content area of a web page to Markdown, "
            "removing navigation menus, headers and footers. Suited to articles, blog "
            "posts and documentation pages."
        ),
        inputSchema=_url_schema(
            "URL of the web page whose main content should be extracted and converted to Markdown."
        ),
    ),
]

TOOL_NAMES = frozenset(tool.name for tool in TOOLS)


async def dispatch(service: ContentService, name: str, arguments: Optional[dict[str, Any]]) -> str:
    """
    Run one named tool and return its text payload.

    Raises:
        UnknownToolError: If the tool name is not exposed
        InputMissingError: If the url argument is missing
        FetchError, RenderError: If retrieving the page failed
    """
    if name not in TOOL_NAMES:
        raise UnknownToolError(f"Unknown tool: {name}")

    url = require_url((arguments or {}).get("url"))
    logger.debug(f"Tool call {name} for {url}")

    if name == "get_raw_text":
        return await service.get_raw_text(url)
    if name == "get_rendered_html":
        return await service.get_rendered_html(url)
    if name == "get_markdown":
        return await service.get_markdown(url)
    return await service.get_markdown(url, main_only=True)


def create_server(service: ContentService) -> Server:
    """Build an MCP server whose tools are backed by a ContentService."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[Tool]:
        return list(TOOLS)

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        # Exceptions propagate so the SDK reports the call as failed
        text = await dispatch(service, name, arguments)
        return [TextContent(type="text", text=text)]

    return server


async def serve(config: Optional[PagepullConfig] = None) -> None:
    """Run the tool server on stdin/stdout until the client disconnects."""
    server = create_server(ContentService(config))

    logger.info(f"Starting {SERVER_NAME} MCP server v{__version__}")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
