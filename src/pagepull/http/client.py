"""Async HTTP client with retry logic."""

from __future__ import annotations

import asyncio
import logging
import random
from types import TracebackType

import aiohttp
from charset_normalizer import from_bytes as detect_encoding

from ..errors import FetchError
from .protocols import HttpResponse

logger = logging.getLogger(__name__)


class AsyncHttpClient:
    """
    Async HTTP client used for raw text retrieval.

    Features:
    - Exponential backoff retry for transient failures
    - Content size limits to prevent memory exhaustion
    - Encoding detection for decoding response bodies

    Example:
        async with AsyncHttpClient() as client:
            response = await client.get("https://example.com/data.json")
            print(client.decode_content(response))
    """

    # Status codes that warrant a retry
    RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})

    # Exceptions that warrant a retry
    RETRYABLE_EXCEPTIONS = (
        aiohttp.ClientError,
        asyncio.TimeoutError,
        ConnectionError,
    )

    def __init__(
        self,
        max_retries: int = 3,
        retry_base_delay: float = 1.0,
        max_content_size: int = 50 * 1024 * 1024,
        user_agent: str | None = None,
        proxy: str | None = None,
        default_timeout: float = 30.0,
    ) -> None:
        """
        Initialize the HTTP client.

        Args:
            max_retries: Maximum retry attempts for failed requests
            retry_base_delay: Base delay for exponential backoff (seconds)
            max_content_size: Maximum response size in bytes
            user_agent: Custom User-Agent string
            proxy: Proxy URL (http:// or socks5://)
            default_timeout: Default request timeout in seconds
        """
        self._max_retries = max_retries
        self._retry_base_delay = retry_base_delay
        self._max_content_size = max_content_size
        self._proxy = proxy
        self._default_timeout = default_timeout

        if user_agent is None:
            user_agent = "Mozilla/5.0 (compatible; pagepull/0.1)"
        self._user_agent = user_agent

        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> AsyncHttpClient:
        """Enter async context and create session."""
        self._session = aiohttp.ClientSession(headers={"User-Agent": self._user_agent})
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context and close session."""
        if self._session:
            await self._session.close()
            self._session = None

    def _calculate_retry_delay(self, attempt: int) -> float:
        """
        Calculate delay for exponential backoff with jitter.

        Args:
            attempt: Current attempt number (0-indexed)

        Returns:
            Delay in seconds
        """
        delay: float = self._retry_base_delay * (2**attempt)
        jitter: float = random.uniform(0, 1)
        return delay + jitter

    async def _read_limited(self, response: aiohttp.ClientResponse, url: str) -> bytes:
        content_length = response.headers.get("Content-Length")
        if content_length and content_length.isdigit() and int(content_length) > self._max_content_size:
            raise FetchError(url, f"content too large: {content_length} bytes")

        content = b""
        async for chunk in response.content.iter_chunked(8192):
            content += chunk
            if len(content) > self._max_content_size:
                raise FetchError(url, f"content size limit exceeded: >{self._max_content_size} bytes")
        return content

    async def get(
        self,
        url: str,
        *,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        """
        Perform an HTTP GET request with retry logic.

        Args:
            url: The URL to fetch
            timeout: Request timeout in seconds (uses default if None)
            headers: Optional additional headers

        Returns:
            HttpResponse with status, content, and headers

        Raises:
            FetchError: On error statuses, network errors after retries
                exhausted, or content size exceeded
        """
        if self._session is None:
            raise RuntimeError("Client not initialized. Use 'async with' context manager.")

        timeout_val = timeout or self._default_timeout

        for attempt in range(self._max_retries + 1):
            try:
                async with self._session.get(
                    url,
                    timeout=aiohttp.ClientTimeout(total=timeout_val),
                    headers=headers,
                    proxy=self._proxy,
                    allow_redirects=True,
                ) as response:
                    if response.status in self.RETRYABLE_STATUS_CODES and attempt < self._max_retries:
                        delay = self._calculate_retry_delay(attempt)
                        logger.warning(
                            f"Got {response.status} for {url}, retrying in {delay:.1f}s "
                            f"(attempt {attempt + 1}/{self._max_retries + 1})"
                        )
                        await asyncio.sleep(delay)
                        continue

                    if response.status >= 400:
                        raise FetchError(url, f"HTTP {response.status} {response.reason or ''}".strip())

                    content = await self._read_limited(response, url)
                    logger.debug(f"Fetched {url}: {len(content)} bytes")

                    return HttpResponse(
                        status_code=response.status,
                        content=content,
                        content_type=response.headers.get("Content-Type", ""),
                        headers=dict(response.headers),
                        url=str(response.url),
                    )

            except self.RETRYABLE_EXCEPTIONS as e:
                if attempt < self._max_retries:
                    delay = self._calculate_retry_delay(attempt)
                    logger.warning(
                        f"Error fetching {url}: {e}, retrying in {delay:.1f}s "
                        f"(attempt {attempt + 1}/{self._max_retries + 1})"
                    )
                    await asyncio.sleep(delay)
                    continue
                logger.error(f"HTTP fetch error for {url} after {self._max_retries + 1} attempts: {e}")
                raise FetchError(url, str(e) or type(e).__name__) from e

        # Only reachable when max_retries is negative
        raise FetchError(url, "no attempts made")

    def _decode_content(self, content: bytes, content_type: str) -> str:
        """
        Decode content with encoding detection.

        Fallback chain:
        1. Content-Type header charset
        2. charset-normalizer detection
        3. UTF-8 with replacement
        """
        encoding = None
        if content_type:
            for part in content_type.split(";"):
                part = part.strip()
                if part.lower().startswith("charset="):
                    encoding = part.split("=", 1)[1].strip().strip("\"'")
                    break

        if encoding:
            try:
                return content.decode(encoding)
            except (UnicodeDecodeError, LookupError):
                logger.debug(f"Failed to decode with declared encoding: {encoding}")

        best_match = detect_encoding(content).best()
        if best_match is not None:
            logger.debug(f"Detected encoding: {best_match.encoding}")
            return str(best_match)

        return content.decode("utf-8", errors="replace")

    def decode_content(self, response: HttpResponse) -> str:
        """
        Decode response content to string.

        Args:
            response: HttpResponse to decode

        Returns:
            Decoded string content
        """
        return self._decode_content(response.content, response.content_type)
