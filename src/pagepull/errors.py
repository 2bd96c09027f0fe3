"""Exception types raised by pagepull."""


class PagepullError(Exception):
    """Base class for pagepull failures surfaced to callers."""


class InputMissingError(PagepullError, ValueError):
    """A required tool argument (the URL) was not supplied."""


class UnknownToolError(PagepullError, ValueError):
    """A tool name that the server does not expose was requested."""


class FetchError(PagepullError):
    """Raw content could not be retrieved over HTTP."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class RenderError(PagepullError):
    """The headless browser could not load or render a page."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to render {url}: {reason}")
