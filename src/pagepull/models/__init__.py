"""Pagepull configuration models."""

from .config import (
    BrowserConfig,
    ByteSize,
    ConversionConfig,
    NetworkConfig,
    PagepullConfig,
    Strategy,
)

__all__ = [
    "BrowserConfig",
    "ByteSize",
    "ConversionConfig",
    "NetworkConfig",
    "PagepullConfig",
    "Strategy",
]
