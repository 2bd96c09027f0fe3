"""Pydantic configuration models for pagepull."""

from enum import Enum
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


class Strategy(str, Enum):
    """HTML to Markdown conversion strategies."""

    RULES = "rules"
    TRANSLATORS = "translators"


class ByteSize(int):
    """
    Custom type that parses human-readable byte sizes.

    Accepts:
        - Integers (bytes)
        - Strings like '200kb', '1mb', '5gb'

    Examples:
        >>> ByteSize._parse('200kb')
        204800
        >>> ByteSize._parse(1024)
        1024
    """

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> Any:
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(cls._parse)

    @classmethod
    def _parse(cls, v: Any) -> int:
        if isinstance(v, int):
            return v
        if isinstance(v, str):
            v = v.lower().strip()
            # Order matters: check longer suffixes first
            units = [("gb", 1024**3), ("mb", 1024**2), ("kb", 1024), ("b", 1)]
            for unit, mult in units:
                if v.endswith(unit):
                    num_str = v[: -len(unit)].strip()
                    try:
                        return int(float(num_str) * mult)
                    except ValueError as err:
                        raise ValueError(f"Invalid number in byte size: {v}") from err
            try:
                return int(v)
            except ValueError:
                pass
        raise ValueError(f"Invalid byte size: {v}. Use format like '200kb', '1mb', or integer bytes.")


def _expand_env_var(value: Optional[str]) -> Optional[str]:
    """Expand $VAR and ${VAR} references, leaving unset variables untouched."""
    import os
    import re

    if value is None:
        return None

    pattern = r"\$\{([^}]+)\}|\$([A-Za-z_][A-Za-z0-9_]*)"

    def replace(match: re.Match) -> str:
        var_name = match.group(1) or match.group(2)
        return os.environ.get(var_name, match.group(0))

    return re.sub(pattern, replace, value)


class NetworkConfig(BaseModel):
    """Configuration for the raw-text HTTP client."""

    user_agent: Optional[str] = Field(None, description="Custom User-Agent header")
    proxy: Optional[str] = Field(None, description="HTTP/HTTPS proxy URL ($VAR expansion supported)")
    max_retries: int = Field(3, ge=0, description="Maximum retry attempts for failed requests")
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    max_content_size: ByteSize = Field(
        50 * 1024 * 1024,
        description="Maximum response size (e.g., '10mb')",
    )

    model_config = {"extra": "forbid"}

    def model_post_init(self, __context: object) -> None:
        """Expand environment variables in the proxy URL after init."""
        if self.proxy:
            object.__setattr__(self, "proxy", _expand_env_var(self.proxy))


class BrowserConfig(BaseModel):
    """Configuration for headless-browser rendering."""

    headless: bool = Field(True, description="Run Chromium without a window")
    timeout: float = Field(20.0, gt=0, description="Navigation timeout in seconds")
    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"] = Field(
        "load",
        description="Navigation event to wait for before capturing HTML",
    )
    launch_args: list[str] = Field(
        default_factory=lambda: ["--single-process"],
        description="Extra Chromium command-line arguments",
    )

    model_config = {"extra": "forbid"}


class ConversionConfig(BaseModel):
    """Configuration for HTML to Markdown conversion."""

    markdown_strategy: Strategy = Field(
        Strategy.TRANSLATORS,
        description="Strategy used by the full-page get_markdown tool",
    )
    summary_strategy: Strategy = Field(
        Strategy.RULES,
        description="Strategy used by the main-content get_markdown_summary tool",
    )
    heading_style: Literal["atx", "atx_closed", "underlined"] = Field(
        "atx",
        description="Heading style passed to markdownify",
    )
    escape_table_pipes: bool = Field(
        False,
        description="Escape '|' inside table cells (rules strategy)",
    )

    model_config = {"extra": "forbid"}


class PagepullConfig(BaseModel):
    """
    Root configuration model for pagepull.

    Example:
        config = PagepullConfig(
            conversion=ConversionConfig(markdown_strategy=Strategy.RULES),
            browser={"timeout": 45},
        )

    YAML format:
        browser:
          timeout: 45
        conversion:
          markdown_strategy: rules
        log_level: DEBUG
    """

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid"}

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "PagepullConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "PagepullConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text())
