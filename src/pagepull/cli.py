"""Command-line interface for pagepull."""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from . import __version__
from .errors import PagepullError
from .logging_config import setup_logging
from .models.config import PagepullConfig, Strategy
from .service import ContentService


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="pagepull",
        description="Fetch web pages and convert rendered HTML to structured Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the MCP tool server on stdio
  pagepull serve

  # Convert a rendered page to Markdown
  pagepull convert https://docs.example.com/page

  # Main content only, with the rule-based strategy
  pagepull convert https://docs.example.com/page --main-only --strategy rules

  # Convert a saved HTML file without touching the network
  pagepull convert --file page.html
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Run diagnostic checks",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="FILE",
        help="YAML configuration file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only log errors",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    subparsers.add_parser("serve", help="Run the MCP tool server on stdin/stdout")

    raw_parser = subparsers.add_parser("raw", help="Print the raw body of a URL (no rendering)")
    raw_parser.add_argument("url", help="URL to fetch")

    html_parser = subparsers.add_parser("html", help="Print the browser-rendered HTML of a URL")
    html_parser.add_argument("url", help="URL to render")

    convert_parser = subparsers.add_parser("convert", help="Convert a page to Markdown")
    convert_parser.add_argument("url", nargs="?", help="URL to render and convert")
    convert_parser.add_argument(
        "--file",
        "-f",
        type=Path,
        default=None,
        help="Convert a local HTML file instead of a URL",
    )
    convert_parser.add_argument(
        "--main-only",
        action="store_true",
        help="Drop header, footer and nav regions",
    )
    convert_parser.add_argument(
        "--strategy",
        "-s",
        choices=[strategy.value for strategy in Strategy],
        default=None,
        help="Conversion strategy (default: from config)",
    )
    convert_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write Markdown to this file instead of stdout",
    )

    return parser


def load_config(args: argparse.Namespace) -> PagepullConfig:
    """Build the configuration from an optional YAML file and CLI flags."""
    config = PagepullConfig.from_yaml_file(args.config) if args.config else PagepullConfig()

    if args.verbose:
        config = config.model_copy(update={"log_level": "DEBUG"})
    elif args.quiet:
        config = config.model_copy(update={"log_level": "ERROR"})
    return config


async def run_command(args: argparse.Namespace, config: PagepullConfig) -> Optional[str]:
    """Execute a subcommand and return text to print, if any."""
    if args.command == "serve":
        from .server import serve

        await serve(config)
        return None

    service = ContentService(config)

    if args.command == "raw":
        return await service.get_raw_text(args.url)
    if args.command == "html":
        return await service.get_rendered_html(args.url)

    if args.file is not None:
        html = args.file.read_text(encoding="utf-8")
        return service.convert_html(html, main_only=args.main_only, strategy=args.strategy)
    return await service.get_markdown(args.url, main_only=args.main_only, strategy=args.strategy)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    console = Console(stderr=True)

    if args.doctor:
        from .doctor import run_doctor

        return run_doctor(console)

    if args.command is None:
        parser.print_help(sys.stderr)
        return 1

    if args.command == "convert" and not args.url and args.file is None:
        console.print("[red]Error:[/red] Please provide a URL or --file to convert")
        return 1

    try:
        config = load_config(args)
    except Exception as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        return 1

    setup_logging(
        level=config.log_level,
        log_file=str(config.log_file) if config.log_file else None,
    )

    try:
        output = asyncio.run(run_command(args, config))
    except (PagepullError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}", markup=True, highlight=False)
        if args.verbose:
            console.print_exception()
        return 1
    except KeyboardInterrupt:
        return 130

    if output is None:
        return 0

    if getattr(args, "output", None):
        args.output.write_text(output, encoding="utf-8")
        console.print(f"Wrote {len(output)} chars to {args.output}")
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
