"""Diagnostic tool for verifying pagepull installation and dependencies."""

import sys
from importlib import import_module
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table


def check_dependency(module_name: str, package_name: Optional[str] = None) -> tuple[bool, str]:
    """
    Check if a Python module is importable.

    Args:
        module_name: Name of the module to import
        package_name: Display name of the package (defaults to module_name)

    Returns:
        Tuple of (success: bool, message: str)
    """
    display_name = package_name or module_name

    try:
        import_module(module_name)
        return True, f"[OK] {display_name}"
    except ImportError:
        return False, f"[MISSING] {display_name}"


def check_browser() -> tuple[bool, str]:
    """
    Check that Playwright's Chromium build has been downloaded.

    Returns:
        Tuple of (success: bool, message: str)
    """
    try:
        from playwright.sync_api import sync_playwright

        with sync_playwright() as playwright:
            executable = Path(playwright.chromium.executable_path)
    except ImportError:
        return False, "[MISSING] Chromium - playwright is not installed"
    except Exception as e:
        return False, f"[FAIL] Chromium - {e}"

    if executable.exists():
        return True, f"[OK] Chromium ({executable})"
    return False, "[MISSING] Chromium - run: playwright install chromium"


def run_doctor(console: Optional[Console] = None) -> int:
    """
    Run diagnostic checks and display results.

    Returns:
        Exit code (0 if everything needed is present, 1 otherwise)
    """
    console = console or Console(stderr=True)
    console.print("Running pagepull diagnostics...\n")

    dependency_checks = [
        ("aiohttp", "aiohttp"),
        ("charset_normalizer", "charset-normalizer"),
        ("bs4", "beautifulsoup4"),
        ("markdownify", "markdownify"),
        ("pydantic", "pydantic"),
        ("yaml", "pyyaml"),
        ("rich", "rich"),
        ("mcp", "mcp"),
        ("playwright.async_api", "playwright"),
    ]

    dependency_results = [check_dependency(mod, pkg) for mod, pkg in dependency_checks]
    all_checks = {
        "Dependencies": dependency_results,
        "Browser": [check_browser()],
    }

    for category, results in all_checks.items():
        table = Table(title=category, show_header=False, box=None)
        table.add_column("Status", style="bold")

        for success, message in results:
            table.add_row(message, style="green" if success else "red")

        console.print(table)
        console.print()

    failed = [message for results in all_checks.values() for success, message in results if not success]
    if failed:
        console.print("[red]Some checks failed.[/red]")
        console.print("  Reinstall with: pip install --upgrade --force-reinstall pagepull")
        console.print("  Download the browser with: playwright install chromium")
        return 1

    console.print("[green]All checks passed.[/green]")
    return 0


if __name__ == "__main__":
    sys.exit(run_doctor())
