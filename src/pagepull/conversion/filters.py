"""Tag-identity based node filtering."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

# Elements that never contribute text
ALWAYS_EXCLUDED_TAGS = frozenset({"script", "style"})

# Page chrome dropped for main-content extraction
BOILERPLATE_TAGS = frozenset({"header", "footer", "nav"})


def exclusion_set(main_only: bool = False) -> frozenset[str]:
    """
    Build the set of tag names removed from a document before conversion.

    Args:
        main_only: Also drop header, footer and nav regions

    Returns:
        Frozen set of lowercase tag names
    """
    if main_only:
        return ALWAYS_EXCLUDED_TAGS | BOILERPLATE_TAGS
    return ALWAYS_EXCLUDED_TAGS


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML string into a tree private to the caller."""
    return BeautifulSoup(html, "html.parser")


def prune(root: Tag, excluded: Iterable[str]) -> Tag:
    """
    Remove every element whose tag name is excluded, with its descendants.

    The tree is modified in place; callers own the tree they pass in.
    Tags that do not occur are a no-op.

    Args:
        root: Document or element to prune
        excluded: Tag names to remove

    Returns:
        The same root, for chaining
    """
    names = sorted(excluded)
    if not names:
        return root

    removed = 0
    for element in root.find_all(names):
        # Nested matches are already gone with their excluded ancestor
        if element.decomposed:
            continue
        element.decompose()
        removed += 1

    if removed:
        logger.debug(f"Pruned {removed} element(s) matching {names}")
    return root
