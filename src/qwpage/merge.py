"""Merge operator - splice one document into another at an outlet."""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import Tag

from qwpage.markup import append_children, move_children_after


def merge(target: BeautifulSoup, outlet: Tag, source: BeautifulSoup) -> None:
    """Merge source into target, replacing outlet.

    1. If both heads carry a <title>, the target's is dropped (source wins)
    2. Source <head> children are appended to the target <head>
    3. Source <body> children replace the outlet

    Args:
        target: Document being built. Mutated in place.
        outlet: Placeholder element inside target.
        source: Freshly parsed fragment. Emptied by the merge.
    """
    target_titles = target.select("head title")
    if target_titles and source.select("head title"):
        for title in target_titles:
            title.decompose()

    if source.head is not None and target.head is not None:
        append_children(target.head, source.head)

    if source.body is not None:
        move_children_after(outlet, source.body)
    outlet.decompose()
