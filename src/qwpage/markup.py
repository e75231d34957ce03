"""Document model - thin helpers over BeautifulSoup.

Documents are parsed with the html5lib tree builder so every document has
<html>, <head> and <body>, no matter how little markup the fragment holds.
"""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import Tag

PARSER = "html5lib"


def parse_document(text: str) -> BeautifulSoup:
    """Parse text into a full document tree.

    Attribute values are kept as plain strings (no class-list splitting) so
    handlers and the normalizer see exactly what was authored.
    """
    return BeautifulSoup(text, PARSER, multi_valued_attributes=None)


def serialize(doc: BeautifulSoup) -> str:
    return str(doc)


def inner_html(node: Tag) -> str:
    """Markup of the node's children, without the node itself."""
    return node.decode_contents()


def append_children(target: Tag, source: Tag) -> None:
    """Move every child of source to the end of target, in order."""
    for child in list(source.contents):
        target.append(child.extract())


def move_children_after(anchor: Tag, source: Tag) -> None:
    """Move every child of source to sit right after anchor, in order."""
    cursor = anchor
    for child in list(source.contents):
        child = child.extract()
        cursor.insert_after(child)
        cursor = child


def is_detached(node: Tag) -> bool:
    """True once the node (or an ancestor) was dropped from its document."""
    if node.decomposed:
        return True
    top = node
    while top.parent is not None:
        top = top.parent
    return not isinstance(top, BeautifulSoup)
