"""Fragment loader - read, expand and parse one file."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

from bs4 import BeautifulSoup
from jinja2 import TemplateError

from qwpage.exceptions import ExpansionError, MarkupParseError, PageNotFoundError
from qwpage.expander import TemplateExpander
from qwpage.markup import parse_document

log = logging.getLogger(__name__)


async def read_text(path: str | Path) -> str:
    """Read a file without blocking the event loop.

    Bytes that are not valid UTF-8 become U+FFFD instead of failing the render.
    """
    try:
        return await asyncio.to_thread(
            Path(path).read_text, encoding="utf-8", errors="replace"
        )
    except FileNotFoundError as e:
        raise PageNotFoundError(path) from e


class FragmentLoader:
    """Turns a file path plus options into a parsed document."""

    def __init__(self, expander: TemplateExpander):
        self.expander = expander

    async def load(self, path: str | Path, options: Any) -> BeautifulSoup:
        """Load a fragment.

        Args:
            path: File to read.
            options: Value handed to the template expander.

        Returns:
            The parsed document.

        Raises:
            PageNotFoundError: If the file does not exist.
            ExpansionError: If the template syntax is malformed.
            MarkupParseError: If the expanded text cannot be parsed.
        """
        raw = await read_text(path)
        log.debug("Loaded %s (%d chars)", path, len(raw))

        try:
            expanded = self.expander.expand(raw, options)
        except TemplateError as e:
            raise ExpansionError(path, str(e)) from e

        try:
            return parse_document(expanded)
        except Exception as e:
            raise MarkupParseError(path, str(e)) from e
