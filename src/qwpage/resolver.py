"""Resolver - replaces component and custom tag outlets with their fragments.

Each pass:
1. Every <pogon_component name="..."> is replaced by the named file,
   expanded with the render options
2. Every registered custom tag is handed to its handler, which names the file
   (and the options) to replace it with

Fragments may contain further outlets, so passes repeat until one finds no
<pogon_component>. Only component outlets decide whether another pass runs:
custom tags introduced by a pass that found no components stay in place.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import Tag

from qwpage.config import COMPONENT_NAME_ATTR, COMPONENT_TAG
from qwpage.exceptions import ComponentCycleError, HandlerError, OutletError, QwpageError
from qwpage.loader import FragmentLoader
from qwpage.markup import inner_html, is_detached
from qwpage.merge import merge
from qwpage.tags import CustomTagHandler, TagRegistry

log = logging.getLogger(__name__)


class OutletResolver:
    """Resolves outlets in a document until no component outlets remain."""

    def __init__(
        self,
        loader: FragmentLoader,
        registry: TagRegistry,
        max_passes: int = 100,
    ):
        self.loader = loader
        self.registry = registry
        self.max_passes = max_passes

    async def resolve(self, doc: BeautifulSoup, options: Any, base_dir: Path) -> int:
        """Resolve outlets in doc, in place.

        Args:
            doc: Document to resolve. Mutated in place.
            options: Options handed to component expansion and handlers.
            base_dir: Directory component names are relative to.

        Returns:
            Number of passes run.

        Raises:
            ComponentCycleError: If components are still found after max_passes.
        """
        passes = 0
        while True:
            if passes >= self.max_passes:
                raise ComponentCycleError(passes)
            passes += 1

            found = await self._resolve_components(doc, options, base_dir)
            await self._resolve_custom_tags(doc, options, base_dir)

            log.debug("Pass %d resolved %d component(s)", passes, found)
            if found == 0:
                return passes

    async def _resolve_components(
        self, doc: BeautifulSoup, options: Any, base_dir: Path
    ) -> int:
        outlets = doc.find_all(COMPONENT_TAG)
        for outlet in outlets:
            if is_detached(outlet):
                continue
            name = outlet.get(COMPONENT_NAME_ATTR)
            if not name:
                raise OutletError(
                    f"<{COMPONENT_TAG}> without a '{COMPONENT_NAME_ATTR}' attribute"
                )
            path = base_dir / name
            log.debug("Component %s -> %s", name, path)
            fragment = await self.loader.load(path, options)
            merge(doc, outlet, fragment)
        return len(outlets)

    async def _resolve_custom_tags(
        self, doc: BeautifulSoup, options: Any, base_dir: Path
    ) -> None:
        for tag_name, handler in self.registry.items():
            for outlet in doc.find_all(tag_name):
                if is_detached(outlet):
                    continue
                await self._resolve_custom_tag(
                    doc, outlet, tag_name, handler, options, base_dir
                )

    async def _resolve_custom_tag(
        self,
        doc: BeautifulSoup,
        outlet: Tag,
        tag_name: str,
        handler: CustomTagHandler,
        options: Any,
        base_dir: Path,
    ) -> None:
        attributes = dict(outlet.attrs)
        try:
            resolution = await handler.resolve(options, attributes, inner_html(outlet))
        except QwpageError:
            raise
        except Exception as e:
            raise HandlerError(tag_name, str(e) or type(e).__name__) from e

        if not resolution.component_file:
            raise HandlerError(tag_name, "no component file returned")

        path = base_dir / resolution.component_file
        log.debug("Custom tag <%s> -> %s", tag_name, path)
        fragment = await self.loader.load(path, resolution.options)
        merge(doc, outlet, fragment)
