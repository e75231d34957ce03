"""Custom tags - outlets resolved by host-supplied handlers.

A handler receives the render options, the tag's attributes and the tag's
inner markup, and answers with the component file to merge in place of the
tag plus the options to expand that file with.

Handlers are either CustomTagHandler subclasses or plain callables (sync or
async). A callable may return a TagResolution, a (file, options) tuple, or a
mapping with "componentFileName" and "newOptions" keys.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from qwpage.exceptions import HandlerError


@dataclass(frozen=True)
class TagResolution:
    """What a custom tag resolves to."""

    component_file: str  # relative to the content file's directory
    options: Any = None


class CustomTagHandler(ABC):
    """Base class for custom tag handlers."""

    @abstractmethod
    async def resolve(
        self, options: Any, attributes: dict[str, str], inner_html: str
    ) -> TagResolution:
        """Resolve one occurrence of the tag.

        Args:
            options: Options the page is being rendered with.
            attributes: Attributes of this tag occurrence.
            inner_html: Markup between the opening and closing tag.

        Returns:
            The component to merge in and the options to expand it with.
        """
        pass


class FunctionTagHandler(CustomTagHandler):
    """Adapts a plain function to the handler interface."""

    def __init__(self, tag_name: str, func: Callable[..., Any]):
        self.tag_name = tag_name
        self.func = func

    async def resolve(
        self, options: Any, attributes: dict[str, str], inner_html: str
    ) -> TagResolution:
        result = self.func(options, attributes, inner_html)
        if inspect.isawaitable(result):
            result = await result
        return coerce_resolution(self.tag_name, result)


def coerce_resolution(tag_name: str, value: Any) -> TagResolution:
    """Normalize whatever a handler returned into a TagResolution."""
    if isinstance(value, TagResolution):
        return value
    if isinstance(value, Mapping) and "componentFileName" in value:
        return TagResolution(
            component_file=value["componentFileName"],
            options=value.get("newOptions"),
        )
    if isinstance(value, tuple) and len(value) == 2:
        return TagResolution(component_file=value[0], options=value[1])
    raise HandlerError(tag_name, f"unexpected handler result: {value!r}")


class TagRegistry:
    """Tag name -> handler, iterated in registration order.

    Names are stored lowercased since the HTML parser lowercases element names.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, CustomTagHandler] = {}

    def register(
        self, tag_name: str, handler: CustomTagHandler | Callable[..., Any]
    ) -> None:
        """Register or replace the handler for tag_name."""
        tag_name = tag_name.lower()
        if not isinstance(handler, CustomTagHandler):
            if not callable(handler):
                raise TypeError(f"Handler for <{tag_name}> is not callable")
            handler = FunctionTagHandler(tag_name, handler)
        self._handlers[tag_name] = handler

    def unregister(self, tag_name: str) -> None:
        self._handlers.pop(tag_name.lower(), None)

    def get(self, tag_name: str) -> CustomTagHandler | None:
        return self._handlers.get(tag_name.lower())

    def names(self) -> list[str]:
        return list(self._handlers)

    def items(self) -> list[tuple[str, CustomTagHandler]]:
        """Snapshot of (name, handler) pairs."""
        return list(self._handlers.items())

    def __contains__(self, tag_name: object) -> bool:
        if not isinstance(tag_name, str):
            return False
        return tag_name.lower() in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)
