"""Template expander - substitutes variables into raw text before parsing."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jinja2 import Environment


class TemplateExpander:
    """Expands {{ var }} placeholders with Jinja2.

    The options value is handed through untouched. Mapping options provide
    their string keys as variables; any options value is also reachable as
    ``this``, so a scalar can be rendered with {{ this }}.
    """

    def __init__(self, autoescape: bool = True):
        self.env = Environment(
            autoescape=autoescape,
            keep_trailing_newline=True,
        )

    def expand(self, text: str, options: Any) -> str:
        """Render text against options.

        Raises:
            jinja2.TemplateError: On malformed template syntax.
        """
        tmpl = self.env.from_string(text)
        return tmpl.render(self._context(options))

    @staticmethod
    def _context(options: Any) -> dict[str, Any]:
        variables: dict[str, Any] = {}
        if isinstance(options, Mapping):
            variables.update((k, v) for k, v in options.items() if isinstance(k, str))
        variables.setdefault("this", options)
        return variables

