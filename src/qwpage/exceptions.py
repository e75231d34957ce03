"""qwpage Exceptions

Every failure aborts the render in progress and reaches the caller as one of
these.
"""

from __future__ import annotations

import errno
from pathlib import Path


class QwpageError(Exception):
    """Base exception for all qwpage errors."""

    pass


class PageNotFoundError(QwpageError, FileNotFoundError):
    """Raised when a content, template or component file does not exist."""

    def __init__(self, path: str | Path):
        self.path = str(path)
        super().__init__(errno.ENOENT, "No such file or directory", self.path)


class ExpansionError(QwpageError):
    """Raised when the template expander rejects a file."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Template expansion failed for {self.path}: {reason}")


class MarkupParseError(QwpageError):
    """Raised when expanded text cannot be parsed into a document."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not parse markup from {self.path}: {reason}")


class HandlerError(QwpageError):
    """Raised when a custom tag handler fails or returns garbage."""

    def __init__(self, tag_name: str, reason: str):
        self.tag_name = tag_name
        self.reason = reason
        super().__init__(f"Custom tag handler for <{tag_name}> failed: {reason}")


class OutletError(QwpageError):
    """Raised when an outlet is missing or malformed."""

    pass


class ComponentCycleError(QwpageError):
    """Raised when component resolution does not settle within the pass limit."""

    def __init__(self, passes: int):
        self.passes = passes
        super().__init__(
            f"Components still unresolved after {passes} passes "
            "(is a component including itself?)"
        )
