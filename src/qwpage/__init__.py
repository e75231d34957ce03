"""qwpage - HTML page composer

Merges a content file into a shared template, then resolves component and
custom tag outlets until none are left.
"""

from qwpage.composer import PageComposer
from qwpage.config import ComposerConfig
from qwpage.exceptions import (
    ComponentCycleError,
    ExpansionError,
    HandlerError,
    MarkupParseError,
    OutletError,
    PageNotFoundError,
    QwpageError,
)
from qwpage.merge import merge
from qwpage.models import IntrospectionResult, MarkupResult, RenderResult, parse_result
from qwpage.tags import CustomTagHandler, TagRegistry, TagResolution

__all__ = [
    # composer
    "PageComposer",
    "ComposerConfig",
    "merge",
    # custom tags
    "CustomTagHandler",
    "TagRegistry",
    "TagResolution",
    # results
    "RenderResult",
    "MarkupResult",
    "IntrospectionResult",
    "parse_result",
    # errors
    "QwpageError",
    "PageNotFoundError",
    "ExpansionError",
    "MarkupParseError",
    "HandlerError",
    "OutletError",
    "ComponentCycleError",
]
