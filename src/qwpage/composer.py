"""Page composer - content file + template + components -> one page.

Algorithm:
1. Expand and parse the content file
2. Pick the template: <html pogon-template="..."> or the configured default,
   both relative to the content file's directory
3. Expand and parse the template, merge the content at <pogon_outlet>
4. Resolve component and custom tag outlets
5. Apply pogon-checked / pogon-selected markers
6. Serialize, or wrap in an introspection record
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from qwpage.config import OUTLET_TAG, TEMPLATE_ATTR, ComposerConfig
from qwpage.exceptions import OutletError
from qwpage.expander import TemplateExpander
from qwpage.forms import normalize_form_defaults
from qwpage.loader import FragmentLoader
from qwpage.markup import serialize
from qwpage.merge import merge
from qwpage.models import IntrospectionResult, MarkupResult, RenderContext
from qwpage.resolver import OutletResolver
from qwpage.tags import CustomTagHandler, TagRegistry

log = logging.getLogger(__name__)

RenderCallback = Callable[[BaseException | None, str | None], Any]


class PageComposer:
    """Composes pages. Holds the config and custom tags for its renders.

    Renders share nothing but the composer's config and registry, so hosts
    that need different settings side by side use separate composers.
    """

    def __init__(
        self,
        config: ComposerConfig | None = None,
        registry: TagRegistry | None = None,
    ):
        self.config = config or ComposerConfig()
        self.registry = registry or TagRegistry()

    # -------------------------------------------------------------------------
    # Custom tags
    # -------------------------------------------------------------------------

    def register_custom_tag(
        self, tag_name: str, handler: CustomTagHandler | Callable[..., Any]
    ) -> None:
        """Register (or replace) the handler for a custom tag.

        The tag name can be anything, including known HTML tags.
        """
        self.registry.register(tag_name, handler)

    def unregister_custom_tag(self, tag_name: str) -> None:
        self.registry.unregister(tag_name)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    async def compose(
        self,
        file_path: str | Path,
        options: Any = None,
        introspect: bool | None = None,
    ) -> MarkupResult | IntrospectionResult:
        """Render a content file to a typed result.

        Args:
            file_path: Content file. The template and components are looked
                up next to it.
            options: Value passed to every template expansion.
            introspect: Return an IntrospectionResult. Defaults to
                config.introspection.

        Returns:
            MarkupResult, or IntrospectionResult in introspection mode.

        Raises:
            PageNotFoundError: If the content, template or a component is missing.
            ExpansionError: If a file has malformed template syntax.
            MarkupParseError: If expanded markup cannot be parsed.
            HandlerError: If a custom tag handler fails.
            OutletError: If the template has no <pogon_outlet>.
            ComponentCycleError: If components keep producing components.
        """
        # Settings are read once so a concurrent config change cannot split a render
        config = self.config.model_copy()
        if introspect is None:
            introspect = config.introspection

        expander = TemplateExpander(autoescape=config.autoescape)
        loader = FragmentLoader(expander)
        resolver = OutletResolver(loader, self.registry, max_passes=config.max_passes)

        content_doc = await loader.load(file_path, options)

        template_name = config.default_template
        html_tag = content_doc.html
        if html_tag is not None and html_tag.get(TEMPLATE_ATTR):
            template_name = html_tag[TEMPLATE_ATTR]
        ctx = RenderContext.for_page(file_path, template_name)
        log.debug("Rendering %s with template %s", ctx.file_path, ctx.template_path)

        doc = await loader.load(ctx.template_path, options)
        outlet = doc.find(OUTLET_TAG)
        if outlet is None:
            raise OutletError(f"Template {ctx.template_path} has no <{OUTLET_TAG}>")
        merge(doc, outlet, content_doc)

        passes = await resolver.resolve(doc, options, ctx.base_dir)
        normalize_form_defaults(doc)
        log.debug("Rendered %s in %d pass(es)", ctx.file_path, passes)

        markup = serialize(doc)
        if introspect:
            return IntrospectionResult.from_context(markup, options, ctx)
        return MarkupResult(markup=markup)

    async def render(self, file_path: str | Path, options: Any = None) -> str:
        """Render a content file to text.

        Returns the markup, or the introspection record as JSON when
        config.introspection is on.
        """
        result = await self.compose(file_path, options)
        if isinstance(result, IntrospectionResult):
            return result.to_json()
        return result.markup

    async def render_file(
        self,
        file_path: str | Path,
        options: Any,
        callback: RenderCallback,
    ) -> Any:
        """Error-first callback flavour of render, for callback-style hosts.

        callback(None, rendered) on success, callback(error, None) on failure.
        It is called exactly once; errors raised by the callback itself are
        not fed back into it.
        """
        try:
            rendered = await self.render(file_path, options)
        except Exception as e:
            log.debug("Render of %s failed: %s", file_path, e)
            return callback(e, None)
        return callback(None, rendered)
