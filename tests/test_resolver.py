"""Tests for outlet resolution."""

import pytest

from qwpage import ComponentCycleError, ComposerConfig, OutletError, PageComposer
from qwpage.expander import TemplateExpander
from qwpage.loader import FragmentLoader
from qwpage.markup import parse_document
from qwpage.resolver import OutletResolver
from qwpage.tags import CustomTagHandler, TagRegistry, TagResolution


def make_resolver(registry=None, max_passes=100):
    loader = FragmentLoader(TemplateExpander())
    return OutletResolver(loader, registry or TagRegistry(), max_passes=max_passes)


@pytest.mark.asyncio
async def test_no_outlets_single_pass(testdata):
    doc = parse_document("<p>nothing to do</p>")
    passes = await make_resolver().resolve(doc, {}, testdata)

    assert passes == 1
    assert doc.find("p").text == "nothing to do"


@pytest.mark.asyncio
async def test_nested_components_take_a_pass_each(testdata):
    doc = parse_document('<pogon_component name="component.html"></pogon_component>')
    passes = await make_resolver().resolve(doc, {"in_component": 5}, testdata)

    # component.html, then nested.html, then a pass that finds nothing
    assert passes == 3
    assert doc.find("pogon_component") is None
    assert doc.select_one("#inComponent").text == "5"
    assert doc.select_one("#nested") is not None


@pytest.mark.asyncio
async def test_sibling_components_in_document_order(testdata):
    doc = parse_document(
        '<pogon_component name="nested.html"></pogon_component>'
        '<pogon_component name="inner.customtag.html"></pogon_component>'
    )
    await make_resolver().resolve(doc, {}, testdata)

    ids = [p["id"] for p in doc.body.find_all("p")]
    assert ids == ["nested", "inner"]


@pytest.mark.asyncio
async def test_cycle_is_reported(testdata):
    composer = PageComposer(ComposerConfig(max_passes=5))

    with pytest.raises(ComponentCycleError) as exc_info:
        await composer.render(testdata / "cycle.pogon.html", {})

    assert exc_info.value.passes == 5


@pytest.mark.asyncio
async def test_component_without_name(composer, testdata):
    with pytest.raises(OutletError, match="name"):
        await composer.render(testdata / "unnamed_component.pogon.html", {})


@pytest.mark.asyncio
async def test_nested_custom_tag_dropped_with_its_parent(testdata):
    """The inner occurrence goes away when the outer one is replaced."""

    class Counting(CustomTagHandler):
        def __init__(self):
            self.seen = []

        async def resolve(self, options, attributes, inner_html):
            self.seen.append(attributes.get("id"))
            return TagResolution("nested.html", options)

    handler = Counting()
    registry = TagRegistry()
    registry.register("box_tag", handler)

    doc = parse_document(
        '<box_tag id="outer"><box_tag id="inner"></box_tag></box_tag>'
    )
    await make_resolver(registry).resolve(doc, {}, testdata)

    assert handler.seen == ["outer"]
    assert doc.find("box_tag") is None
    assert doc.select_one("#nested") is not None


@pytest.mark.asyncio
async def test_custom_tag_options_do_not_leak(testdata):
    """Options returned by a handler only apply to that handler's fragment."""

    class Rewriting(CustomTagHandler):
        async def resolve(self, options, attributes, inner_html):
            return TagResolution("fortest.customtag.html", "rewritten")

    registry = TagRegistry()
    registry.register("custom_tag", Rewriting())

    doc = parse_document(
        '<custom_tag></custom_tag><pogon_component name="component.html"></pogon_component>'
    )
    await make_resolver(registry).resolve(doc, {"in_component": "original"}, testdata)

    assert doc.select_one("#custom").text == "Custom component: rewritten"
    assert doc.select_one("#inComponent").text == "original"
