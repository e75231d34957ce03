"""Tests for the merge operator."""

from qwpage import merge
from qwpage.markup import parse_document


def test_source_title_wins():
    target = parse_document(
        "<html><head><title>target</title></head><body><x-outlet></x-outlet></body></html>"
    )
    source = parse_document("<html><head><title>source</title></head><body></body></html>")

    merge(target, target.find("x-outlet"), source)

    titles = target.select("head title")
    assert [t.text for t in titles] == ["source"]


def test_single_title_kept():
    target = parse_document(
        "<html><head><title>target</title></head><body><x-outlet></x-outlet></body></html>"
    )
    source = parse_document("<p>no head at all</p>")

    merge(target, target.find("x-outlet"), source)

    assert [t.text for t in target.select("head title")] == ["target"]


def test_head_content_appended_in_order():
    target = parse_document(
        '<html><head><meta name="a"><meta name="b"></head>'
        "<body><x-outlet></x-outlet></body></html>"
    )
    source = parse_document('<html><head><meta name="c"><meta name="a"></head></html>')

    merge(target, target.find("x-outlet"), source)

    names = [m["name"] for m in target.head.find_all("meta")]
    # no deduplication beyond titles
    assert names == ["a", "b", "c", "a"]


def test_body_replaces_outlet_in_place():
    target = parse_document(
        "<div><p>before</p><x-outlet></x-outlet><p>after</p></div>"
    )
    source = parse_document("<p>one</p>text<p>two</p>")

    merge(target, target.find("x-outlet"), source)

    div = target.find("div")
    assert div.decode_contents() == "<p>before</p><p>one</p>text<p>two</p><p>after</p>"
    assert target.find("x-outlet") is None


def test_empty_source_just_removes_outlet():
    target = parse_document("<div><x-outlet></x-outlet></div>")
    merge(target, target.find("x-outlet"), parse_document(""))

    assert target.find("div").decode_contents() == ""
