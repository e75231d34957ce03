"""Form defaults - turn pogon-checked / pogon-selected into real state."""

from __future__ import annotations

from bs4 import BeautifulSoup

from qwpage.config import FORM_DEFAULT_MARKERS


def normalize_form_defaults(doc: BeautifulSoup) -> None:
    """Apply default-selection markers in place.

    <input value="a" pogon-checked="a"> becomes <input value="a" checked="checked">.
    The marker is always removed; the state attribute is only ever added.
    """
    for element_name, (marker, state) in FORM_DEFAULT_MARKERS.items():
        for element in doc.find_all(element_name, attrs={marker: True}):
            wanted = element.attrs.pop(marker)
            if element.get("value") == wanted:
                element[state] = state
