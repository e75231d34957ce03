"""Configuration for a page composer, optionally loaded from qwpage.yaml"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

# =============================================================================
# Markup conventions
# =============================================================================

OUTLET_TAG = "pogon_outlet"
COMPONENT_TAG = "pogon_component"
COMPONENT_NAME_ATTR = "name"
TEMPLATE_ATTR = "pogon-template"

DEFAULT_TEMPLATE = "template.html"

# element -> (marker attribute, state attribute)
FORM_DEFAULT_MARKERS: dict[str, tuple[str, str]] = {
    "input": ("pogon-checked", "checked"),
    "option": ("pogon-selected", "selected"),
}


# =============================================================================
# Composer config
# =============================================================================


class ComposerConfig(BaseModel):
    """Settings read at the start of every render"""

    introspection: bool = False
    default_template: str = DEFAULT_TEMPLATE
    max_passes: int = Field(default=100, ge=1)
    autoescape: bool = True  # html-escape {{ }} output

    model_config = {"validate_assignment": True}

    @classmethod
    def load(cls, path: Path) -> "ComposerConfig":
        """Load config from yaml file"""
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.model_validate(data)
