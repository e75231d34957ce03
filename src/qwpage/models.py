"""Render models - per-call context and the render result variants"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


@dataclass(frozen=True)
class RenderContext:
    """Paths fixed at the start of one render."""

    file_path: str  # as the caller passed it
    dir_name: str
    template_path: Path

    @classmethod
    def for_page(cls, file_path: str | Path, template_name: str) -> "RenderContext":
        file_path = os.fspath(file_path)
        dir_name = os.path.dirname(file_path) or "."
        return cls(
            file_path=file_path,
            dir_name=dir_name,
            template_path=Path(dir_name) / template_name,
        )

    @property
    def base_dir(self) -> Path:
        """Directory templates and components are resolved against"""
        return Path(self.dir_name)

    @property
    def file_name(self) -> str:
        """file_path without the directory prefix and its separator"""
        prefix = self.dir_name
        if self.file_path.startswith(prefix + os.sep) or self.file_path.startswith(prefix + "/"):
            return self.file_path[len(prefix) + 1 :]
        return os.path.basename(self.file_path)


class MarkupResult(BaseModel):
    """Plain rendered markup."""

    kind: Literal["markup"] = "markup"
    markup: str


class IntrospectionResult(BaseModel):
    """Rendered markup plus everything that went into it."""

    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["introspection"] = "introspection"
    markup: str
    options: Any = None
    file_path: str = Field(alias="filePath")
    template_path: str = Field(alias="templatePath")
    dir_name: str = Field(alias="dirName")
    file_name: str = Field(alias="fileName")

    @classmethod
    def from_context(
        cls, markup: str, options: Any, ctx: RenderContext
    ) -> "IntrospectionResult":
        return cls(
            markup=markup,
            options=options,
            file_path=ctx.file_path,
            template_path=str(ctx.template_path),
            dir_name=ctx.dir_name,
            file_name=ctx.file_name,
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


RenderResult = Annotated[
    Union[MarkupResult, IntrospectionResult], Field(discriminator="kind")
]

_result_adapter: TypeAdapter[RenderResult] = TypeAdapter(RenderResult)


def parse_result(data: str | bytes) -> MarkupResult | IntrospectionResult:
    """Load a serialized render result back into its model"""
    return _result_adapter.validate_json(data)
