"""Domain models for template sets and render results."""

from __future__ import annotations

from enum import Enum
from functools import cached_property
from pathlib import Path
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


def as_sequence(value: Any) -> tuple[str, ...]:
    """Coerce ``value`` into a tuple of strings.

    ``None`` becomes an empty tuple and a lone string is a single entry.
    """
    if value is None:
        return ()
    if isinstance(value, (str, bytes)):
        value = [value]
    elif not isinstance(value, Iterable):
        value = [value]
    return tuple(
        item.decode() if isinstance(item, bytes) else str(item) for item in value
    )


def template_name(base: str, variation: str) -> str:
    """Resolve a variation of ``base`` to its template identifier."""
    return f"{base}-{variation}" if variation else base


class TemplateSet(BaseModel):
    """A base template name and its ordered variations."""

    model_config = ConfigDict(frozen=True)

    base: str = Field(..., min_length=1, description="Template base name")
    variations: tuple[str, ...] = Field(
        default=(), description="Variation suffixes; empty means no suffix"
    )

    @field_validator("variations", mode="before")
    @classmethod
    def _coerce_variations(cls, value: Any) -> tuple[str, ...]:
        return as_sequence(value)

    @computed_field  # type: ignore[prop-decorator]
    @cached_property
    def templates(self) -> tuple[str, ...]:
        return tuple(template_name(self.base, v) for v in self.variations)


class RenderJob(BaseModel):
    """A single template rendering pass."""

    template: str = Field(..., description="Template identifier")
    variation: str = Field(default="", description="Variation it was resolved from")
    source_path: Path = Field(..., description="Template source file")
    output_path: Path = Field(..., description="HTML output file")


class RenderStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"


class RenderResult(BaseModel):
    """Outcome of rendering one template."""

    template: str
    source_path: Path
    output_path: Path
    status: RenderStatus
    written: bool = Field(default=False, description="Whether the output file was written")
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is RenderStatus.SUCCESS
