"""
Render component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from content_engine.domain.entities import ContentPage

# --- Validation Error ---


@dataclass(frozen=True)
class RenderValidationError:
    """Render error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class RenderBlocksInput:
    """Input for rendering a block sequence (typed blocks or raw mappings)."""

    blocks: list[Any]


@dataclass(frozen=True)
class RenderPageInput:
    """Input for rendering a page's content."""

    page: ContentPage


# --- Output Models ---


@dataclass(frozen=True)
class RenderOutput:
    """Output containing rendered HTML."""

    html: str
    errors: list[RenderValidationError] = field(default_factory=list)
    success: bool = True
