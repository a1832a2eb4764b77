"""
Content component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from content_engine.domain.entities import (
    ContentBlock,
    ContentPage,
    ContentTemplate,
    PageStatus,
    SeoMeta,
)

from ._impl import ContentValidationError

# --- Input Models ---


@dataclass(frozen=True)
class CreatePageInput:
    """Input for creating a draft page."""

    title: str
    author_id: str
    tenant_id: str
    slug: str | None = None
    description: str | None = None
    content: list[ContentBlock | dict[str, Any]] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    category: str | None = None
    seo: SeoMeta | None = None


@dataclass(frozen=True)
class UpdatePageInput:
    """Input for a partial page update."""

    page: ContentPage
    updates: dict[str, Any]


@dataclass(frozen=True)
class TransitionPageInput:
    """Input for page status transitions."""

    page: ContentPage
    to_status: PageStatus


@dataclass(frozen=True)
class AddBlockInput:
    """Input for inserting a block; position None appends."""

    page: ContentPage
    block: ContentBlock
    position: int | None = None


@dataclass(frozen=True)
class RemoveBlockInput:
    page: ContentPage
    block_id: str


@dataclass(frozen=True)
class MoveBlockInput:
    page: ContentPage
    block_id: str
    index: int


@dataclass(frozen=True)
class ReorderBlocksInput:
    """Input for reordering blocks; block_ids must list every block once."""

    page: ContentPage
    block_ids: list[str]


@dataclass(frozen=True)
class CreateTemplateInput:
    """Input for creating a template from a block sequence."""

    name: str
    category: str
    created_by: str
    tenant_id: str
    content: list[ContentBlock | dict[str, Any]] = field(default_factory=list)
    description: str = ""
    is_public: bool = False


@dataclass(frozen=True)
class ApplyTemplateInput:
    """Input for applying a template to a page; position None appends."""

    page: ContentPage
    template: ContentTemplate
    position: int | None = None


@dataclass(frozen=True)
class PreviewPageInput:
    page: ContentPage


# --- Output Models ---


@dataclass(frozen=True)
class ContentOperationOutput:
    """Output for page operations (create, update, edit, transition)."""

    page: ContentPage | None = None
    errors: list[ContentValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class TemplateOutput:
    """Output containing a created template."""

    template: ContentTemplate | None = None
    errors: list[ContentValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class PreviewOutput:
    """Rendered page plus the publish guard findings, for editors."""

    html: str
    findings: list[ContentValidationError] = field(default_factory=list)
    errors: list[ContentValidationError] = field(default_factory=list)
    success: bool = True
