"""
ContentService - page and template authoring with a guarded lifecycle.

Pages own an ordered block sequence. Authoring operations (replace, add,
remove, move, reorder, apply template) and status transitions all return a
NEW aggregate; inputs are never mutated.

State Machine:
- draft → published (guarded: content validation + page fields + media)
- draft|published → archived
- published → draft, archived → draft

Guards:
- G1: publish requires title and a well-formed slug
- G2: publish requires block validation to pass
- G3: publish requires media references to resolve (when a resolver is set)

Ordering:
- Stored content is always sorted by order and numbered 0..n-1
- Sorting is stable, so equal orders keep insertion order
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from content_engine.adapters.clock import SystemClock
from content_engine.components.blocks import BlockFactory
from content_engine.components.render import BlockRenderer
from content_engine.components.validation import ContentValidator
from content_engine.domain.blocks import view_block
from content_engine.domain.entities import (
    BlockKind,
    ContentBlock,
    ContentEngineError,
    ContentPage,
    ContentTemplate,
    PageStatus,
    SeoMeta,
)
from content_engine.domain.slug import slugify
from content_engine.domain.state import transition as transition_status

from .ports import IdGeneratorPort, MediaResolverPort, TimePort

logger = logging.getLogger(__name__)

# --- Configuration ---


@dataclass(frozen=True)
class ContentConfig:
    """Content configuration from rules."""

    slug_pattern: str = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
    slug_min_length: int = 1
    slug_max_length: int = 200
    title_min_length: int = 1
    title_max_length: int = 200
    require_valid_content_to_publish: bool = True
    block_publish_if_missing_media: bool = True


DEFAULT_CONFIG = ContentConfig()

UPDATABLE_FIELDS = frozenset(
    ["title", "slug", "description", "tags", "category", "seo", "content"]
)


# --- Errors ---


@dataclass(frozen=True)
class ContentValidationError:
    """Content validation error."""

    code: str
    message: str
    field: str | None = None
    block_id: str | None = None


class BlockNotFoundError(ContentEngineError, LookupError):
    """Raised when a page has no block with the given id."""

    def __init__(self, block_id: str) -> None:
        self.block_id = block_id
        super().__init__(f"Block {block_id} not found")


class PublishGuardError(ContentEngineError):
    """Raised when publish guards fail."""

    def __init__(self, findings: list[ContentValidationError]) -> None:
        self.findings = findings
        messages = [e.message for e in findings]
        super().__init__(f"Publish guards failed: {'; '.join(messages)}")


# --- Validation Functions ---


def validate_page_fields(
    page: ContentPage,
    config: ContentConfig = DEFAULT_CONFIG,
) -> list[ContentValidationError]:
    """
    Validate page fields.

    Returns list of validation errors (empty if valid).
    """
    errors: list[ContentValidationError] = []

    # Title required
    if not page.title or not page.title.strip():
        errors.append(
            ContentValidationError(
                code="title_required",
                message="Title is required",
                field="title",
            )
        )
    elif len(page.title.strip()) < config.title_min_length:
        errors.append(
            ContentValidationError(
                code="title_too_short",
                message=f"Title must be at least {config.title_min_length} characters",
                field="title",
            )
        )
    elif len(page.title) > config.title_max_length:
        errors.append(
            ContentValidationError(
                code="title_too_long",
                message=f"Title must be at most {config.title_max_length} characters",
                field="title",
            )
        )

    # Slug required and valid format
    if not page.slug or not page.slug.strip():
        errors.append(
            ContentValidationError(
                code="slug_required",
                message="Slug is required",
                field="slug",
            )
        )
    elif len(page.slug) < config.slug_min_length:
        errors.append(
            ContentValidationError(
                code="slug_too_short",
                message=f"Slug must be at least {config.slug_min_length} characters",
                field="slug",
            )
        )
    elif len(page.slug) > config.slug_max_length or not re.fullmatch(
        config.slug_pattern, page.slug
    ):
        errors.append(
            ContentValidationError(
                code="slug_invalid",
                message="Slug must contain only lowercase letters, numbers, and hyphens",
                field="slug",
            )
        )

    return errors


# --- Media References ---

MEDIA_FIELDS: dict[str, tuple[str, ...]] = {
    BlockKind.IMAGE.value: ("src",),
    BlockKind.VIDEO.value: ("src", "poster"),
    BlockKind.EMBED.value: ("url",),
}


def _gallery_sources(images: Any) -> list[str]:
    sources: list[str] = []
    if not isinstance(images, list):
        return sources
    for image in images:
        if isinstance(image, str):
            sources.append(image)
        elif isinstance(image, Mapping):
            value = image.get("src", image.get("url"))
            if isinstance(value, str):
                sources.append(value)
    return sources


def extract_media_references(blocks: Iterable[Any]) -> list[str]:
    """
    Extract media references (src/url/poster, gallery images) from blocks.

    References are returned in block order without duplicates.
    """
    references: list[str] = []

    for block in blocks:
        view = view_block(block)
        if not isinstance(view.content, Mapping):
            continue

        keys = MEDIA_FIELDS.get(view.kind or "", ())
        candidates: list[Any] = [view.content.get(key) for key in keys]
        if view.kind == BlockKind.GALLERY.value:
            candidates.extend(_gallery_sources(view.content.get("images")))

        for value in candidates:
            if isinstance(value, str) and value.strip() and value not in references:
                references.append(value)

    return references


# --- Ordering ---


def _sorted_blocks(blocks: Iterable[ContentBlock]) -> list[ContentBlock]:
    return sorted(blocks, key=lambda b: b.order)


def _renumber(blocks: Sequence[ContentBlock]) -> list[ContentBlock]:
    return [b.model_copy(update={"order": i}, deep=True) for i, b in enumerate(blocks)]


def _coerce_blocks(blocks: Iterable[ContentBlock | Mapping[str, Any]]) -> list[ContentBlock]:
    # Raw mappings go through model validation; unknown kinds raise
    return [
        b if isinstance(b, ContentBlock) else ContentBlock.model_validate(b)
        for b in blocks
    ]


def _index_of(page: ContentPage, block_id: str) -> int:
    for i, block in enumerate(page.content):
        if block.id == block_id:
            return i
    raise BlockNotFoundError(block_id)


# --- Content Service ---


class ContentService:
    """
    Content service for pages and templates.

    Holds no aggregate state; every operation takes the aggregate it works
    on and returns a new one.
    """

    def __init__(
        self,
        *,
        clock: TimePort | None = None,
        ids: IdGeneratorPort | None = None,
        validator: ContentValidator | None = None,
        renderer: BlockRenderer | None = None,
        media: MediaResolverPort | None = None,
        config: ContentConfig | None = None,
    ) -> None:
        self._clock = clock or SystemClock()
        self._factory = BlockFactory(ids)
        self._validator = validator or ContentValidator()
        self._renderer = renderer or BlockRenderer()
        self._media = media
        self._config = config or DEFAULT_CONFIG

    # --- Pages ---

    def create_page(
        self,
        title: str,
        author_id: str,
        tenant_id: str,
        *,
        slug: str | None = None,
        description: str | None = None,
        content: Iterable[ContentBlock | Mapping[str, Any]] = (),
        tags: Iterable[str] = (),
        category: str | None = None,
        seo: SeoMeta | None = None,
    ) -> ContentPage:
        """
        Create a draft page. The slug defaults to slugify(title).

        Raises:
            UnknownBlockKindError: If a raw content block names an unknown kind.
        """
        now = self._clock.now_utc()
        return ContentPage(
            title=title,
            slug=slug if slug is not None else slugify(title),
            description=description,
            status="draft",
            author_id=author_id,
            tenant_id=tenant_id,
            tags=set(tags),
            category=category,
            seo=seo,
            content=_renumber(_sorted_blocks(_coerce_blocks(content))),
            created_at=now,
            updated_at=now,
        )

    def update_page(self, page: ContentPage, updates: Mapping[str, Any]) -> ContentPage:
        """
        Apply a partial update to page fields.

        Status and id are not updatable here (use transitions); unknown
        fields are ignored.
        """
        changes = {k: v for k, v in updates.items() if k in UPDATABLE_FIELDS}
        if "content" in changes:
            changes["content"] = _renumber(_sorted_blocks(_coerce_blocks(changes["content"])))

        data = page.model_dump()
        data.update(changes)
        data["updated_at"] = self._clock.now_utc()
        return ContentPage.model_validate(data)

    def replace_content(
        self,
        page: ContentPage,
        blocks: Iterable[ContentBlock | Mapping[str, Any]],
    ) -> ContentPage:
        """Replace the whole block sequence, keeping the blocks' relative order."""
        return self._with_content(page, _sorted_blocks(_coerce_blocks(blocks)))

    def add_block(
        self,
        page: ContentPage,
        block: ContentBlock,
        position: int | None = None,
    ) -> ContentPage:
        """Insert a copy of block at position (append when None)."""
        blocks = _sorted_blocks(page.content)
        index = len(blocks) if position is None else position
        blocks.insert(index, block)
        return self._with_content(page, blocks)

    def remove_block(self, page: ContentPage, block_id: str) -> ContentPage:
        """
        Remove a block by id.

        Raises:
            BlockNotFoundError: If the page has no such block.
        """
        index = _index_of(page, block_id)
        blocks = list(page.content)
        del blocks[index]
        return self._with_content(page, _sorted_blocks(blocks))

    def move_block(self, page: ContentPage, block_id: str, index: int) -> ContentPage:
        """
        Move a block to a new index.

        Raises:
            BlockNotFoundError: If the page has no such block.
        """
        blocks = _sorted_blocks(page.content)
        current = next((i for i, b in enumerate(blocks) if b.id == block_id), None)
        if current is None:
            raise BlockNotFoundError(block_id)
        block = blocks.pop(current)
        blocks.insert(index, block)
        return self._with_content(page, blocks)

    def reorder_blocks(self, page: ContentPage, block_ids: Sequence[str]) -> ContentPage:
        """
        Reorder blocks to follow block_ids exactly.

        Raises:
            BlockNotFoundError: If an id is not on the page.
            ValueError: If block_ids is not a permutation of the page's ids.
        """
        by_id = {b.id: b for b in page.content}
        for block_id in block_ids:
            if block_id not in by_id:
                raise BlockNotFoundError(block_id)
        if len(block_ids) != len(by_id) or len(set(block_ids)) != len(block_ids):
            raise ValueError("block_ids must list every block on the page exactly once")
        return self._with_content(page, [by_id[block_id] for block_id in block_ids])

    def _with_content(self, page: ContentPage, blocks: Sequence[ContentBlock]) -> ContentPage:
        return page.model_copy(
            update={"content": _renumber(blocks), "updated_at": self._clock.now_utc()},
            deep=True,
        )

    # --- Lifecycle ---

    def check_publish_guards(self, page: ContentPage) -> list[ContentValidationError]:
        """Check publish guards (G1-G3)."""
        errors = validate_page_fields(page, self._config)

        if self._config.require_valid_content_to_publish:
            report = self._validator.validate(page.content)
            errors.extend(
                ContentValidationError(
                    code=f.code,
                    message=f.message,
                    field=f.field,
                    block_id=f.block_id,
                )
                for f in report.findings
                if f.severity == "error"
            )

        if self._config.block_publish_if_missing_media and self._media is not None:
            for reference in extract_media_references(page.content):
                if not self._media.resolve(reference):
                    errors.append(
                        ContentValidationError(
                            code="missing_media",
                            message=f"Referenced media {reference} not found",
                            field="content",
                        )
                    )

        return errors

    def publish(self, page: ContentPage) -> ContentPage:
        """
        Publish a page.

        Raises:
            PublishGuardError: If any publish guard fails.
            InvalidTransitionError: If the page cannot be published from its status.
        """
        errors = self.check_publish_guards(page)
        if errors:
            raise PublishGuardError(errors)

        published = transition_status(page, "published", self._clock.now_utc())
        logger.info("Published page %s (%s)", published.id, published.slug)
        return published

    def archive(self, page: ContentPage) -> ContentPage:
        """Archive a page from any status."""
        archived = transition_status(page, "archived", self._clock.now_utc())
        logger.info("Archived page %s", archived.id)
        return archived

    def transition(self, page: ContentPage, status: PageStatus) -> ContentPage:
        """Move a page to status; publishing goes through the publish guards."""
        if status == "published":
            return self.publish(page)
        if status == "archived":
            return self.archive(page)
        moved = transition_status(page, status, self._clock.now_utc())
        logger.info("Page %s moved from %s to %s", page.id, page.status, status)
        return moved

    def preview(self, page: ContentPage) -> str:
        """Render a page regardless of its status or validity."""
        return self._renderer.render_page(page)

    # --- Templates ---

    def create_template(
        self,
        name: str,
        category: str,
        created_by: str,
        tenant_id: str,
        *,
        content: Iterable[ContentBlock | Mapping[str, Any]] = (),
        description: str = "",
        is_public: bool = False,
    ) -> ContentTemplate:
        """Create a template owning independent copies of the given blocks."""
        now = self._clock.now_utc()
        blocks = [self._factory.clone(b) for b in _sorted_blocks(_coerce_blocks(content))]
        return ContentTemplate(
            name=name,
            description=description,
            category=category,
            content=_renumber(blocks),
            is_public=is_public,
            created_by=created_by,
            tenant_id=tenant_id,
            created_at=now,
            updated_at=now,
        )

    def template_from_page(
        self,
        page: ContentPage,
        name: str,
        created_by: str,
        *,
        category: str | None = None,
        description: str = "",
        is_public: bool = False,
    ) -> ContentTemplate:
        """Save a page's block sequence as a template in the page's tenant."""
        return self.create_template(
            name,
            category or page.category or "general",
            created_by,
            page.tenant_id,
            content=page.content,
            description=description,
            is_public=is_public,
        )

    def apply_template(
        self,
        page: ContentPage,
        template: ContentTemplate,
        position: int | None = None,
    ) -> ContentPage:
        """
        Insert fresh copies of a template's blocks into a page.

        Every copy gets a new id, so applying the same template twice (or to
        two pages) never produces shared blocks or repeated ids.
        """
        copies = [self._factory.clone(b) for b in _sorted_blocks(template.content)]
        blocks = _sorted_blocks(page.content)
        index = len(blocks) if position is None else position
        blocks[index:index] = copies

        applied = self._with_content(page, blocks)
        logger.info(
            "Applied template %s to page %s (%d blocks)", template.id, page.id, len(copies)
        )
        return applied


# --- Factory ---


def create_content_service(
    *,
    clock: TimePort | None = None,
    ids: IdGeneratorPort | None = None,
    media: MediaResolverPort | None = None,
    config: ContentConfig | None = None,
) -> ContentService:
    """Create a ContentService with default validator and renderer."""
    return ContentService(clock=clock, ids=ids, media=media, config=config)
