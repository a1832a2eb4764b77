"""
Content component - page lifecycle, block authoring and templates.

Manages pages as aggregates of ordered blocks. Every entry point takes the
aggregate it works on and returns a new one; failures come back as errors
on the output rather than exceptions.

State Machine:
- draft → published (guarded)
- draft|published → archived
- published → draft (unpublish), archived → draft (restore)

Guards:
- G1: publish requires a title and a well-formed slug
- G2: publish requires block validation to pass
- G3: publish requires media references to resolve
"""

from __future__ import annotations

from collections.abc import Callable

from content_engine.adapters.ids import RandomIdGenerator
from content_engine.components.render import BlockRenderer, build_render_config
from content_engine.components.validation import ContentValidator, build_validator_config
from content_engine.domain.entities import ContentPage, UnknownBlockKindError
from content_engine.domain.state import InvalidTransitionError

from ._impl import (
    BlockNotFoundError,
    ContentConfig,
    ContentService,
    ContentValidationError,
    PublishGuardError,
    validate_page_fields,
)
from .models import (
    AddBlockInput,
    ApplyTemplateInput,
    ContentOperationOutput,
    CreatePageInput,
    CreateTemplateInput,
    MoveBlockInput,
    PreviewOutput,
    PreviewPageInput,
    RemoveBlockInput,
    ReorderBlocksInput,
    TemplateOutput,
    TransitionPageInput,
    UpdatePageInput,
)
from .ports import IdGeneratorPort, MediaResolverPort, RulesPort, TimePort


def build_content_config(rules: RulesPort | None) -> ContentConfig:
    """Build content config from rules port."""
    if rules is None:
        return ContentConfig()
    return ContentConfig(
        slug_pattern=rules.get_slug_pattern(),
        slug_min_length=rules.get_slug_min_length(),
        slug_max_length=rules.get_slug_max_length(),
        title_min_length=rules.get_title_min_length(),
        title_max_length=rules.get_title_max_length(),
        require_valid_content_to_publish=rules.get_require_valid_content_to_publish(),
        block_publish_if_missing_media=rules.get_block_publish_if_missing_media(),
    )


def _create_service(
    time: TimePort | None,
    ids: IdGeneratorPort | None,
    media: MediaResolverPort | None,
    rules: RulesPort | None,
) -> ContentService:
    """Create content service from ports."""
    if ids is None and rules is not None:
        ids = RandomIdGenerator(rules.get_block_id_prefix())
    return ContentService(
        clock=time,
        ids=ids,
        validator=ContentValidator(build_validator_config(rules)),
        renderer=BlockRenderer(build_render_config(rules)),
        media=media,
        config=build_content_config(rules),
    )


def _error_for(error: Exception) -> list[ContentValidationError]:
    """Convert a content engine exception into output errors."""
    if isinstance(error, PublishGuardError):
        return list(error.findings)
    if isinstance(error, BlockNotFoundError):
        return [
            ContentValidationError(
                code="block_not_found",
                message=str(error),
                field="content",
                block_id=error.block_id,
            )
        ]
    if isinstance(error, UnknownBlockKindError):
        return [
            ContentValidationError(
                code="unknown_block_kind",
                message=str(error),
                field="content",
            )
        ]
    if isinstance(error, InvalidTransitionError):
        return [
            ContentValidationError(
                code="invalid_transition",
                message=str(error),
                field="status",
            )
        ]
    return [ContentValidationError(code="invalid_input", message=str(error))]


def _page_operation(operation: Callable[[], ContentPage]) -> ContentOperationOutput:
    # ValueError covers pydantic ValidationError from rebuilt pages
    try:
        page = operation()
    except (
        BlockNotFoundError,
        UnknownBlockKindError,
        InvalidTransitionError,
        PublishGuardError,
        ValueError,
    ) as e:
        return ContentOperationOutput(page=None, errors=_error_for(e), success=False)
    return ContentOperationOutput(page=page, errors=[], success=True)


# --- Component Entry Points ---


def run_create_page(
    inp: CreatePageInput,
    *,
    time: TimePort | None = None,
    ids: IdGeneratorPort | None = None,
    rules: RulesPort | None = None,
) -> ContentOperationOutput:
    """
    Create a draft page.

    Args:
        inp: Input containing page fields and initial blocks.
        time: Time port for timestamps.
        ids: Id generator port.
        rules: Rules port for field limits.

    Returns:
        ContentOperationOutput with the created page or errors.
    """
    service = _create_service(time, ids, None, rules)
    result = _page_operation(
        lambda: service.create_page(
            inp.title,
            inp.author_id,
            inp.tenant_id,
            slug=inp.slug,
            description=inp.description,
            content=inp.content,
            tags=inp.tags,
            category=inp.category,
            seo=inp.seo,
        )
    )
    if result.page is None:
        return result

    errors = validate_page_fields(result.page, build_content_config(rules))
    if errors:
        return ContentOperationOutput(page=None, errors=errors, success=False)
    return result


def run_update_page(
    inp: UpdatePageInput,
    *,
    time: TimePort | None = None,
    rules: RulesPort | None = None,
) -> ContentOperationOutput:
    """
    Update page fields. Status and id are ignored; use transitions.

    Returns:
        ContentOperationOutput with the updated page or errors.
    """
    service = _create_service(time, None, None, rules)
    result = _page_operation(lambda: service.update_page(inp.page, inp.updates))
    if result.page is None:
        return result

    errors = validate_page_fields(result.page, build_content_config(rules))
    if errors:
        return ContentOperationOutput(page=None, errors=errors, success=False)
    return result


def run_add_block(
    inp: AddBlockInput,
    *,
    time: TimePort | None = None,
) -> ContentOperationOutput:
    """Insert a block into a page."""
    service = _create_service(time, None, None, None)
    return _page_operation(lambda: service.add_block(inp.page, inp.block, inp.position))


def run_remove_block(
    inp: RemoveBlockInput,
    *,
    time: TimePort | None = None,
) -> ContentOperationOutput:
    """Remove a block from a page."""
    service = _create_service(time, None, None, None)
    return _page_operation(lambda: service.remove_block(inp.page, inp.block_id))


def run_move_block(
    inp: MoveBlockInput,
    *,
    time: TimePort | None = None,
) -> ContentOperationOutput:
    """Move a block to a new index."""
    service = _create_service(time, None, None, None)
    return _page_operation(lambda: service.move_block(inp.page, inp.block_id, inp.index))


def run_reorder_blocks(
    inp: ReorderBlocksInput,
    *,
    time: TimePort | None = None,
) -> ContentOperationOutput:
    """Reorder a page's blocks by id."""
    service = _create_service(time, None, None, None)
    return _page_operation(lambda: service.reorder_blocks(inp.page, inp.block_ids))


def run_transition(
    inp: TransitionPageInput,
    *,
    time: TimePort | None = None,
    media: MediaResolverPort | None = None,
    rules: RulesPort | None = None,
) -> ContentOperationOutput:
    """
    Transition a page to a new status.

    Publishing goes through the publish guards.

    Args:
        inp: Input containing the page and target status.
        time: Time port for timestamps.
        media: Optional media resolver for the missing media guard.
        rules: Rules port for guard configuration.

    Returns:
        ContentOperationOutput with the transitioned page or errors.
    """
    service = _create_service(time, None, media, rules)
    return _page_operation(lambda: service.transition(inp.page, inp.to_status))


def run_publish(
    inp: TransitionPageInput,
    *,
    time: TimePort | None = None,
    media: MediaResolverPort | None = None,
    rules: RulesPort | None = None,
) -> ContentOperationOutput:
    """Publish a page (to_status is ignored)."""
    service = _create_service(time, None, media, rules)
    return _page_operation(lambda: service.publish(inp.page))


def run_create_template(
    inp: CreateTemplateInput,
    *,
    time: TimePort | None = None,
    ids: IdGeneratorPort | None = None,
    rules: RulesPort | None = None,
) -> TemplateOutput:
    """Create a template owning copies of the given blocks."""
    service = _create_service(time, ids, None, rules)
    try:
        template = service.create_template(
            inp.name,
            inp.category,
            inp.created_by,
            inp.tenant_id,
            content=inp.content,
            description=inp.description,
            is_public=inp.is_public,
        )
    except (UnknownBlockKindError, ValueError) as e:
        return TemplateOutput(template=None, errors=_error_for(e), success=False)
    return TemplateOutput(template=template, errors=[], success=True)


def run_apply_template(
    inp: ApplyTemplateInput,
    *,
    time: TimePort | None = None,
    ids: IdGeneratorPort | None = None,
    rules: RulesPort | None = None,
) -> ContentOperationOutput:
    """
    Apply a template to a page.

    Blocks are copied under fresh ids; the template is not modified.
    """
    service = _create_service(time, ids, None, rules)
    return _page_operation(
        lambda: service.apply_template(inp.page, inp.template, inp.position)
    )


def run_preview(
    inp: PreviewPageInput,
    *,
    media: MediaResolverPort | None = None,
    rules: RulesPort | None = None,
) -> PreviewOutput:
    """
    Render a page for preview, with the findings that would block publishing.

    Previews always render, so success does not depend on the findings.
    """
    service = _create_service(None, None, media, rules)
    return PreviewOutput(
        html=service.preview(inp.page),
        findings=service.check_publish_guards(inp.page),
        errors=[],
        success=True,
    )


def run(
    inp: (
        CreatePageInput
        | UpdatePageInput
        | AddBlockInput
        | RemoveBlockInput
        | MoveBlockInput
        | ReorderBlocksInput
        | TransitionPageInput
        | CreateTemplateInput
        | ApplyTemplateInput
        | PreviewPageInput
    ),
    *,
    time: TimePort | None = None,
    ids: IdGeneratorPort | None = None,
    media: MediaResolverPort | None = None,
    rules: RulesPort | None = None,
) -> ContentOperationOutput | TemplateOutput | PreviewOutput:
    """
    Main entry point for the content component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, CreatePageInput):
        return run_create_page(inp, time=time, ids=ids, rules=rules)
    elif isinstance(inp, UpdatePageInput):
        return run_update_page(inp, time=time, rules=rules)
    elif isinstance(inp, AddBlockInput):
        return run_add_block(inp, time=time)
    elif isinstance(inp, RemoveBlockInput):
        return run_remove_block(inp, time=time)
    elif isinstance(inp, MoveBlockInput):
        return run_move_block(inp, time=time)
    elif isinstance(inp, ReorderBlocksInput):
        return run_reorder_blocks(inp, time=time)
    elif isinstance(inp, TransitionPageInput):
        return run_transition(inp, time=time, media=media, rules=rules)
    elif isinstance(inp, CreateTemplateInput):
        return run_create_template(inp, time=time, ids=ids, rules=rules)
    elif isinstance(inp, ApplyTemplateInput):
        return run_apply_template(inp, time=time, ids=ids, rules=rules)
    elif isinstance(inp, PreviewPageInput):
        return run_preview(inp, media=media, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
