"""
Content component - page lifecycle, block authoring and templates.
"""

from ._impl import (
    BlockNotFoundError,
    ContentConfig,
    ContentService,
    ContentValidationError,
    PublishGuardError,
    create_content_service,
    extract_media_references,
    validate_page_fields,
)
from .component import (
    build_content_config,
    run,
    run_add_block,
    run_apply_template,
    run_create_page,
    run_create_template,
    run_move_block,
    run_preview,
    run_publish,
    run_remove_block,
    run_reorder_blocks,
    run_transition,
    run_update_page,
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
from .ports import MediaResolverPort, RulesPort, TimePort

__all__ = [
    # Entry points
    "run",
    "run_add_block",
    "run_apply_template",
    "run_create_page",
    "run_create_template",
    "run_move_block",
    "run_preview",
    "run_publish",
    "run_remove_block",
    "run_reorder_blocks",
    "run_transition",
    "run_update_page",
    "build_content_config",
    # Input models
    "AddBlockInput",
    "ApplyTemplateInput",
    "CreatePageInput",
    "CreateTemplateInput",
    "MoveBlockInput",
    "PreviewPageInput",
    "RemoveBlockInput",
    "ReorderBlocksInput",
    "TransitionPageInput",
    "UpdatePageInput",
    # Output models
    "ContentOperationOutput",
    "ContentValidationError",
    "PreviewOutput",
    "TemplateOutput",
    # Ports
    "MediaResolverPort",
    "RulesPort",
    "TimePort",
    # Service
    "BlockNotFoundError",
    "ContentConfig",
    "ContentService",
    "PublishGuardError",
    "create_content_service",
    "extract_media_references",
    "validate_page_fields",
]
