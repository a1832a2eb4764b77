"""
Blocks component - block registry and factory.
"""

from content_engine.domain.entities import (
    BlockKind,
    ContentBlock,
    UnknownBlockKindError,
    parse_block_kind,
)

from ._impl import (
    BLOCK_TEMPLATES,
    BlockFactory,
    BlockTemplate,
    create_block,
    defaults_for,
    registered_kinds,
    shallow_merge,
)
from .component import (
    run,
    run_create_block,
    run_create_blocks,
)
from .models import (
    BlockOutput,
    BlocksOutput,
    BlockValidationError,
    CreateBlockInput,
    CreateBlocksInput,
)
from .ports import IdGeneratorPort, RulesPort

__all__ = [
    # Entry points
    "run",
    "run_create_block",
    "run_create_blocks",
    # Input models
    "CreateBlockInput",
    "CreateBlocksInput",
    # Output models
    "BlockOutput",
    "BlocksOutput",
    "BlockValidationError",
    # Ports
    "IdGeneratorPort",
    "RulesPort",
    # Registry and factory
    "BLOCK_TEMPLATES",
    "BlockFactory",
    "BlockTemplate",
    "create_block",
    "defaults_for",
    "registered_kinds",
    "shallow_merge",
    # Domain re-exports
    "BlockKind",
    "ContentBlock",
    "UnknownBlockKindError",
    "parse_block_kind",
]
