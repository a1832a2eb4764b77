"""
Blocks component - block registry and factory.

Builds ContentBlocks from the default template of their kind, with caller
overrides merged on top.

Invariants:
- I1: Every block kind exists in the registry; unknown kinds are rejected
- I2: Overrides win over defaults key by key; other keys keep defaults
- I3: Block ids are unique for the lifetime of the process
"""

from __future__ import annotations

from content_engine.adapters.ids import RandomIdGenerator
from content_engine.domain.entities import ContentBlock, UnknownBlockKindError

from ._impl import BlockFactory
from .models import (
    BlockOutput,
    BlocksOutput,
    BlockValidationError,
    CreateBlockInput,
    CreateBlocksInput,
)
from .ports import IdGeneratorPort, RulesPort


def _create_factory(
    ids: IdGeneratorPort | None,
    rules: RulesPort | None,
) -> BlockFactory:
    """Create block factory from ports."""
    if ids is None:
        prefix = rules.get_block_id_prefix() if rules else "block"
        ids = RandomIdGenerator(prefix)
    return BlockFactory(ids)


def _unknown_kind_error(
    error: UnknownBlockKindError,
    index: int | None = None,
) -> BlockValidationError:
    field_name = "kind" if index is None else f"blocks[{index}].kind"
    return BlockValidationError(
        code="unknown_block_kind",
        message=str(error),
        field=field_name,
    )


def _build(factory: BlockFactory, inp: CreateBlockInput) -> ContentBlock:
    return factory.create(
        inp.kind,
        inp.content,
        inp.style,
        metadata=inp.metadata,
        order=inp.order,
    )


# --- Component Entry Points ---


def run_create_block(
    inp: CreateBlockInput,
    *,
    ids: IdGeneratorPort | None = None,
    rules: RulesPort | None = None,
) -> BlockOutput:
    """
    Create a block from registry defaults.

    Args:
        inp: Input containing kind and overrides.
        ids: Optional id generator; defaults to random prefixed ids.
        rules: Optional rules port for the id prefix.

    Returns:
        BlockOutput with the block, or an unknown_block_kind error.
    """
    factory = _create_factory(ids, rules)

    try:
        block = _build(factory, inp)
    except UnknownBlockKindError as e:
        return BlockOutput(block=None, errors=[_unknown_kind_error(e)], success=False)

    return BlockOutput(block=block, errors=[], success=True)


def run_create_blocks(
    inp: CreateBlocksInput,
    *,
    ids: IdGeneratorPort | None = None,
    rules: RulesPort | None = None,
) -> BlocksOutput:
    """
    Create several blocks; any unknown kind rejects the whole batch.

    Every unknown kind is reported, not just the first.
    """
    factory = _create_factory(ids, rules)
    blocks: list[ContentBlock] = []
    errors: list[BlockValidationError] = []

    for index, item in enumerate(inp.blocks):
        try:
            blocks.append(_build(factory, item))
        except UnknownBlockKindError as e:
            errors.append(_unknown_kind_error(e, index))

    if errors:
        return BlocksOutput(blocks=[], errors=errors, success=False)

    return BlocksOutput(blocks=blocks, errors=[], success=True)


def run(
    inp: CreateBlockInput | CreateBlocksInput,
    *,
    ids: IdGeneratorPort | None = None,
    rules: RulesPort | None = None,
) -> BlockOutput | BlocksOutput:
    """
    Main entry point for the blocks component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, CreateBlockInput):
        return run_create_block(inp, ids=ids, rules=rules)
    elif isinstance(inp, CreateBlocksInput):
        return run_create_blocks(inp, ids=ids, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
