"""
Blocks component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from content_engine.domain.entities import BlockKind, ContentBlock

# --- Validation Error ---


@dataclass(frozen=True)
class BlockValidationError:
    """Block construction error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class CreateBlockInput:
    """Input for creating a block from its kind's defaults."""

    kind: BlockKind | str
    content: dict[str, Any] = field(default_factory=dict)
    style: dict[str, Any] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)
    order: int = 0


@dataclass(frozen=True)
class CreateBlocksInput:
    """Input for creating several blocks at once (e.g. a generated draft)."""

    blocks: list[CreateBlockInput]


# --- Output Models ---


@dataclass(frozen=True)
class BlockOutput:
    """Output containing a single created block."""

    block: ContentBlock | None
    errors: list[BlockValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class BlocksOutput:
    """Output containing created blocks, all or nothing."""

    blocks: list[ContentBlock] = field(default_factory=list)
    errors: list[BlockValidationError] = field(default_factory=list)
    success: bool = True
