from collections.abc import Mapping
from enum import Enum
from typing import Any, NamedTuple

from content_engine.domain.entities import ContentBlock

UNKNOWN_BLOCK_ID = "<unknown>"


class BlockView(NamedTuple):
    """
    Read-only view over a typed ContentBlock or a raw block mapping.

    Raw mappings come from JSON payloads and generated content, so every
    field may be missing or mistyped. Consumers that must never fail
    (validation, rendering) inspect blocks through this view.
    """

    id: str
    kind: str | None
    content: Any
    order: int | float
    style: Any


def _coerce_order(value: Any) -> int | float:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int | float) and value == value:  # NaN sorts unpredictably
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


def _label(value: Any, fallback: str) -> str:
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception:  # deeply nested or oversized values
        return fallback


def view_block(block: Any) -> BlockView:
    if isinstance(block, ContentBlock):
        return BlockView(
            id=block.id,
            kind=block.kind.value,
            content=block.content,
            order=block.order,
            style=block.style,
        )

    if not isinstance(block, Mapping):
        return BlockView(id=UNKNOWN_BLOCK_ID, kind=None, content=None, order=0, style=None)

    kind = block.get("kind", block.get("type"))
    if isinstance(kind, Enum):
        kind = kind.value
    if kind is not None:
        kind = _label(kind, "<invalid>")

    block_id = block.get("id")
    if block_id in (None, ""):
        block_id = UNKNOWN_BLOCK_ID
    return BlockView(
        id=_label(block_id, UNKNOWN_BLOCK_ID),
        kind=kind or None,
        content=block.get("content"),
        order=_coerce_order(block.get("order", 0)),
        style=block.get("style", block.get("styles")),
    )
