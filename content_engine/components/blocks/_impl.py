"""
Block registry and factory - default templates per kind and block construction.

Key behaviors:
- Every BlockKind has exactly one default template (content + style)
- Registry lookups hand out fresh copies; the constants are never exposed
- New blocks are the kind's defaults with caller overrides merged on top
- Identifiers come from an injected IdGeneratorPort
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from content_engine.adapters.ids import RandomIdGenerator
from content_engine.domain.entities import BlockKind, ContentBlock, parse_block_kind

from .ports import IdGeneratorPort

logger = logging.getLogger(__name__)


# --- Registry ---


@dataclass(frozen=True)
class BlockTemplate:
    """Default content and style payloads for one block kind."""

    content: Mapping[str, Any]
    style: Mapping[str, Any]

    def copy(self) -> BlockTemplate:
        return BlockTemplate(
            content=copy.deepcopy(dict(self.content)),
            style=copy.deepcopy(dict(self.style)),
        )


def _template(content: dict[str, Any], style: dict[str, Any]) -> BlockTemplate:
    return BlockTemplate(content=MappingProxyType(content), style=MappingProxyType(style))


BLOCK_TEMPLATES: Mapping[BlockKind, BlockTemplate] = MappingProxyType(
    {
        BlockKind.TEXT: _template(
            {
                "text": "Enter your text here...",
                "alignment": "left",
                "fontSize": "16px",
                "color": "#000000",
            },
            {"fontSize": "16px", "lineHeight": "1.6", "color": "#000000"},
        ),
        BlockKind.HEADING: _template(
            {"text": "Heading Text", "level": 2, "alignment": "left"},
            {"fontSize": "24px", "fontWeight": "bold", "color": "#000000"},
        ),
        BlockKind.IMAGE: _template(
            {
                "src": "",
                "alt": "Image description",
                "caption": "",
                "alignment": "center",
                "width": "100%",
            },
            {"maxWidth": "100%", "height": "auto"},
        ),
        BlockKind.VIDEO: _template(
            {"src": "", "poster": "", "controls": True, "autoplay": False, "loop": False},
            {"maxWidth": "100%", "height": "auto"},
        ),
        BlockKind.GALLERY: _template(
            {"images": [], "columns": 3, "spacing": "medium", "showCaptions": True},
            {"display": "grid", "gap": "1rem"},
        ),
        BlockKind.QUOTE: _template(
            {"text": "Enter your quote here...", "author": "", "alignment": "center"},
            {
                "fontSize": "18px",
                "fontStyle": "italic",
                "borderLeft": "4px solid #ccc",
                "paddingLeft": "1rem",
            },
        ),
        BlockKind.CODE: _template(
            {
                "code": "// Enter your code here...",
                "language": "javascript",
                "showLineNumbers": True,
            },
            {
                "fontFamily": "monospace",
                "backgroundColor": "#f5f5f5",
                "padding": "1rem",
                "borderRadius": "4px",
            },
        ),
        BlockKind.EMBED: _template(
            {"url": "", "type": "iframe", "width": "100%", "height": "400px"},
            {"maxWidth": "100%"},
        ),
        BlockKind.FORM: _template(
            {"fields": [], "submitText": "Submit", "action": "", "method": "POST"},
            {"padding": "1rem", "border": "1px solid #ccc", "borderRadius": "4px"},
        ),
        BlockKind.BUTTON: _template(
            {"text": "Click Me", "url": "#", "style": "primary", "size": "medium"},
            {
                "padding": "0.5rem 1rem",
                "backgroundColor": "#007bff",
                "color": "#ffffff",
                "border": "none",
                "borderRadius": "4px",
                "cursor": "pointer",
            },
        ),
        BlockKind.SPACER: _template({"height": "20px"}, {"height": "20px"}),
        BlockKind.DIVIDER: _template(
            {"style": "solid", "color": "#ccc", "thickness": "1px"},
            {"borderTop": "1px solid #ccc", "margin": "1rem 0"},
        ),
    }
)


def defaults_for(kind: BlockKind | str) -> BlockTemplate:
    """
    Get an independent copy of the default template for a kind.

    Raises:
        UnknownBlockKindError: If kind is not a registered BlockKind.
    """
    return BLOCK_TEMPLATES[parse_block_kind(kind)].copy()


def registered_kinds() -> list[BlockKind]:
    """List registered kinds in declaration order."""
    return list(BLOCK_TEMPLATES)


# --- Merge ---


def shallow_merge(
    base: Mapping[str, Any],
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Merge overrides onto base, one level deep.

    Override keys win; keys missing from overrides keep the base value.
    Nested values are replaced wholesale, never merged. Neither input is
    mutated.
    """
    merged = dict(base)
    if overrides:
        merged.update(overrides)
    return merged


# --- Factory ---


class BlockFactory:
    """
    Builds ContentBlocks from registry defaults.

    The only side effect is drawing identifiers from the id generator.
    """

    def __init__(self, ids: IdGeneratorPort | None = None) -> None:
        self._ids = ids or RandomIdGenerator("block")

    def create(
        self,
        kind: BlockKind | str,
        content: Mapping[str, Any] | None = None,
        style: Mapping[str, Any] | None = None,
        *,
        metadata: Mapping[str, Any] | None = None,
        order: int = 0,
    ) -> ContentBlock:
        """
        Create a block of the given kind.

        Raises:
            UnknownBlockKindError: If kind is not a registered BlockKind.
        """
        block_kind = parse_block_kind(kind)
        defaults = defaults_for(block_kind)

        block = ContentBlock(
            id=self._ids.next(),
            kind=block_kind,
            content=shallow_merge(defaults.content, content),
            style=shallow_merge(defaults.style, style),
            order=order,
            metadata=dict(metadata or {}),
        )
        logger.debug("Created %s block %s", block.kind.value, block.id)
        return block

    def clone(self, block: ContentBlock) -> ContentBlock:
        """Deep copy a block under a fresh identifier."""
        return ContentBlock(
            id=self._ids.next(),
            kind=block.kind,
            content=copy.deepcopy(block.content),
            style=copy.deepcopy(block.style),
            order=block.order,
            metadata=copy.deepcopy(block.metadata),
        )


_default_factory = BlockFactory()


def create_block(
    kind: BlockKind | str,
    content: Mapping[str, Any] | None = None,
    style: Mapping[str, Any] | None = None,
    *,
    metadata: Mapping[str, Any] | None = None,
    order: int = 0,
) -> ContentBlock:
    """Create a block with the process-wide random id generator."""
    return _default_factory.create(kind, content, style, metadata=metadata, order=order)
