"""
Block Renderer - serialize an ordered block sequence to HTML.

Key behaviors:
- Blocks are stable-sorted by order (ties keep insertion order)
- Each block becomes one fragment; fragments are joined with a newline
- Style maps become an inline style attribute ("key: value" joined by "; ")
- Interpolated text and attribute values are HTML-escaped
- Rendering never fails: unknown kinds and malformed content fall back to a
  generic container holding the content as JSON
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from content_engine.domain.blocks import BlockView, view_block
from content_engine.domain.entities import BlockKind, ContentPage
from content_engine.domain.sanitize import (
    DEFAULT_FORBIDDEN_PROTOCOLS,
    escape_attr,
    escape_text,
    is_safe_url,
    to_text,
)

logger = logging.getLogger(__name__)

# --- Configuration ---


@dataclass(frozen=True)
class RenderConfig:
    """Rendering configuration."""

    escape_html: bool = True
    fragment_separator: str = "\n"
    forbidden_protocols: frozenset[str] = field(
        default_factory=lambda: DEFAULT_FORBIDDEN_PROTOCOLS
    )


DEFAULT_RENDER_CONFIG = RenderConfig()


# --- Helpers ---


def inline_style(style: Any) -> str:
    """Join a style map into 'key: value; key: value' in map order."""
    if not isinstance(style, Mapping):
        return ""
    return "; ".join(f"{key}: {to_text(value)}" for key, value in style.items())


def _text(content: Mapping[str, Any], key: str, config: RenderConfig) -> str:
    return escape_text(content.get(key), config.escape_html)


def _attr(content: Mapping[str, Any], key: str, config: RenderConfig) -> str:
    return escape_attr(content.get(key), config.escape_html)


def _url(
    content: Mapping[str, Any],
    key: str,
    config: RenderConfig,
    default: str = "",
) -> str:
    url = to_text(content.get(key)) or default
    if not is_safe_url(url, config.forbidden_protocols):
        url = default
    return escape_attr(url, config.escape_html)


def _heading_level(value: Any) -> int:
    if isinstance(value, bool):
        return 2
    try:
        level = int(value) if value not in (None, "") else 2
    except (TypeError, ValueError, OverflowError):
        return 2
    if level < 1:
        return 2
    return min(6, level)


def _content_json(content: Any) -> str:
    try:
        return json.dumps(content, separators=(",", ":"), ensure_ascii=False, default=str)
    except RecursionError:
        return "{}"
    except (TypeError, ValueError):
        # Circular structures or keys json cannot represent
        pass
    try:
        return json.dumps(to_text(content))
    except RecursionError:
        return "{}"


# --- Block Renderers ---


def render_text(content: Mapping[str, Any], style: str, config: RenderConfig) -> str:
    """Render a text block as a paragraph."""
    return f'<p style="{style}">{_text(content, "text", config)}</p>'


def render_heading(content: Mapping[str, Any], style: str, config: RenderConfig) -> str:
    """Render a heading block at content.level (default 2)."""
    level = _heading_level(content.get("level"))
    return f'<h{level} style="{style}">{_text(content, "text", config)}</h{level}>'


def render_image(content: Mapping[str, Any], style: str, config: RenderConfig) -> str:
    """Render an image block."""
    src = _url(content, "src", config)
    alt = _attr(content, "alt", config)
    return f'<img src="{src}" alt="{alt}" style="{style}" />'


def render_video(content: Mapping[str, Any], style: str, config: RenderConfig) -> str:
    """Render a video block."""
    src = _url(content, "src", config)
    poster = _url(content, "poster", config)
    controls = "true" if content.get("controls") else "false"
    return (
        f'<video src="{src}" poster="{poster}" controls="{controls}" '
        f'style="{style}"></video>'
    )


def render_quote(content: Mapping[str, Any], style: str, config: RenderConfig) -> str:
    """Render a quote block with an optional citation."""
    text = _text(content, "text", config)
    cite = ""
    if content.get("author"):
        cite = f"<cite>{_text(content, 'author', config)}</cite>"
    return f'<blockquote style="{style}">{text}{cite}</blockquote>'


def render_code(content: Mapping[str, Any], style: str, config: RenderConfig) -> str:
    """Render a code block."""
    return f'<pre><code style="{style}">{_text(content, "code", config)}</code></pre>'


def render_button(content: Mapping[str, Any], style: str, config: RenderConfig) -> str:
    """Render a button block as a link (url defaults to '#')."""
    href = _url(content, "url", config, default="#")
    return f'<a href="{href}" style="{style}">{_text(content, "text", config)}</a>'


def render_spacer(content: Mapping[str, Any], style: str, config: RenderConfig) -> str:
    """Render a spacer."""
    return f'<div style="{style}"></div>'


def render_divider(content: Mapping[str, Any], style: str, config: RenderConfig) -> str:
    """Render a horizontal rule."""
    return f'<hr style="{style}" />'


def render_generic(content: Any, style: str, config: RenderConfig) -> str:
    """Render any block as a container holding its content as JSON."""
    body = escape_text(_content_json(content), config.escape_html)
    return f'<div style="{style}">{body}</div>'


# --- Kind Dispatch ---

BlockRendererFn = Callable[[Mapping[str, Any], str, RenderConfig], str]

# Every BlockKind has an entry; gallery, embed and form use the generic container.
BLOCK_RENDERERS: dict[BlockKind, BlockRendererFn] = {
    BlockKind.TEXT: render_text,
    BlockKind.HEADING: render_heading,
    BlockKind.IMAGE: render_image,
    BlockKind.VIDEO: render_video,
    BlockKind.GALLERY: render_generic,
    BlockKind.QUOTE: render_quote,
    BlockKind.CODE: render_code,
    BlockKind.EMBED: render_generic,
    BlockKind.FORM: render_generic,
    BlockKind.BUTTON: render_button,
    BlockKind.SPACER: render_spacer,
    BlockKind.DIVIDER: render_divider,
}

_RENDERERS_BY_VALUE: dict[str, BlockRendererFn] = {
    kind.value: fn for kind, fn in BLOCK_RENDERERS.items()
}


def render_block(block: Any, config: RenderConfig = DEFAULT_RENDER_CONFIG) -> str:
    """Render a single block (typed or raw mapping) to one fragment."""
    return _render_view(view_block(block), config)


def _render_view(view: BlockView, config: RenderConfig) -> str:
    renderer = _RENDERERS_BY_VALUE.get(view.kind or "")
    if renderer is None:
        logger.debug("No renderer for kind %r (block %s)", view.kind, view.id)
    if renderer is None or not isinstance(view.content, Mapping):
        renderer = render_generic

    try:
        style = escape_attr(inline_style(view.style), config.escape_html)
    except Exception:
        logger.warning("Style of block %s is unusable, dropping it", view.id, exc_info=True)
        style = ""

    try:
        return renderer(view.content, style, config)
    except Exception:
        logger.warning("Rendering block %s failed, using fallback", view.id, exc_info=True)
        # render_generic cannot raise: _content_json always returns a string
        return render_generic(view.content, style, config)


def render_blocks(
    blocks: Iterable[Any],
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> str:
    """
    Render an ordered block sequence to HTML.

    Args:
        blocks: ContentBlocks or raw block mappings, in insertion order
        config: Rendering configuration

    Returns:
        Fragments joined by the configured separator ("" for no blocks)
    """
    views = sorted((view_block(block) for block in blocks), key=lambda v: v.order)
    return config.fragment_separator.join(_render_view(view, config) for view in views)


# --- Block Renderer Service ---


class BlockRenderer:
    """
    Block renderer service.

    Stateless; safe to share between threads.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config or DEFAULT_RENDER_CONFIG

    def render(self, blocks: Iterable[Any]) -> str:
        """Render a block sequence to HTML."""
        return render_blocks(blocks, self._config)

    def render_block(self, block: Any) -> str:
        """Render a single block."""
        return render_block(block, self._config)

    def render_page(self, page: ContentPage) -> str:
        """Render a page's content."""
        return render_blocks(page.content, self._config)


# --- Factory ---


def create_block_renderer(config: RenderConfig | None = None) -> BlockRenderer:
    """Create a BlockRenderer."""
    return BlockRenderer(config=config)
