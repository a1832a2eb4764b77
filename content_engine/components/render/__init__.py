"""
Render component - block sequence to HTML.
"""

from ._impl import (
    BLOCK_RENDERERS,
    DEFAULT_RENDER_CONFIG,
    BlockRenderer,
    RenderConfig,
    create_block_renderer,
    inline_style,
    render_block,
    render_blocks,
    render_generic,
)
from .component import build_render_config, run, run_render, run_render_page
from .models import RenderBlocksInput, RenderOutput, RenderPageInput, RenderValidationError
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_render",
    "run_render_page",
    "build_render_config",
    # Input models
    "RenderBlocksInput",
    "RenderPageInput",
    # Output models
    "RenderOutput",
    "RenderValidationError",
    # Ports
    "RulesPort",
    # Renderer
    "BLOCK_RENDERERS",
    "DEFAULT_RENDER_CONFIG",
    "BlockRenderer",
    "RenderConfig",
    "create_block_renderer",
    "inline_style",
    "render_block",
    "render_blocks",
    "render_generic",
]
