"""
Render component - block sequence to HTML.

Invariants:
- I1: Rendering never fails; malformed blocks degrade to a generic fragment
- I2: Output order follows block order, ties keep insertion order
- I3: Same input renders to byte-identical output
- I4: Interpolated text and attributes are escaped unless rules disable it
"""

from __future__ import annotations

from ._impl import BlockRenderer, RenderConfig
from .models import RenderBlocksInput, RenderOutput, RenderPageInput
from .ports import RulesPort


def build_render_config(rules: RulesPort | None) -> RenderConfig:
    """Build render config from rules port."""
    if rules is None:
        return RenderConfig()
    return RenderConfig(
        escape_html=rules.get_escape_html(),
        fragment_separator=rules.get_fragment_separator(),
        forbidden_protocols=frozenset(p.lower() for p in rules.get_forbidden_protocols()),
    )


# --- Component Entry Points ---


def run_render(
    inp: RenderBlocksInput,
    *,
    rules: RulesPort | None = None,
) -> RenderOutput:
    """
    Render a block sequence to HTML.

    Args:
        inp: Input containing the blocks.
        rules: Optional rules port for render configuration.

    Returns:
        RenderOutput with the HTML document.
    """
    renderer = BlockRenderer(build_render_config(rules))
    return RenderOutput(html=renderer.render(inp.blocks), errors=[], success=True)


def run_render_page(
    inp: RenderPageInput,
    *,
    rules: RulesPort | None = None,
) -> RenderOutput:
    """Render a page's content to HTML."""
    renderer = BlockRenderer(build_render_config(rules))
    return RenderOutput(html=renderer.render_page(inp.page), errors=[], success=True)


def run(
    inp: RenderBlocksInput | RenderPageInput,
    *,
    rules: RulesPort | None = None,
) -> RenderOutput:
    """
    Main entry point for the render component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, RenderBlocksInput):
        return run_render(inp, rules=rules)
    elif isinstance(inp, RenderPageInput):
        return run_render_page(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
