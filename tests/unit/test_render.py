"""
Renderer tests: per-kind output, escaping and fallback.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from content_engine.components.blocks import BlockFactory
from content_engine.components.render import (
    BlockRenderer,
    RenderBlocksInput,
    RenderConfig,
    RenderPageInput,
    inline_style,
    render_block,
    render_blocks,
    run,
    run_render,
    run_render_page,
)
from content_engine.domain.entities import ContentBlock, ContentPage


def raw(kind: str, content: dict, style: dict | None = None, order: int = 0) -> dict:
    return {
        "id": f"{kind}-1",
        "type": kind,
        "content": content,
        "style": style or {},
        "order": order,
    }


class TestInlineStyle:
    def test_joins_in_map_order(self) -> None:
        assert inline_style({"fontSize": "16px", "color": "#000"}) == "fontSize: 16px; color: #000"

    def test_empty_and_invalid(self) -> None:
        assert inline_style({}) == ""
        assert inline_style(None) == ""
        assert inline_style("color: red") == ""


class TestBlockRenderers:
    """One fragment per kind."""

    def test_text(self) -> None:
        html = render_block(raw("text", {"text": "Hello"}, {"color": "red"}))
        assert html == '<p style="color: red">Hello</p>'

    def test_heading_levels(self) -> None:
        assert render_block(raw("heading", {"text": "T", "level": 1})) == '<h1 style="">T</h1>'
        assert render_block(raw("heading", {"text": "T"})) == '<h2 style="">T</h2>'
        assert render_block(raw("heading", {"text": "T", "level": 9})) == '<h6 style="">T</h6>'
        assert render_block(raw("heading", {"text": "T", "level": "x"})) == '<h2 style="">T</h2>'

    @pytest.mark.parametrize("level", [0, -3, "0"])
    def test_heading_non_positive_level_uses_default(self, level) -> None:
        html = render_block(raw("heading", {"text": "T", "level": level}))
        assert html == '<h2 style="">T</h2>'

    def test_image(self) -> None:
        html = render_block(raw("image", {"src": "/a.png", "alt": "A cat"}))
        assert html == '<img src="/a.png" alt="A cat" style="" />'

    def test_video(self) -> None:
        html = render_block(raw("video", {"src": "/v.mp4", "poster": "/p.png", "controls": True}))
        assert html == '<video src="/v.mp4" poster="/p.png" controls="true" style=""></video>'

    def test_quote_with_and_without_author(self) -> None:
        assert (
            render_block(raw("quote", {"text": "Q", "author": "Ada"}))
            == '<blockquote style="">Q<cite>Ada</cite></blockquote>'
        )
        assert render_block(raw("quote", {"text": "Q"})) == '<blockquote style="">Q</blockquote>'

    def test_code(self) -> None:
        html = render_block(raw("code", {"code": "x = 1"}))
        assert html == '<pre><code style="">x = 1</code></pre>'

    def test_button_defaults_to_hash(self) -> None:
        assert render_block(raw("button", {"text": "Go"})) == '<a href="#" style="">Go</a>'
        assert render_block(raw("button", {"text": "Go", "url": "/buy"})) == (
            '<a href="/buy" style="">Go</a>'
        )

    def test_spacer_and_divider(self) -> None:
        assert render_block(raw("spacer", {}, {"height": "20px"})) == (
            '<div style="height: 20px"></div>'
        )
        assert render_block(raw("divider", {})) == '<hr style="" />'

    @pytest.mark.parametrize("kind", ["gallery", "embed", "form"])
    def test_generic_kinds_render_json(self, kind: str) -> None:
        html = render_block(raw(kind, {"a": 1}))
        assert html == '<div style="">{"a":1}</div>'

    def test_factory_defaults_render(self, factory: BlockFactory) -> None:
        html = render_block(factory.create("text"))
        assert html == (
            '<p style="fontSize: 16px; lineHeight: 1.6; color: #000000">'
            "Enter your text here...</p>"
        )


class TestEscaping:
    def test_text_is_escaped(self) -> None:
        html = render_block(raw("text", {"text": "<script>alert(1)</script>"}))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_attributes_are_escaped(self) -> None:
        html = render_block(raw("image", {"src": "/a.png", "alt": 'x" onerror="evil()'}))
        assert 'alt="x&quot; onerror=&quot;evil()"' in html

    def test_forbidden_protocols_are_dropped(self) -> None:
        html = render_block(raw("button", {"text": "Go", "url": " JavaScript:alert(1)"}))
        assert html == '<a href="#" style="">Go</a>'
        assert render_block(raw("image", {"src": "data:text/html,x"})).startswith('<img src=""')

    def test_escaping_can_be_disabled(self) -> None:
        config = RenderConfig(escape_html=False)
        html = render_block(raw("text", {"text": "<b>bold</b>"}), config)
        assert html == '<p style=""><b>bold</b></p>'


class TestFallback:
    def test_unknown_kind(self) -> None:
        html = render_block({"id": "x", "type": "carousel", "content": {"slides": 2}})
        assert html == '<div style="">{"slides":2}</div>'

    def test_missing_content(self) -> None:
        assert render_block({"id": "x", "type": "text"}) == '<div style="">null</div>'

    def test_deeply_nested_values(self) -> None:
        deep: dict = {}
        for _ in range(5000):
            deep = {"a": deep}

        assert render_block(raw("gallery", {"a": deep})) == '<div style="">{}</div>'
        assert render_block(raw("text", {"text": deep})) == '<div style="">{}</div>'
        assert render_block(raw("text", {"text": "Hi"}, {"color": deep})) == (
            '<p style="">Hi</p>'
        )

    def test_non_mapping_block(self) -> None:
        assert render_block(None) == '<div style="">null</div>'

    def test_renderer_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch.dict(
            "content_engine.components.render._impl._RENDERERS_BY_VALUE",
            {"text": lambda content, style, config: 1 / 0},
        ):
            with caplog.at_level(logging.WARNING):
                html = render_block({"id": "x", "type": "text", "content": {"a": 1}})
        assert html == '<div style="">{"a":1}</div>'
        assert "Rendering block x failed" in caplog.text


class TestRenderBlocks:
    def test_empty_sequence(self) -> None:
        assert render_blocks([]) == ""

    def test_sorted_by_order_and_joined(self) -> None:
        blocks = [
            raw("text", {"text": "second"}, order=2),
            raw("heading", {"text": "first", "level": 1}, order=1),
        ]
        assert render_blocks(blocks) == '<h1 style="">first</h1>\n<p style="">second</p>'

    def test_ties_keep_insertion_order(self) -> None:
        blocks = [raw("text", {"text": "a"}), raw("text", {"text": "b"})]
        assert render_blocks(blocks) == '<p style="">a</p>\n<p style="">b</p>'

    def test_custom_separator(self) -> None:
        blocks = [raw("divider", {}), raw("divider", {})]
        assert render_blocks(blocks, RenderConfig(fragment_separator="")) == (
            '<hr style="" /><hr style="" />'
        )

    def test_does_not_mutate_input(self) -> None:
        blocks = [raw("text", {"text": "b"}, order=1), raw("text", {"text": "a"}, order=0)]
        snapshot = [dict(b) for b in blocks]
        render_blocks(blocks)
        assert blocks == snapshot


class TestComponent:
    def test_run_render(self, rules_port) -> None:
        out = run_render(RenderBlocksInput(blocks=[raw("divider", {})]), rules=rules_port)
        assert out.success is True
        assert out.html == '<hr style="" />'

    def test_run_render_page(self) -> None:
        page = ContentPage(
            title="T",
            slug="t",
            author_id="u",
            tenant_id="t",
            content=[ContentBlock(id="b1", kind="text", content={"text": "Hi"})],
        )
        out = run_render_page(RenderPageInput(page=page))
        assert out.html == '<p style="">Hi</p>'
        assert BlockRenderer().render_page(page) == out.html

    def test_run_dispatch(self) -> None:
        assert run(RenderBlocksInput(blocks=[])).html == ""
        with pytest.raises(ValueError, match="Unknown input type"):
            run([])  # type: ignore[arg-type]
