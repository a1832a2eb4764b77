"""
Content component entry point tests.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from content_engine.adapters.clock import FixedClock
from content_engine.adapters.ids import SequentialIdGenerator
from content_engine.components.blocks import BlockFactory
from content_engine.components.content import (
    AddBlockInput,
    ApplyTemplateInput,
    CreatePageInput,
    CreateTemplateInput,
    MoveBlockInput,
    PreviewPageInput,
    RemoveBlockInput,
    ReorderBlocksInput,
    TransitionPageInput,
    UpdatePageInput,
    run,
    run_apply_template,
    run_create_page,
    run_create_template,
    run_preview,
    run_publish,
    run_remove_block,
    run_reorder_blocks,
    run_transition,
    run_update_page,
)
from content_engine.domain.entities import ContentPage


@pytest.fixture
def page(clock: FixedClock, factory: BlockFactory) -> ContentPage:
    out = run_create_page(
        CreatePageInput(
            title="About Us",
            author_id="user-1",
            tenant_id="tenant-1",
            content=[factory.create("heading"), factory.create("text", order=1)],
        ),
        time=clock,
    )
    assert out.page is not None
    return out.page


class TestCreateAndUpdate:
    def test_create_page_success(self, clock: FixedClock, rules_port) -> None:
        out = run_create_page(
            CreatePageInput(title="Hello World", author_id="u", tenant_id="t", tags=["a"]),
            time=clock,
            rules=rules_port,
        )
        assert out.success is True
        assert out.page is not None
        assert out.page.slug == "hello-world"
        assert out.page.tags == {"a"}

    def test_create_page_field_errors(self, clock: FixedClock) -> None:
        out = run_create_page(CreatePageInput(title="", author_id="u", tenant_id="t"), time=clock)
        assert out.success is False
        assert out.page is None
        assert [e.code for e in out.errors] == ["title_required", "slug_required"]

    def test_create_page_unknown_block_kind(self, clock: FixedClock) -> None:
        out = run_create_page(
            CreatePageInput(
                title="T", author_id="u", tenant_id="t", content=[{"type": "carousel"}]
            ),
            time=clock,
        )
        assert out.success is False
        assert out.errors[0].code == "unknown_block_kind"

    def test_update_page(self, clock: FixedClock, page: ContentPage) -> None:
        out = run_update_page(UpdatePageInput(page=page, updates={"title": "Team"}), time=clock)
        assert out.success is True
        assert out.page is not None
        assert out.page.title == "Team"

    def test_update_page_invalid_slug(self, clock: FixedClock, page: ContentPage) -> None:
        inp = UpdatePageInput(page=page, updates={"slug": "Not Valid"})
        out = run_update_page(inp, time=clock)
        assert out.success is False
        assert out.errors[0].code == "slug_invalid"

    def test_update_page_bad_value(self, clock: FixedClock, page: ContentPage) -> None:
        out = run_update_page(UpdatePageInput(page=page, updates={"tags": 5}), time=clock)
        assert out.success is False
        assert out.errors[0].code == "invalid_input"


class TestEditing:
    def test_remove_unknown_block(self, page: ContentPage) -> None:
        out = run_remove_block(RemoveBlockInput(page=page, block_id="missing"))
        assert out.success is False
        assert out.errors[0].code == "block_not_found"
        assert out.errors[0].block_id == "missing"

    def test_reorder_not_a_permutation(self, page: ContentPage) -> None:
        out = run_reorder_blocks(ReorderBlocksInput(page=page, block_ids=[page.content[0].id]))
        assert out.success is False
        assert out.errors[0].code == "invalid_input"

    def test_dispatch_editing_inputs(self, page: ContentPage, factory: BlockFactory) -> None:
        first, second = (b.id for b in page.content)

        added = run(AddBlockInput(page=page, block=factory.create("divider")))
        assert added.success is True
        moved = run(MoveBlockInput(page=page, block_id=second, index=0))
        assert [b.id for b in moved.page.content] == [second, first]


class TestLifecycle:
    def test_publish_success(self, clock: FixedClock, page: ContentPage, rules_port) -> None:
        out = run_publish(
            TransitionPageInput(page=page, to_status="published"), time=clock, rules=rules_port
        )
        assert out.success is True
        assert out.page is not None
        assert out.page.status == "published"

    def test_publish_guard_errors(self, page: ContentPage, factory: BlockFactory) -> None:
        broken = run(AddBlockInput(page=page, block=factory.create("image"))).page
        out = run_publish(TransitionPageInput(page=broken, to_status="published"))
        assert out.success is False
        assert [e.code for e in out.errors] == ["missing_src"]

    def test_publish_missing_media(self, page: ContentPage, factory: BlockFactory) -> None:
        media = MagicMock()
        media.resolve.return_value = False
        with_image = run(
            AddBlockInput(page=page, block=factory.create("image", {"src": "/gone.png"}))
        ).page
        out = run_transition(
            TransitionPageInput(page=with_image, to_status="published"), media=media
        )
        assert [e.code for e in out.errors] == ["missing_media"]

    def test_invalid_transition(self, page: ContentPage) -> None:
        archived = run_transition(TransitionPageInput(page=page, to_status="archived")).page
        out = run_transition(TransitionPageInput(page=archived, to_status="published"))
        assert out.success is False
        assert out.errors[0].code == "invalid_transition"
        assert out.errors[0].field == "status"


class TestTemplatesAndPreview:
    def test_create_and_apply_template(self, page: ContentPage, factory: BlockFactory) -> None:
        created = run_create_template(
            CreateTemplateInput(
                name="Hero",
                category="layout",
                created_by="u",
                tenant_id="t",
                content=[factory.create("image", {"src": "/hero.png"})],
            ),
            ids=SequentialIdGenerator("tpl"),
        )
        assert created.success is True
        assert created.template is not None
        assert created.template.content[0].id == "tpl_1"

        applied = run_apply_template(
            ApplyTemplateInput(page=page, template=created.template, position=0),
            ids=SequentialIdGenerator("copy"),
        )
        assert applied.success is True
        assert applied.page.content[0].id == "copy_1"

    def test_create_template_unknown_kind(self) -> None:
        out = run_create_template(
            CreateTemplateInput(
                name="Bad", category="c", created_by="u", tenant_id="t", content=[{"type": "x"}]
            )
        )
        assert out.success is False
        assert out.errors[0].code == "unknown_block_kind"

    def test_preview_reports_findings(self, page: ContentPage, factory: BlockFactory) -> None:
        broken = run(AddBlockInput(page=page, block=factory.create("video"))).page
        out = run_preview(PreviewPageInput(page=broken))
        assert out.success is True
        assert "<video" in out.html
        assert [f.code for f in out.findings] == ["missing_src"]

    def test_run_rejects_unknown_input(self) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run(object())  # type: ignore[arg-type]
