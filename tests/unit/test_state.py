from datetime import UTC, datetime, timedelta

import pytest

from content_engine.domain.entities import ContentPage
from content_engine.domain.state import InvalidTransitionError, can_transition, transition

NOW = datetime(2026, 6, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def draft() -> ContentPage:
    return ContentPage(title="Launch", slug="launch", author_id="u1", tenant_id="t1")


@pytest.mark.parametrize(
    ("current", "new", "allowed"),
    [
        ("draft", "published", True),
        ("draft", "archived", True),
        ("published", "archived", True),
        ("published", "draft", True),
        ("archived", "draft", True),
        ("archived", "published", False),
        ("draft", "draft", True),
    ],
)
def test_can_transition(current, new, allowed):
    assert can_transition(current, new) is allowed


def test_publish_sets_published_at(draft):
    published = transition(draft, "published", NOW)
    assert published.status == "published"
    assert published.published_at == NOW
    assert published.updated_at == NOW
    assert draft.status == "draft"
    assert draft.published_at is None


def test_republish_keeps_first_publish_time(draft):
    later = NOW + timedelta(days=1)
    published = transition(draft, "published", NOW)
    unpublished = transition(published, "draft", later)
    assert unpublished.published_at == NOW

    republished = transition(unpublished, "published", later)
    assert republished.published_at == NOW
    assert republished.updated_at == later


def test_archived_cannot_be_published(draft):
    archived = transition(draft, "archived", NOW)
    with pytest.raises(InvalidTransitionError) as exc_info:
        transition(archived, "published", NOW)
    assert exc_info.value.from_status == "archived"
    assert exc_info.value.to_status == "published"


def test_same_status_is_a_copy(draft):
    same = transition(draft, "draft", NOW)
    assert same == draft
    assert same is not draft
