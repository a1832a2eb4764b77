import pytest

from content_engine.domain.slug import is_valid_slug, slugify


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Hello World", "hello-world"),
        ("  Hello,   World!  ", "hello-world"),
        ("Spring Sale -- 50% Off", "spring-sale-50-off"),
        ("already-a-slug", "already-a-slug"),
        ("Tabs\tand\nnewlines", "tabs-and-newlines"),
        ("---", ""),
        ("", ""),
        ("Café Menu", "caf-menu"),
    ],
)
def test_slugify(title, expected):
    assert slugify(title) == expected


def test_slugify_is_idempotent():
    for title in ["Hello World", "A -- B", "x!!y", "  lead and trail  "]:
        once = slugify(title)
        assert slugify(once) == once


def test_distinct_titles_may_collide():
    assert slugify("Hello World") == slugify("hello, world")


@pytest.mark.parametrize(
    ("slug", "valid"),
    [
        ("hello-world", True),
        ("a1", True),
        ("", False),
        ("-hello", False),
        ("hello-", False),
        ("hello--world", False),
        ("Hello", False),
        ("hello\n", False),
    ],
)
def test_is_valid_slug(slug, valid):
    assert is_valid_slug(slug) is valid
