"""Slug generation for published events."""

import pytest

from marketplace.domain.slugs import FALLBACK_SLUG, numbered_slug, slugify_title


@pytest.mark.parametrize(
    "title,expected",
    [
        ("Spring Gala!!!", "spring-gala"),
        ("  Rock & Roll -- Night  ", "rock-roll-night"),
        ("Jazz   in   the   Park 2025", "jazz-in-the-park-2025"),
        ("---Already-Slugged---", "already-slugged"),
        ("Café Night", "caf-night"),
    ],
)
def test_slugify_title(title, expected):
    assert slugify_title(title) == expected


def test_slugify_title_falls_back_when_nothing_usable():
    assert slugify_title("!!!") == FALLBACK_SLUG
    assert slugify_title("") == FALLBACK_SLUG


def test_numbered_slug_appends_counter():
    assert numbered_slug("spring-gala", 1) == "spring-gala-1"
    assert numbered_slug("spring-gala", 12) == "spring-gala-12"


def test_numbered_slug_rejects_zero():
    with pytest.raises(ValueError):
        numbered_slug("spring-gala", 0)
