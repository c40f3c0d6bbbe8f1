"""URL slugs for published events. Pure functions."""

import re

FALLBACK_SLUG = "event"

_DISALLOWED = re.compile(r"[^a-z0-9 -]")
_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile(r"-+")


def slugify_title(title: str) -> str:
    """
    Lowercase, drop characters outside [a-z0-9 -], turn whitespace runs into '-',
    collapse repeated '-', trim. Titles with nothing usable fall back to 'event'.
    """
    slug = _DISALLOWED.sub("", title.lower())
    slug = _WHITESPACE.sub("-", slug.strip())
    slug = _DASHES.sub("-", slug).strip("-")
    return slug or FALLBACK_SLUG


def numbered_slug(base: str, counter: int) -> str:
    """Slug with the uniqueness suffix appended, e.g. spring-gala-2."""
    if counter < 1:
        raise ValueError("slug counter starts at 1")
    return f"{base}-{counter}"
