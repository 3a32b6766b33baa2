"""Text utilities for building post slugs."""

import re
import unicodedata

RESERVED_URL_CHARACTERS = frozenset("!#$&'()*,/:;=?@[]\"%.<>\\^_{}|~`+")

_NON_SLUG_CHARS = re.compile(r'[^a-z0-9-]')


def remove_diacritics(text: str) -> str:
    """
    Strip combining marks from text.

    Accented letters are decomposed so the base letter survives:
    "café" becomes "cafe".
    """
    normalized = unicodedata.normalize("NFD", text)
    stripped = "".join(c for c in normalized if unicodedata.category(c) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def remove_reserved_url_characters(text: str) -> str:
    """Delete punctuation that carries meaning inside a URL."""
    return "".join(c for c in text if c not in RESERVED_URL_CHARACTERS)


def remove_non_slug_characters(text: str) -> str:
    """Delete anything that is not a lowercase ASCII letter, digit or hyphen."""
    return _NON_SLUG_CHARS.sub('', text)


def create_slug(title: str | None, max_length: int = 50) -> str:
    """
    Convert a post title to a URL slug.

    Args:
        title: Title to convert, None is treated as empty
        max_length: Maximum slug length, negative values act as 0

    Returns:
        Slug made of lowercase ASCII letters, digits and hyphens
    """
    if not title:
        return ""

    slug = title.lower().replace(" ", "-")

    # Must run before reserved characters go, the base letter is kept
    slug = remove_diacritics(slug)
    slug = remove_reserved_url_characters(slug)
    slug = remove_non_slug_characters(slug)

    # Plain prefix cut, may end mid-word or on a hyphen
    max_length = max(max_length, 0)
    if len(slug) > max_length:
        slug = slug[:max_length]

    return slug.lower()
