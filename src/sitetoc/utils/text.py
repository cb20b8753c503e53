#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitetoc/utils/text.py
"""Text processing utilities.

Provides slugification for the anchors of headers built from document
headings.

Examples
--------
    >>> from sitetoc.utils.text import slugify
    >>> slugify("My Heading Title")
    'my-heading-title'

"""

from __future__ import annotations

import re
import unicodedata
from typing import Set


def slugify(text: str, *, seen_slugs: Set[str] | None = None, max_length: int = 100, separator: str = "-") -> str:
    """Create a URL-safe slug from text with collision avoidance.

    Generates GitHub-flavored Markdown compatible slugs by:
    - Normalizing Unicode characters (NFD decomposition) and dropping accents
    - Converting to lowercase
    - Replacing spaces and underscores with the separator
    - Removing characters other than ASCII letters, digits and the separator
    - Collapsing repeated separators and stripping them from both ends
    - Appending -2, -3, etc. on collisions when ``seen_slugs`` is given

    Parameters
    ----------
    text : str
        Text to slugify (e.g., heading text)
    seen_slugs : Set[str] or None, default = None
        Previously generated slugs. The new slug is added to the set.
    max_length : int, default = 100
        Maximum length of the slug before collision suffixes
    separator : str, default = "-"
        The separator between words in the slug

    Returns
    -------
    str
        URL-safe slug, unique within ``seen_slugs`` if provided

    Examples
    --------
        >>> slugify("API Reference (v2.0)")
        'api-reference-v20'
        >>> seen = set()
        >>> slugify("Introduction", seen_slugs=seen)
        'introduction'
        >>> slugify("Introduction", seen_slugs=seen)
        'introduction-2'
        >>> slugify("Café résumé")
        'cafe-resume'

    """
    normalized = unicodedata.normalize("NFD", text)
    normalized = "".join(char for char in normalized if unicodedata.category(char) != "Mn")

    slug = normalized.lower()
    slug = re.sub(r"[\s_]+", separator, slug)

    escaped_separator = re.escape(separator)
    slug = re.sub(rf"[^a-z0-9{escaped_separator}]", "", slug)
    slug = re.sub(rf"(?:{escaped_separator})+", separator, slug)
    slug = slug.strip(separator)

    if not slug:
        slug = "section"

    if len(slug) > max_length:
        slug = slug[:max_length].rstrip(separator)

    if seen_slugs is not None:
        if slug not in seen_slugs:
            seen_slugs.add(slug)
            return slug

        counter = 2
        while f"{slug}{separator}{counter}" in seen_slugs:
            counter += 1

        unique_slug = f"{slug}{separator}{counter}"
        seen_slugs.add(unique_slug)
        return unique_slug

    return slug


__all__ = [
    "slugify",
]
